"""Component <-> CSS module synchronisation."""

from css_sync.sync.classes import extract_classes, has_content, selector_classes
from css_sync.sync.files import (
    SyncResult,
    adopt_orphan,
    find_orphans,
    format_css_file,
    module_path_for,
    resolve_css_path,
    sync_component,
)
from css_sync.sync.imports import inject_import
from css_sync.sync.reorder import UNUSED_MARKER, sync_tree, update_marker

__all__ = [
    "extract_classes",
    "has_content",
    "selector_classes",
    "SyncResult",
    "adopt_orphan",
    "find_orphans",
    "format_css_file",
    "module_path_for",
    "resolve_css_path",
    "sync_component",
    "inject_import",
    "UNUSED_MARKER",
    "sync_tree",
    "update_marker",
]
