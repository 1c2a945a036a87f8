"""File-level sync operations between components and their CSS modules."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from css_sync.formatter import format_css
from css_sync.model.category import AUTO_GENERATED_MARKER, CategorySpec
from css_sync.parser import parse
from css_sync.sync.classes import extract_classes
from css_sync.sync.imports import inject_import
from css_sync.sync.reorder import sync_tree

logger = logging.getLogger(__name__)

COMPONENT_SUFFIXES = (".jsx", ".tsx")
MODULE_SUFFIX = ".module.css"

# Only PascalCase component files get a generated module.
_COMPONENT_NAME_RE = re.compile(r"^[A-Z][^ ]*$")


@dataclass(frozen=True)
class SyncResult:
    """What a component sync changed on disk."""

    component: Path
    css_path: Path | None = None
    created: bool = False
    css_changed: bool = False
    import_changed: bool = False

    @property
    def changed(self) -> bool:
        return self.created or self.css_changed or self.import_changed


def is_component(path: Path) -> bool:
    return path.suffix in COMPONENT_SUFFIXES


def module_path_for(component: Path) -> Path:
    return component.with_name(f"{component.stem}{MODULE_SUFFIX}")


def resolve_css_path(component: Path, *, gen: bool = False) -> tuple[Path | None, bool]:
    """Find the module stylesheet for *component*, creating it in gen mode.

    Returns ``(path, created)``; ``path`` is None when no module exists and
    none may be generated.
    """
    module_path = module_path_for(component)
    if module_path.exists():
        return module_path, False
    if gen and _COMPONENT_NAME_RE.match(component.stem):
        module_path.write_text(f"{AUTO_GENERATED_MARKER}\n", encoding="utf-8")
        logger.info("Generated: %s", module_path)
        return module_path, True
    return None, False


def format_css_file(
    path: str | Path, spec: Sequence[CategorySpec] = (), *, headers: bool = True
) -> bool:
    """Format a stylesheet in place.  Returns True if the file was rewritten."""
    css_path = Path(path)
    try:
        css = css_path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.warning("Cannot read %s: %s", css_path, exc)
        return False

    out = format_css(parse(css), spec, headers=headers)
    if out == css:
        return False
    css_path.write_text(out, encoding="utf-8")
    logger.info("Formatted: %s", css_path)
    return True


def sync_component(
    component: str | Path,
    spec: Sequence[CategorySpec] = (),
    *,
    gen: bool = False,
    headers: bool = True,
) -> SyncResult:
    """Bring a component's CSS module in line with the classes it uses.

    In gen mode a missing module is generated and the component's styles
    import is kept canonical.  Unreadable files are logged and skipped.
    """
    component = Path(component)
    try:
        source = component.read_text(encoding="utf-8")
    except OSError as exc:
        logger.warning("Cannot read %s: %s", component, exc)
        return SyncResult(component=component)

    used = extract_classes(source)
    if gen and not used and not module_path_for(component).exists():
        return SyncResult(component=component)

    css_path, created = resolve_css_path(component, gen=gen)
    if css_path is None:
        return SyncResult(component=component)

    try:
        css = css_path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.warning("Cannot read %s: %s", css_path, exc)
        return SyncResult(component=component, css_path=css_path, created=created)

    import_changed = False
    if gen and used:
        updated = inject_import(source, css_path.name)
        if updated != source:
            component.write_text(updated, encoding="utf-8")
            import_changed = True
            logger.debug("Updated styles import: %s", component)

    root = sync_tree(parse(css), used)
    out = format_css(root, spec, headers=headers)
    css_changed = out != css
    if css_changed:
        css_path.write_text(out, encoding="utf-8")
        logger.info("Updated: %s", css_path)

    return SyncResult(
        component=component,
        css_path=css_path,
        created=created,
        css_changed=css_changed,
        import_changed=import_changed,
    )


def find_orphans(directory: Path) -> list[Path]:
    """Module stylesheets in *directory* with no sibling component file."""
    orphans: list[Path] = []
    for css_path in sorted(directory.glob(f"*{MODULE_SUFFIX}")):
        base = css_path.name[: -len(MODULE_SUFFIX)]
        if not any((directory / f"{base}{suffix}").exists() for suffix in COMPONENT_SUFFIXES):
            orphans.append(css_path)
    return orphans


def adopt_orphan(component: Path) -> Path | None:
    """Rename the single orphan module next to a new *component* to match it.

    Covers a component file being renamed: its old module is left orphaned
    and follows the new name.  Nothing happens when there is no orphan, when
    the target module already exists, or when several orphans make the match
    ambiguous.
    """
    orphans = find_orphans(component.parent)
    if not orphans:
        return None
    if len(orphans) > 1:
        logger.warning(
            "Multiple orphan %s files in %s; skipping rename: %s",
            MODULE_SUFFIX,
            component.parent,
            ", ".join(p.name for p in orphans),
        )
        return None

    target = module_path_for(component)
    if target.exists():
        return None
    orphans[0].rename(target)
    logger.info("Renamed: %s -> %s", orphans[0].name, target.name)
    return target
