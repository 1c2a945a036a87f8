"""css_sync: lossless CSS module parser and category-sorting formatter."""
from __future__ import annotations

__version__ = "0.1.0"

from css_sync.formatter import format_css
from css_sync.model import CategorySpec, Node, NodeKind
from css_sync.parser import parse

__all__ = [
    "__version__",
    "parse",
    "format_css",
    "Node",
    "NodeKind",
    "CategorySpec",
]
