"""css_sync model layer -- public type re-exports."""

from css_sync.model.category import (
    AUTO_GENERATED_MARKER,
    ELSE_CATEGORY,
    CategorySpec,
    coerce_spec,
    keyword_matches,
)
from css_sync.model.node import Node, NodeKind

__all__ = [
    # node
    "Node",
    "NodeKind",
    # category
    "CategorySpec",
    "coerce_spec",
    "keyword_matches",
    "AUTO_GENERATED_MARKER",
    "ELSE_CATEGORY",
]
