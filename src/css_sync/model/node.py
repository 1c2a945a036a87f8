"""Stylesheet tree model: a single Node record tagged by NodeKind."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class NodeKind(StrEnum):
    BLOCK = "block"
    LEAF = "leaf"
    HEADER = "header"  # formatter-internal, never produced by the parser
    COMMENT = "comment"  # standalone comment inserted by external tooling


@dataclass
class Node:
    """A unit of the parsed stylesheet tree.

    ``block`` nodes carry a ``selector`` (``None`` for the document root) and
    ordered ``children``.  ``leaf`` nodes carry the raw declaration text in
    ``content``, exactly as it appeared between separators.  Every node keeps
    the comments that were attached to it in ``comments``.

    Nodes are mutable so that sync tooling can reorder and annotate a tree
    between parsing and formatting.
    """

    kind: NodeKind
    selector: str | None = None
    content: str = ""
    children: list[Node] = field(default_factory=list)
    comments: list[str] = field(default_factory=list)

    @classmethod
    def root(cls) -> Node:
        return cls(kind=NodeKind.BLOCK)

    @classmethod
    def block(
        cls,
        selector: str | None,
        children: list[Node] | None = None,
        comments: list[str] | None = None,
    ) -> Node:
        return cls(
            kind=NodeKind.BLOCK,
            selector=selector,
            children=list(children or []),
            comments=list(comments or []),
        )

    @classmethod
    def leaf(cls, content: str, comments: list[str] | None = None) -> Node:
        return cls(kind=NodeKind.LEAF, content=content, comments=list(comments or []))

    @property
    def is_root(self) -> bool:
        return self.kind is NodeKind.BLOCK and self.selector is None

    @property
    def is_declaration(self) -> bool:
        """True for ``prop: value`` leaves; at-rule leaves are excluded."""
        if self.kind is not NodeKind.LEAF or not self.content:
            return False
        return ":" in self.content and not self.content.strip().startswith("@")

    @property
    def property_name(self) -> str:
        """Return the text before the first ``:``, trimmed."""
        return self.content.split(":", 1)[0].strip()
