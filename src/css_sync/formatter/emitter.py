"""Render a stylesheet tree back to canonical CSS text.

Declarations inside each block are grouped and ordered by a category spec,
with category header comments regenerated from that spec on every run.
Formatting is idempotent: formatting already formatted output is a no-op.
"""

from __future__ import annotations

from collections.abc import Sequence

from css_sync.formatter.grouping import plan_declarations
from css_sync.formatter.headers import HeaderMatcher
from css_sync.model.category import CategorySpec, coerce_spec
from css_sync.model.node import Node, NodeKind

__all__ = ["format_css", "INDENT"]

INDENT = "\t"


def _clean_statement(content: str) -> str:
    return content.strip().rstrip(";").rstrip()


def _close_comment(comment: str) -> str:
    """Terminate a comment that ran to end of input so it re-parses the same."""
    if len(comment) >= 4 and comment.endswith("*/"):
        return comment
    return comment.rstrip() + " */"


def _normalize_declaration(clean: str) -> str:
    """Render ``prop:value`` as ``prop: value``; the value text is untouched."""
    prop, _, value = clean.partition(":")
    value = value.strip()
    return f"{prop.strip()}: {value}" if value else f"{prop.strip()}:"


class _Emitter:
    def __init__(self, spec: Sequence[CategorySpec], headers: bool) -> None:
        self.spec = spec
        self.headers = headers
        self.matcher = HeaderMatcher.from_spec(spec)
        self.lines: list[str] = []

    def emit_comments(self, comments: Sequence[str], indent: str) -> None:
        for comment in comments:
            if self.matcher.is_suppressed(comment):
                continue
            self.lines.append(f"{indent}{_close_comment(comment)}")

    def emit(self, node: Node, depth: int) -> None:
        indent = INDENT * depth
        if node.kind is NodeKind.LEAF:
            self.emit_comments(node.comments, indent)
            clean = _clean_statement(node.content)
            if clean and node.is_declaration:
                clean = _normalize_declaration(clean)
            if clean:
                self.lines.append(f"{indent}{clean};")
        elif node.kind is NodeKind.COMMENT:
            self.emit_comments([node.content], indent)
        elif node.kind is NodeKind.HEADER:
            self.lines.append("")
            if node.content:
                self.lines.append(f"{indent}{node.content}")
        elif node.is_root:
            self.emit_children(node, depth)
            self.emit_comments(node.comments, indent)
        else:
            self.emit_comments(node.comments, indent)
            self.lines.append(f"{indent}{node.selector} {{")
            start = len(self.lines)
            self.emit_children(node, depth + 1)
            if len(self.lines) == start:
                self.lines.append("")
            self.lines.append(f"{indent}}}")

    def partition(self, children: Sequence[Node]) -> tuple[list[Node], list[Node]]:
        declarations: list[Node] = []
        others: list[Node] = []
        for child in children:
            if child.kind is NodeKind.HEADER:
                continue
            if child.kind is NodeKind.COMMENT and self.matcher.is_header(child.content):
                continue
            if child.is_declaration:
                declarations.append(child)
            else:
                others.append(child)
        return declarations, others

    def emit_children(self, node: Node, depth: int) -> None:
        declarations, others = self.partition(node.children)
        ordered: list[Node] = []
        if declarations:
            ordered = plan_declarations(declarations, self.spec, headers=self.headers)

        start = len(self.lines)
        previous_was_block = False
        for child in [*ordered, *others]:
            is_block = child.kind is NodeKind.BLOCK
            if len(self.lines) > start and (is_block or previous_was_block):
                self.lines.append("")
            self.emit(child, depth)
            previous_was_block = is_block

    def render(self, root: Node) -> str:
        self.emit(root, 0)
        lines = self.lines
        while lines and not lines[0].strip():
            lines.pop(0)
        while lines and not lines[-1].strip():
            lines.pop()
        if not lines:
            return ""
        return "\n".join(lines) + "\n"


def format_css(
    root: Node,
    spec: Sequence[CategorySpec] | Sequence[dict] | None = (),
    *,
    headers: bool = True,
) -> str:
    """Format a parsed tree into CSS text.

    *spec* is an ordered list of categories, either ``CategorySpec`` objects
    or their loaded JSON form.  An empty (or non-list) spec groups every
    declaration into one bucket sorted by property name.  With
    ``headers=False`` no ``/* CATEGORY */`` labels are generated.
    """
    return _Emitter(coerce_spec(spec), headers).render(root)
