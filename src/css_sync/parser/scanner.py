"""Hand-written recursive-descent parser for CSS module files.

The parser is lossless with respect to declarations and comments: every
``/* ... */`` comment is attached to the node that follows it (or to the
enclosing block when nothing follows), and declaration text is kept verbatim.

Syntax handled:
    @import "base.css";
    /* comment */
    .card:hover { color: red; & .icon { fill: currentColor; } }
    @media (max-width: 600px) { .card { display: none; } }

Malformed input never raises: unterminated comments and blocks simply run to
the end of the input, and an unclosed string stops at the end of its line.
"""

from __future__ import annotations

from css_sync.model.node import Node

__all__ = ["parse"]

_WHITESPACE = frozenset(" \t\n\r\f")
_QUOTES = frozenset("'\"")
_HEAD_STOPS = frozenset("{;}")


class _Scanner:
    """Forward-only cursor over the source text."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self.end = len(text)

    def at_end(self) -> bool:
        return self.pos >= self.end

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < self.end else ""

    def advance(self) -> None:
        self.pos += 1

    def skip_whitespace(self) -> None:
        while self.pos < self.end and self.text[self.pos] in _WHITESPACE:
            self.pos += 1

    def read_comment(self) -> str | None:
        """Read a ``/* ... */`` span at the cursor, or return None."""
        if not self.text.startswith("/*", self.pos):
            return None
        close = self.text.find("*/", self.pos + 2)
        stop = self.end if close == -1 else close + 2
        comment = self.text[self.pos:stop]
        self.pos = stop
        return comment

    def read_head(self) -> str:
        """Read selector or declaration text up to the first unquoted ``{;}``."""
        start = self.pos
        quote: str | None = None
        while self.pos < self.end:
            char = self.text[self.pos]
            if char == "\\":
                self.pos += 2
                continue
            if quote:
                # An unescaped newline ends an unclosed string.
                if char == quote or char == "\n":
                    quote = None
            elif char in _QUOTES:
                quote = char
            elif char in _HEAD_STOPS:
                break
            self.pos += 1
        self.pos = min(self.pos, self.end)
        return self.text[start:self.pos]


def _parse_children(scanner: _Scanner, parent: Node, *, top_level: bool) -> list[str]:
    """Consume statements into *parent* until its closing brace or end of input.

    Returns the comments that were left pending when the scope closed.
    """
    pending: list[str] = []
    while not scanner.at_end():
        scanner.skip_whitespace()
        comment = scanner.read_comment()
        if comment is not None:
            pending.append(comment)
            continue

        char = scanner.peek()
        if not char:
            break
        if char == "}":
            scanner.advance()
            if top_level:
                continue  # stray closing brace
            break

        head = scanner.read_head()
        stop = scanner.peek()

        if stop == "{":
            scanner.advance()
            selector = head.strip()
            block = Node.block(selector, comments=pending)
            pending = []
            trailing = _parse_children(scanner, block, top_level=False)
            if selector:
                block.comments.extend(trailing)
                parent.children.append(block)
            else:
                # Anonymous brace group: keep its contents at this level.
                if block.children:
                    block.children[0].comments[:0] = block.comments
                    pending = trailing
                else:
                    pending = block.comments + trailing
                parent.children.extend(block.children)
            continue

        if stop == ";":
            scanner.advance()
        if not head.strip():
            continue
        parent.children.append(Node.leaf(head, comments=pending))
        pending = []

    return pending


def parse(text: str) -> Node:
    """Parse CSS *text* into a root block Node.

    The root has ``selector=None``; its children are the top-level statements
    in source order.  Comments left over at the end of the file are attached
    to the root itself.
    """
    scanner = _Scanner(text)
    root = Node.root()
    root.comments.extend(_parse_children(scanner, root, top_level=True))
    return root
