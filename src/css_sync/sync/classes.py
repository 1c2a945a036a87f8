"""Find the CSS module classes a component uses and the ones a tree defines."""

from __future__ import annotations

import re

from css_sync.model.node import Node, NodeKind

_BLOCK_COMMENT_RE = re.compile(r"/\*[\s\S]*?\*/")
_LINE_COMMENT_RE = re.compile(r"//.*$", re.MULTILINE)
_BRACKET_ACCESS_RE = re.compile(r"""\bstyles\[(["'])([\w-]+)\1\]""")
_STRING_RE = re.compile(r"""(["'])(?:\\.|(?!\1)[\s\S])*\1""")
_USAGE_RE = re.compile(r"__SB_([\w-]+)__|\bstyles\.([A-Za-z_]\w*)\b")
_SELECTOR_CLASS_RE = re.compile(r"\.([A-Za-z_][\w-]*)")


def extract_classes(code: str) -> list[str]:
    """Return class names used as ``styles.name`` or ``styles["name"]``.

    Names are de-duplicated and returned in order of first use, with dot and
    bracket access interleaved as they appear (they are not grouped by access
    style).  Usages that only appear inside comments or string literals are
    ignored.
    """
    code = _BLOCK_COMMENT_RE.sub(" ", code)
    code = _LINE_COMMENT_RE.sub(" ", code)
    # Protect bracket keys before string literals are blanked out.
    code = _BRACKET_ACCESS_RE.sub(lambda m: f" __SB_{m.group(2)}__ ", code)
    code = _STRING_RE.sub(" ", code)

    seen: set[str] = set()
    used: list[str] = []
    for match in _USAGE_RE.finditer(code):
        name = match.group(1) or match.group(2)
        if name not in seen:
            seen.add(name)
            used.append(name)
    return used


def selector_classes(node: Node) -> set[str]:
    """Return the class names mentioned in a block's selector."""
    if node.kind is not NodeKind.BLOCK or not node.selector:
        return set()
    return set(_SELECTOR_CLASS_RE.findall(node.selector))


def has_content(node: Node) -> bool:
    """True if *node* is a non-empty leaf or contains one."""
    if node.kind is NodeKind.LEAF:
        return bool(node.content)
    return any(has_content(child) for child in node.children)
