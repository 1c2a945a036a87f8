"""Reorder a module stylesheet to follow the order classes are used in."""

from __future__ import annotations

from collections.abc import Sequence

from css_sync.model.node import Node
from css_sync.sync.classes import has_content, selector_classes

UNUSED_MARKER = "/* unused class */"


def update_marker(node: Node, unused: bool) -> None:
    """Drop stale unused markers from *node* and add a fresh one if *unused*."""
    node.comments = [
        c for c in node.comments if "UNUSED" not in c and c != UNUSED_MARKER
    ]
    if unused:
        node.comments.insert(0, UNUSED_MARKER)


def sync_tree(root: Node, used: Sequence[str]) -> Node:
    """Rewrite ``root.children`` in place for the classes a component uses.

    1. Blocks for used classes come first, in usage order.  A class with no
       block gets an empty ``.name`` block.
    2. Statements that mention no class (imports, keyframes, comments) follow
       in their original order.
    3. Blocks whose classes are all unused are kept and marked if they have
       content, and removed if empty.
    """
    by_class: dict[str, list[int]] = {}
    for index, child in enumerate(root.children):
        for name in selector_classes(child):
            by_class.setdefault(name, []).append(index)

    reordered: list[Node] = []
    moved: set[int] = set()
    for name in used:
        indexes = by_class.get(name)
        if not indexes:
            reordered.append(Node.block(f".{name}"))
            continue
        for index in indexes:
            if index in moved:
                continue
            update_marker(root.children[index], unused=False)
            reordered.append(root.children[index])
            moved.add(index)

    for index, child in enumerate(root.children):
        if index in moved:
            continue
        if not selector_classes(child):
            reordered.append(child)
        elif has_content(child):
            update_marker(child, unused=True)
            reordered.append(child)

    root.children = reordered
    return root
