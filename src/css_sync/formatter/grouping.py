"""Declaration bucketing, ordering, and separator planning."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from css_sync.formatter.headers import render_header
from css_sync.model.category import CategorySpec
from css_sync.model.node import Node, NodeKind

# Blocks with fewer declarations than this are never split by spacers.
SPACER_MIN_DECLARATIONS = 7
# Minimum size of the incoming bucket, and of what precedes it, for a spacer.
SPACER_MIN_GROUP = 2


@dataclass
class Bucket:
    """Declarations that matched one spec entry (``spec is None`` for ELSE)."""

    index: int
    spec: CategorySpec | None
    items: list[Node] = field(default_factory=list)

    def sort(self) -> None:
        if self.spec is None:
            self.items.sort(key=lambda n: n.property_name)
            return
        spec = self.spec
        self.items.sort(key=lambda n: (spec.rank(n.property_name), n.property_name))


def category_index(prop: str, spec: Sequence[CategorySpec]) -> int:
    """Index of the first spec entry matching *prop*, else ``len(spec)``."""
    for index, entry in enumerate(spec):
        if entry.matches(prop):
            return index
    return len(spec)


def group_declarations(
    declarations: Sequence[Node], spec: Sequence[CategorySpec]
) -> list[Bucket]:
    """Distribute *declarations* into sorted, non-empty buckets in spec order.

    The unmatched (ELSE) bucket always comes last.  Sorting is stable, so
    repeated properties keep their source order.
    """
    buckets: dict[int, Bucket] = {}
    else_bucket = Bucket(index=len(spec), spec=None)

    for decl in declarations:
        index = category_index(decl.property_name, spec)
        if index == len(spec):
            else_bucket.items.append(decl)
            continue
        if index not in buckets:
            buckets[index] = Bucket(index=index, spec=spec[index])
        buckets[index].items.append(decl)

    ordered = [buckets[index] for index in sorted(buckets)]
    if else_bucket.items:
        ordered.append(else_bucket)
    for bucket in ordered:
        bucket.sort()
    return ordered


def _header(content: str) -> Node:
    return Node(kind=NodeKind.HEADER, content=content)


def plan_declarations(
    declarations: Sequence[Node],
    spec: Sequence[CategorySpec],
    *,
    headers: bool = True,
) -> list[Node]:
    """Return declarations in emission order, interleaved with header nodes.

    A header node with empty content is a spacer (a blank line).  A header
    node with content is a category label, which carries its own blank line,
    so a spacer is never added in front of it.
    """
    total = len(declarations)
    planned: list[Node] = []
    emitted = 0

    for position, bucket in enumerate(group_declarations(declarations, spec)):
        if headers and bucket.spec is not None:
            planned.append(_header(render_header(bucket.spec.category)))
        elif (
            total >= SPACER_MIN_DECLARATIONS
            and position > 0
            and len(bucket.items) >= SPACER_MIN_GROUP
            and emitted >= SPACER_MIN_GROUP
        ):
            planned.append(_header(""))
        planned.extend(bucket.items)
        emitted += len(bucket.items)

    return planned
