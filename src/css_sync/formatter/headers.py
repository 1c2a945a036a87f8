"""Classification of comments the formatter owns and regenerates."""

from __future__ import annotations

import re
from collections.abc import Iterable

from css_sync.model.category import AUTO_GENERATED_MARKER, ELSE_CATEGORY, CategorySpec

_DELIMITERS_RE = re.compile(r"^/\*+|\*+/$")

# Any all-caps comment is treated as a category header so that headers left
# over from an older spec ("ghost headers") are dropped and not duplicated.
# Lossy: a genuine all-caps comment such as /* TODO */ is dropped too.
_GHOST_HEADER_RE = re.compile(r"[A-Z_\s]+")


def comment_text(comment: str) -> str:
    """Strip ``/*`` and ``*/`` delimiters and surrounding whitespace."""
    return _DELIMITERS_RE.sub("", comment).strip()


class HeaderMatcher:
    """Decides which comments are category headers for a given spec."""

    def __init__(self, categories: Iterable[str]) -> None:
        self._names = {name.upper() for name in categories if name}
        self._names.add(ELSE_CATEGORY.upper())

    @classmethod
    def from_spec(cls, spec: Iterable[CategorySpec]) -> HeaderMatcher:
        return cls(entry.category for entry in spec)

    def is_header(self, comment: str) -> bool:
        text = comment_text(comment)
        if not text:
            return False
        if text.upper() in self._names:
            return True
        return _GHOST_HEADER_RE.fullmatch(text) is not None

    def is_suppressed(self, comment: str) -> bool:
        """True for comments that must not be emitted verbatim."""
        return comment.strip() == AUTO_GENERATED_MARKER or self.is_header(comment)


def render_header(category: str) -> str:
    return f"/* {category} */"
