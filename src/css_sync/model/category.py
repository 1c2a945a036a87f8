"""Category spec model: named keyword lists that drive declaration grouping."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

# Comment written into freshly generated module files.  Matched exactly.
AUTO_GENERATED_MARKER = "/* Auto-generated */"

# Label of the implicit trailing bucket.  Matched case-insensitively.
ELSE_CATEGORY = "ELSE"

WILDCARD_SUFFIX = "..."


def keyword_matches(keyword: str, prop: str) -> bool:
    """Return True if *prop* is matched by *keyword*.

    A keyword ending in ``...`` is a prefix family: ``margin...`` matches
    ``margin`` itself and any hyphen-extended property such as ``margin-top``.
    """
    if keyword.endswith(WILDCARD_SUFFIX):
        base = keyword[: -len(WILDCARD_SUFFIX)]
        return prop == base or prop.startswith(base + "-")
    return prop == keyword


@dataclass(frozen=True)
class CategorySpec:
    """A named group of property keywords.

    Keyword order is significant: it is the primary sort key for declarations
    that fall into this category.
    """

    category: str
    keywords: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, entry: object) -> CategorySpec:
        """Build a spec from a loaded JSON entry.

        Malformed entries never raise; they produce a spec whose keyword list
        is empty so it simply matches nothing.
        """
        if not isinstance(entry, Mapping):
            return cls(category="")
        category = entry.get("category")
        keywords = entry.get("keywords")
        if not isinstance(category, str) or not isinstance(keywords, (list, tuple)):
            return cls(category=category if isinstance(category, str) else "")
        return cls(
            category=category,
            keywords=tuple(k for k in keywords if isinstance(k, str)),
        )

    def matches(self, prop: str) -> bool:
        return any(keyword_matches(k, prop) for k in self.keywords)

    def rank(self, prop: str) -> int:
        """Position of the first keyword matching *prop*, else ``len(keywords)``."""
        for index, keyword in enumerate(self.keywords):
            if keyword_matches(keyword, prop):
                return index
        return len(self.keywords)

    def to_dict(self) -> dict[str, object]:
        return {"category": self.category, "keywords": list(self.keywords)}


def coerce_spec(entries: object) -> list[CategorySpec]:
    """Normalize loaded JSON entries (or CategorySpec objects) into specs.

    Anything that is not a list or tuple degrades to an empty spec.
    """
    if not isinstance(entries, (list, tuple)):
        return []
    return [
        entry if isinstance(entry, CategorySpec) else CategorySpec.from_dict(entry)
        for entry in entries
    ]
