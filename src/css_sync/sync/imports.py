"""Keep a component's ``import styles from "./X.module.css";`` line canonical."""

from __future__ import annotations

import re

_STYLES_IMPORT_RE = re.compile(
    r"""^import\s+styles\s+from\s+["'][^"']+["'];?[ \t]*\n?""", re.MULTILINE
)

# Leading comments plus an optional "use client" directive: the import goes
# right after them.
_PREAMBLE_RE = re.compile(
    r"""
    (?P<comments>\s*(?:/\*[\s\S]*?\*/\s*|//[^\n]*\s*)*)
    (?P<directive>["']use\ client["'];?[ \t]*\n?)?
    """,
    re.VERBOSE,
)


def import_line(css_name: str) -> str:
    return f'import styles from "./{css_name}";'


def inject_import(source: str, css_name: str) -> str:
    """Return *source* with exactly one styles import pointing at *css_name*."""
    stripped = _STYLES_IMPORT_RE.sub("", source)
    match = _PREAMBLE_RE.match(stripped)
    insert_at = match.end() if match else 0
    prefix = stripped[:insert_at]
    if prefix and not prefix.endswith("\n"):
        prefix += "\n"
    return f"{prefix}{import_line(css_name)}\n{stripped[insert_at:]}"
