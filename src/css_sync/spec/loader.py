"""Load category specs from JSON files, falling back to the built-in default."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from css_sync.model.category import CategorySpec, coerce_spec
from css_sync.spec.defaults import DEFAULT_SORT_SPEC
from css_sync.spec.errors import SpecLoadError

logger = logging.getLogger(__name__)


def default_spec() -> list[CategorySpec]:
    return coerce_spec(DEFAULT_SORT_SPEC)


def load_spec(path: str | Path) -> list[CategorySpec]:
    """Read a category spec from a JSON file.

    Only the top-level shape is validated: the document must be an array.
    Malformed entries are kept and simply match nothing when formatting.

    Raises SpecLoadError if the file is missing, unreadable, not valid JSON,
    or not an array.
    """
    spec_path = Path(path)
    try:
        raw = spec_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SpecLoadError(f"Cannot read spec file: {exc}", spec_path) from exc

    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SpecLoadError(f"Invalid JSON in spec file: {exc}", spec_path) from exc

    if not isinstance(parsed, list):
        raise SpecLoadError("JSON is not an Array", spec_path)
    return coerce_spec(parsed)


def load_spec_with_fallback(path: str | Path | None = None) -> list[CategorySpec]:
    """Load *path* if given, falling back to the built-in default spec.

    Failures are reported as warnings and never propagate.
    """
    if path is None:
        spec = default_spec()
        logger.info("Loaded default sort spec (%d categories)", len(spec))
        return spec

    try:
        spec = load_spec(path)
    except SpecLoadError as exc:
        logger.warning("Custom spec failed (%s). Falling back to default...", exc)
        return default_spec()

    logger.info("Loaded sort spec: %s (%d categories)", path, len(spec))
    return spec
