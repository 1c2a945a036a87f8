from css_sync.spec.defaults import DEFAULT_SORT_SPEC
from css_sync.spec.errors import SpecLoadError
from css_sync.spec.loader import default_spec, load_spec, load_spec_with_fallback

__all__ = [
    "DEFAULT_SORT_SPEC",
    "SpecLoadError",
    "default_spec",
    "load_spec",
    "load_spec_with_fallback",
]
