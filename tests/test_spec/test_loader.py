"""Tests for category spec loading."""

import json
import logging

import pytest

from css_sync.model import CategorySpec
from css_sync.spec import (
    DEFAULT_SORT_SPEC,
    SpecLoadError,
    default_spec,
    load_spec,
    load_spec_with_fallback,
)


class TestDefaultSpec:
    def test_category_order(self):
        assert [s.category for s in default_spec()] == [
            "POSITION",
            "LAYOUT",
            "BOX",
            "VISUAL",
            "TYPO",
            "ANIMATION",
        ]

    def test_matches_raw_defaults(self):
        assert len(default_spec()) == len(DEFAULT_SORT_SPEC)

    def test_category_names_avoid_reserved_label(self):
        assert all(s.category.upper() != "ELSE" for s in default_spec())


class TestLoadSpec:
    def test_loads_array(self, tmp_path):
        path = tmp_path / "spec.json"
        path.write_text(json.dumps([{"category": "BOX", "keywords": ["width"]}]))
        assert load_spec(path) == [CategorySpec("BOX", ("width",))]

    def test_malformed_entries_are_kept(self, tmp_path):
        path = tmp_path / "spec.json"
        path.write_text(json.dumps([{"category": "BOX"}]))
        assert load_spec(path) == [CategorySpec("BOX", ())]

    def test_missing_file(self, tmp_path):
        with pytest.raises(SpecLoadError) as exc_info:
            load_spec(tmp_path / "nope.json")
        assert exc_info.value.path == tmp_path / "nope.json"

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "spec.json"
        path.write_text("[{")
        with pytest.raises(SpecLoadError, match="Invalid JSON"):
            load_spec(path)

    def test_not_an_array(self, tmp_path):
        path = tmp_path / "spec.json"
        path.write_text('{"category": "BOX"}')
        with pytest.raises(SpecLoadError, match="not an Array"):
            load_spec(path)


class TestFallback:
    def test_no_path_uses_default(self):
        assert load_spec_with_fallback(None) == default_spec()

    def test_custom_path(self, tmp_path):
        path = tmp_path / "spec.json"
        path.write_text(json.dumps([{"category": "ONLY", "keywords": ["color"]}]))
        assert [s.category for s in load_spec_with_fallback(path)] == ["ONLY"]

    def test_broken_custom_spec_falls_back_with_warning(self, tmp_path, caplog):
        path = tmp_path / "spec.json"
        path.write_text("not json")
        with caplog.at_level(logging.WARNING, logger="css_sync.spec.loader"):
            spec = load_spec_with_fallback(path)
        assert spec == default_spec()
        assert "Falling back to default" in caplog.text
