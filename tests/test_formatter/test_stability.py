"""Round-trip and idempotence properties of parse + format."""

import re
from collections import Counter

import pytest

from css_sync.formatter import comment_text, format_css
from css_sync.model import Node, NodeKind
from css_sync.parser import parse
from css_sync.spec import default_spec

SAMPLES = [
    "",
    ".a{color:red;margin:1px;display:flex;}",
    """
@import "tokens.css";

/* Card container */
.card {
    /* brand color */
    color: var(--brand);
    padding: 8px 12px;
    display: grid;
    grid-template-areas:
        "head head"
        "side main";
    position: relative;
    z-index: 2;
    transition: opacity 0.2s;
    font-size: 14px;
    &:hover { opacity: 0.8; background: #fff; }
    /* trailing note */
}

.card::before { content: "{;}"; top: 0; left: 0; position: absolute; }

@media (max-width: 600px) {
    .card { display: none; }
}

@keyframes spin { from { transform: rotate(0deg); } to { transform: rotate(360deg); } }
/* end of file */
""",
    """
.button {
  /* POSITION */
  position: relative;
  /* OLD_CATEGORY */
  width: 10px; height: 10px; margin: 0 auto; border: 1px solid;
  color: red; opacity: .5; font: inherit; line-height: 1;
}
.empty {}
""",
    ".a { color: red; /* unterminated",
    ".a { color: red; }\n/* unterminated",
    '.a { content: "abc; }',
]


def _collect(node: Node, decls: Counter, comments: Counter, suppress) -> None:
    for comment in node.comments:
        if not suppress(comment):
            comments[comment_text(comment)] += 1
    if node.kind is NodeKind.LEAF:
        decls[re.sub(r"\s+", "", node.content).rstrip(";")] += 1
    for child in node.children:
        _collect(child, decls, comments, suppress)


def _inventory(text: str, suppress) -> tuple[Counter, Counter]:
    decls: Counter = Counter()
    comments: Counter = Counter()
    _collect(parse(text), decls, comments, suppress)
    return decls, comments


class TestIdempotence:
    @pytest.mark.parametrize("source", SAMPLES)
    @pytest.mark.parametrize("headers", [True, False])
    def test_default_spec(self, source, headers):
        spec = default_spec()
        once = format_css(parse(source), spec, headers=headers)
        twice = format_css(parse(once), spec, headers=headers)
        assert twice == once

    @pytest.mark.parametrize("source", SAMPLES)
    def test_empty_spec(self, source):
        once = format_css(parse(source), [])
        assert format_css(parse(once), []) == once


class TestRoundTrip:
    @pytest.mark.parametrize("source", SAMPLES)
    def test_no_declaration_or_comment_is_lost(self, source):
        from css_sync.formatter import HeaderMatcher

        matcher = HeaderMatcher([])
        before = _inventory(source, matcher.is_suppressed)
        after = _inventory(format_css(parse(source), []), matcher.is_suppressed)
        assert after == before


class TestGroupingCorrectness:
    def test_declarations_land_in_spec_order(self):
        spec = default_spec()
        out = format_css(parse(SAMPLES[2]), spec, headers=False)
        card = parse(out).children[1]
        order = [spec_index(c.property_name, spec) for c in card.children if c.is_declaration]
        assert order == sorted(order)


def spec_index(prop: str, spec) -> int:
    for index, entry in enumerate(spec):
        if entry.matches(prop):
            return index
    return len(spec)
