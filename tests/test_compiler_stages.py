"""Unit tests for the individual compiler stages."""

from __future__ import annotations

import pytest

from services.docs_api.app.compiler.classifier import BlockKind, classify, detect_kind
from services.docs_api.app.compiler.entities import decode_entities
from services.docs_api.app.compiler.index_tracker import IndexTracker, utf16_len
from services.docs_api.app.compiler.operations import HeadingStyle
from services.docs_api.app.compiler.sanitizer import sanitize
from services.docs_api.app.compiler.segmenter import segment
from services.docs_api.app.compiler.tokenizer import TokenType, tokenize


def _blocks(markup):
    return segment(tokenize(markup))


class TestSanitize:
    def test_input_without_script_is_unchanged(self):
        markup = "<p>Hello <b>there</b></p>"
        assert sanitize(markup) == markup

    def test_removes_script_and_content(self):
        assert sanitize("a<script src='x.js'></script>b") == "ab"

    def test_span_reassembled_by_removal_is_also_removed(self):
        markup = "<scr<script></script>ipt>alert(1)</script><p>Hi</p>"
        assert sanitize(markup) == "<p>Hi</p>"

    def test_nested_reassembly_is_removed_to_a_fixed_point(self):
        markup = "<scr<scr<script></script>ipt></script>ipt>x</script>ok"
        assert sanitize(markup) == "ok"

    def test_lone_surrogate_replaced(self):
        assert sanitize("a\udfffb") == "a\ufffdb"

    def test_unclosed_script_is_left_alone(self):
        assert sanitize("<script>alert(1)") == "<script>alert(1)"


class TestTokenize:
    def test_lossless(self):
        markup = "x <b>y</b> <p class='a'>z</p> <unterminated"
        assert "".join(t.raw for t in tokenize(markup)) == markup

    def test_tag_names_are_lower_cased(self):
        tags = [t for t in tokenize("<P>a</H1>") if t.is_tag]
        assert [t.name for t in tags] == ["p", "h1"]

    def test_unterminated_tag_runs_to_end(self):
        tokens = tokenize("a <b")
        assert tokens[-1].type is TokenType.TAG
        assert tokens[-1].raw == "<b"
        assert tokens[-1].closed is False

    def test_empty_angle_brackets_are_text(self):
        tokens = tokenize("a <> b")
        assert [t.type for t in tokens] == [TokenType.TEXT]


class TestSegment:
    def test_no_separators_gives_one_block(self):
        blocks = _blocks("just text")
        assert [b.raw for b in blocks] == ["just text"]

    def test_whitespace_blocks_dropped(self):
        blocks = _blocks("<p>a</p>\n  <p>b</p>")
        assert [b.raw for b in blocks] == ["a", "b"]

    def test_heading_tags_do_not_separate(self):
        blocks = _blocks("<h1>A</h1><h2>B</h2>")
        assert len(blocks) == 1

    def test_pre_is_not_a_paragraph_separator(self):
        blocks = _blocks("<pre>code</pre>")
        assert [b.raw for b in blocks] == ["<pre>code</pre>"]

    def test_order_preserved(self):
        blocks = _blocks("<p>1</p><p>2</p><p>3</p>")
        assert [b.raw for b in blocks] == ["1", "2", "3"]


class TestClassify:
    @pytest.mark.parametrize(
        "markup, kind",
        [
            ("<h1>x</h1>", BlockKind.HEADING1),
            ("x</h1>", BlockKind.HEADING1),
            ("<h2>x</h2>", BlockKind.HEADING2),
            ("<h2>x</h2><h1>y</h1>", BlockKind.HEADING1),
            ("<h3>x</h3>", BlockKind.PARAGRAPH),
            ("plain", BlockKind.PARAGRAPH),
        ],
    )
    def test_kind(self, markup, kind):
        (block,) = _blocks(markup)
        assert detect_kind(block) is kind

    def test_heading_style_mapping(self):
        assert BlockKind.HEADING1.heading_style is HeadingStyle.HEADING_1
        assert BlockKind.HEADING2.heading_style is HeadingStyle.HEADING_2
        assert BlockKind.PARAGRAPH.heading_style is None

    def test_text_strips_every_tag(self):
        (block,) = _blocks("<h2><a href='#'>Link</a> <img src=x> text</h2>")
        result = classify(block)
        assert result.kind is BlockKind.HEADING2
        assert result.text == "Link  text"
        assert result.is_heading


class TestDecodeEntities:
    def test_fixed_set(self):
        assert decode_entities("&nbsp;&amp;&lt;&gt;") == " &<>"

    def test_order_applies_amp_before_lt(self):
        assert decode_entities("&amp;gt;") == ">"

    def test_other_entities_untouched(self):
        assert decode_entities("&quot;&#39;&copy;") == "&quot;&#39;&copy;"

    def test_case_sensitive(self):
        assert decode_entities("&AMP;") == "&AMP;"


class TestIndexTracker:
    def test_starts_at_one(self):
        assert IndexTracker().cursor == 1

    def test_reserve_returns_half_open_range_and_skips_newline(self):
        tracker = IndexTracker()
        assert tracker.reserve(5) == (1, 6)
        assert tracker.cursor == 7
        assert tracker.reserve(0) == (7, 7)
        assert tracker.cursor == 8

    def test_negative_length_rejected(self):
        with pytest.raises(ValueError):
            IndexTracker().reserve(-1)

    def test_trackers_are_independent(self):
        a, b = IndexTracker(), IndexTracker()
        a.reserve(10)
        assert b.reserve(2) == (1, 3)

    @pytest.mark.parametrize(
        "text, expected",
        [("", 0), ("abc", 3), ("é", 1), ("\U0001F600", 2), ("a\U0001F680b", 4)],
    )
    def test_utf16_len(self, text, expected):
        assert utf16_len(text) == expected
