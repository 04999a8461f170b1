"""End-to-end behaviour of the markup → edit script compiler."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from services.docs_api.app.compiler import (
    BlockKind,
    HeadingStyle,
    InsertText,
    UpdateParagraphStyle,
    compile_blocks,
    compile_markup,
    compile_to_requests,
    utf16_len,
)


def _inserts(operations):
    return [op for op in operations if isinstance(op, InsertText)]


class TestDocumentedExamples:
    def test_heading_one(self):
        assert compile_markup("<h1>Title</h1>") == [
            InsertText(location=1, text="Title\n"),
            UpdateParagraphStyle(start=1, end=6, style=HeadingStyle.HEADING_1),
        ]

    def test_script_is_excised(self):
        ops = compile_markup("<script>alert(1)</script><p>Hello</p>")
        assert ops == [InsertText(location=1, text="Hello\n")]
        assert not any("alert" in op.text for op in _inserts(ops))

    def test_entities_in_plain_paragraph(self):
        assert compile_markup("A &amp; B") == [InsertText(location=1, text="A & B\n")]

    def test_adjacent_paragraphs(self):
        assert compile_markup("<p>One</p><p>Two</p>") == [
            InsertText(location=1, text="One\n"),
            InsertText(location=5, text="Two\n"),
        ]


class TestEmptyInput:
    @pytest.mark.parametrize("markup", ["", "   ", "\n\t\n", "<p></p>", "<p> </p><p>\n</p>"])
    def test_blank_markup_yields_no_operations(self, markup):
        assert compile_markup(markup) == []

    def test_script_only_yields_no_operations(self):
        assert compile_markup("<script>\nvar x = 1;\n</script>") == []

    def test_tag_only_block_still_inserts_line_break(self):
        assert compile_markup("<p><br></p>") == [InsertText(location=1, text="\n")]


class TestHeadings:
    def test_heading_two(self):
        assert compile_markup("<p><h2>Sub</h2></p>") == [
            InsertText(location=1, text="Sub\n"),
            UpdateParagraphStyle(start=1, end=4, style=HeadingStyle.HEADING_2),
        ]

    def test_style_follows_its_insert_and_cursor_continues(self):
        ops = compile_markup("<h1>Title</h1><p>Body</p><h2>Part</h2><p>End</p>")
        assert ops == [
            InsertText(location=1, text="Title\n"),
            UpdateParagraphStyle(start=1, end=6, style=HeadingStyle.HEADING_1),
            InsertText(location=7, text="Body\n"),
            InsertText(location=12, text="Part\n"),
            UpdateParagraphStyle(start=12, end=16, style=HeadingStyle.HEADING_2),
            InsertText(location=17, text="End\n"),
        ]

    def test_nested_heading_tag_classifies_block(self):
        ops = compile_markup("<p><b><h1>Deep</h1></b></p>")
        assert ops[1] == UpdateParagraphStyle(start=1, end=5, style=HeadingStyle.HEADING_1)

    def test_heading_one_wins_over_heading_two(self):
        ops = compile_markup("<p><h2>A</h2><h1>B</h1></p>")
        assert ops == [
            InsertText(location=1, text="AB\n"),
            UpdateParagraphStyle(start=1, end=3, style=HeadingStyle.HEADING_1),
        ]

    def test_heading_text_is_tag_stripped_and_decoded(self):
        ops = compile_markup("<h1><i>Fish</i> &amp; Chips</h1>")
        assert ops[0] == InsertText(location=1, text="Fish & Chips\n")
        assert ops[1].end == 1 + len("Fish & Chips")

    def test_heading_tag_with_attributes(self):
        ops = compile_markup('<h2 class="title">Hi</h2>')
        assert ops[1].style is HeadingStyle.HEADING_2


class TestTextExtraction:
    def test_no_block_tags_is_single_paragraph(self):
        assert compile_markup("Hello <b>world</b> &lt;3") == [
            InsertText(location=1, text="Hello world <3\n"),
        ]

    def test_doubly_escaped_entity_decodes_fully(self):
        assert compile_markup("&amp;lt;") == [InsertText(location=1, text="<\n")]

    def test_escaped_tag_survives_as_text(self):
        assert compile_markup("<p>&lt;b&gt;bold&lt;/b&gt;</p>") == [
            InsertText(location=1, text="<b>bold</b>\n"),
        ]

    def test_nbsp_becomes_space(self):
        assert compile_markup("<p>A&nbsp;B</p>")[0].text == "A B\n"

    def test_paragraph_tag_attributes_still_separate(self):
        ops = compile_markup('<p class="lead">Intro</p><P>Next</P>')
        assert [op.text for op in ops] == ["Intro\n", "Next\n"]

    def test_surrounding_whitespace_is_trimmed(self):
        assert compile_markup("<p>\n   Indented  \n</p>") == [
            InsertText(location=1, text="Indented\n"),
        ]


class TestScriptRemoval:
    def test_case_insensitive_and_multiline(self):
        ops = compile_markup("<SCRIPT type='text/javascript'>\nalert(1)\n</SCRIPT><p>ok</p>")
        assert ops == [InsertText(location=1, text="ok\n")]

    def test_each_span_removed_non_greedily(self):
        ops = compile_markup("<script>a()</script><p>keep</p><script>b()</script>")
        assert ops == [InsertText(location=1, text="keep\n")]

    def test_split_script_does_not_reassemble(self):
        ops = compile_markup("<scr<script></script>ipt>alert(1)</script><p>Hi</p>")
        assert ops == [InsertText(location=1, text="Hi\n")]

    def test_script_containing_markup(self):
        ops = compile_markup("<p>x</p><script>document.write('<p>evil</p>')</script>")
        assert [op.text for op in ops] == ["x\n"]


class TestCursorArithmetic:
    def test_positions_count_utf16_code_units(self):
        ops = compile_markup("<p>\U0001F600</p><p>x</p>")
        assert ops == [
            InsertText(location=1, text="\U0001F600\n"),
            InsertText(location=4, text="x\n"),
        ]

    def test_lone_surrogate_is_replaced_and_counted_once(self):
        ops = compile_markup("<p>a\ud800b</p><p>c</p>")
        assert ops == [
            InsertText(location=1, text="a\ufffdb\n"),
            InsertText(location=5, text="c\n"),
        ]

    def test_utf16_len_accepts_lone_surrogates(self):
        assert utf16_len("a\udc00") == 2

    def test_heading_range_in_utf16(self):
        ops = compile_markup("<h1>a\U0001F600</h1>")
        assert ops[1] == UpdateParagraphStyle(start=1, end=4, style=HeadingStyle.HEADING_1)

    @pytest.mark.parametrize(
        "markup",
        [
            "<h1>T</h1><p>café &amp; crème</p><h2>\U0001F680 launch</h2><p>end</p>",
            "<p>one</p>two<p>three</p>",
            "plain text only",
        ],
    )
    def test_each_insert_starts_where_the_previous_ended(self, markup):
        inserts = _inserts(compile_markup(markup))
        assert inserts[0].location == 1
        for a, b in zip(inserts, inserts[1:]):
            assert b.location == a.location + utf16_len(a.text)

    def test_concatenated_inserts_render_the_document(self):
        ops = compile_markup("<h1>Title</h1><p>First &amp; second</p><p><em>Last</em></p>")
        assert "".join(op.text for op in _inserts(ops)) == "Title\nFirst & second\nLast\n"

    def test_operation_count(self):
        ops = compile_markup("<h1>a</h1><p>b</p><h2>c</h2><p>d</p><p>e</p>")
        assert len(ops) == 3 + 2 * 2


class TestStatelessness:
    def test_repeated_compilation_is_identical(self):
        markup = "<h1>Title</h1><p>Body</p>"
        assert compile_markup(markup) == compile_markup(markup)
        assert compile_markup(markup)[0].location == 1

    def test_concurrent_compilations_do_not_share_a_cursor(self):
        docs = [f"<h1>Doc {i}</h1>" + "<p>para</p>" * (i % 7) for i in range(40)]
        expected = [compile_markup(d) for d in docs]
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(compile_markup, docs))
        assert results == expected

    def test_returned_list_is_owned_by_caller(self):
        first = compile_markup("<p>x</p>")
        first.clear()
        assert compile_markup("<p>x</p>") == [InsertText(location=1, text="x\n")]


class TestWireFormat:
    def test_compile_to_requests(self):
        assert compile_to_requests("<h1>Hi</h1>") == [
            {"insertText": {"location": {"index": 1}, "text": "Hi\n"}},
            {
                "updateParagraphStyle": {
                    "range": {"startIndex": 1, "endIndex": 3},
                    "paragraphStyle": {"namedStyleType": "HEADING_1"},
                    "fields": "namedStyleType",
                }
            },
        ]

    def test_compile_blocks_pairs_blocks_with_operations(self):
        blocks, ops = compile_blocks("<h1>Hi</h1><p>there</p>")
        assert [b.kind for b in blocks] == [BlockKind.HEADING1, BlockKind.PARAGRAPH]
        assert ops == compile_markup("<h1>Hi</h1><p>there</p>")
