"""Unit tests for problem page extraction."""

import pytest

from conftest import A_PLUS_B, payload_page
from domain.formatters import format_problem
from domain.models import ProblemRecord, Sample
from domain.parsers.problem_page import ProblemPageParser, extract

SECTION_PAGE = """<!DOCTYPE html>
<html><body>
<h1>P1002 Crossing River</h1>
<h2>题目描述</h2>
<p>A pawn starts at <strong>A</strong>.</p>
<p>Count paths where 1 &lt; n &lt;= 20.</p>
<h2>输入格式</h2>
<p>One line with   four   integers.</p>
<h2>输出格式</h2>
<p>One integer.</p>
<h2>输入样例 1</h2>
<pre>6 6 3 3</pre>
<h2>输出样例 1</h2>
<pre>6</pre>
<h2>输入样例 2</h2>
<pre>1 1
0 0</pre>
<h2>输出样例 2</h2>
<pre>2</pre>
</body></html>
"""


class TestEmbeddedPayload:
    """Extraction from the lentille-context payload."""

    def test_end_to_end_record(self, a_plus_b_page):
        record = extract(a_plus_b_page)

        assert record.title == "A+B Problem"
        assert record.difficulty_num == 1
        assert record.difficulty == "入门"
        assert record.tags == ("Simulation", "String")
        assert record.samples == (Sample(input="1 2", output="3"),)
        assert record.description == "Given two integers $a$ and $b$, output $a+b$."
        assert record.input_format == "Two integers $a, b$ on one line."
        assert record.output_format == "One integer, $a+b$."
        assert record.limit == "$|a|, |b| \\le 10^9$"

    def test_markup_in_payload_is_normalized(self):
        page = payload_page(
            {"title": "  <b>Bold</b>  Title ", "content": {"description": "<p>1 < n</p>\n\n\n\n<p>next</p>"}}
        )

        record = extract(page)

        assert record.title == "Bold Title"
        assert record.description == "1 < n\n\nnext"

    def test_unknown_tag_keeps_its_id(self):
        record = extract(payload_page({"title": "T", "tags": [1, 424242]}))

        assert record.tags == ("Simulation", "unknown tag(424242)")

    def test_out_of_range_difficulty(self):
        record = extract(payload_page({"title": "T", "difficulty": 99}))

        assert record.difficulty_num == 99
        assert record.difficulty == "99"

    def test_missing_difficulty_uses_sentinel(self):
        record = extract(payload_page({"title": "T"}))

        assert record.difficulty_num is None
        assert record.difficulty == "unknown difficulty"

    def test_multiple_samples_keep_order(self):
        record = extract(payload_page({"samples": [["1", "a"], ["2", "b"], ["3", "c"]]}))

        assert [s.input for s in record.samples] == ["1", "2", "3"]
        assert [s.output for s in record.samples] == ["a", "b", "c"]

    def test_empty_sample_list_is_valid(self):
        record = extract(payload_page({"title": "T", "samples": []}))

        assert record.samples == ()

    def test_malformed_sample_entries_are_skipped(self):
        record = extract(payload_page({"samples": [["1 2", "3"], "junk", ["only input"]]}))

        assert record.samples == (Sample(input="1 2", output="3"),)

    def test_missing_payload_fields_fall_back_to_sentinels(self):
        record = extract(payload_page({}))

        assert record == ProblemRecord()


class TestSectionFallback:
    """Extraction from labelled page sections when no payload is present."""

    def test_sections(self):
        record = extract(SECTION_PAGE)

        assert record.title == "P1002 Crossing River"
        assert record.description == "A pawn starts at A.\nCount paths where 1 < n <= 20."
        assert record.input_format == "One line with four integers."
        assert record.output_format == "One integer."
        assert record.limit == "no constraints"

    def test_samples_run_to_end_of_document(self):
        record = extract(SECTION_PAGE)

        assert record.samples == (
            Sample(input="6 6 3 3", output="6"),
            Sample(input="1 1\n0 0", output="2"),
        )

    def test_input_sample_without_output_is_ignored(self):
        page = "<html><body><h2>输入样例 1</h2><pre>1</pre><h2>输出样例 2</h2><pre>x</pre></body></html>"

        assert extract(page).samples == ()

    def test_section_stops_at_heading_inside_container(self):
        page = "<html><body><h2>题目描述</h2><p>Desc</p><div><h2>输入格式</h2><p>IN</p></div></body></html>"

        record = extract(page)

        assert record.description == "Desc"
        assert record.input_format == "IN"

    def test_container_text_before_wrapped_heading_is_kept(self):
        page = (
            "<html><body><h2>题目描述</h2><p>Desc</p>\n"
            "<div><p>More</p>\n<script>x = 1;</script><h2>输出格式</h2><p>OUT</p></div></body></html>"
        )

        record = extract(page)

        assert record.description == "Desc\nMore"
        assert record.output_format == "OUT"

    def test_english_labels(self):
        page = (
            "<html><body><h2>Description</h2><p>Desc</p>"
            "<h2>Hint</h2><p>n &le; 10</p>"
            "<h2>Input Sample #1</h2><pre>4</pre><h2>Output Sample #1</h2><pre>16</pre></body></html>"
        )

        record = extract(page)

        assert record.description == "Desc"
        assert record.limit == "n ≤ 10"
        assert record.samples == (Sample(input="4", output="16"),)

    def test_payload_fields_win_over_sections(self):
        page = SECTION_PAGE.replace(
            "</body>",
            '<script id="lentille-context" type="application/json">'
            '{"data": {"problem": {"title": "From Payload"}}}</script></body>',
        )

        record = extract(page)

        assert record.title == "From Payload"
        assert record.input_format == "One line with four integers."

    def test_malformed_payload_is_ignored(self):
        page = SECTION_PAGE.replace(
            "</body>",
            '<script id="lentille-context" type="application/json">{"data": {oops</script></body>',
        )

        record = extract(page)

        assert record.title == "P1002 Crossing River"
        assert len(record.samples) == 2


class TestTotality:
    """Extraction never raises."""

    @pytest.mark.parametrize(
        "document",
        [
            "",
            None,
            "\x00\x01\x02\xff\xfe garbage <<< >>> &&&",
            "<html><body><h2>题目描述",
            '<script id="lentille-context" type="application/json">{not json</script>',
            '<script id="lentille-context" type="application/json"></script>',
            '<script id="lentille-context" type="application/json">[1, 2, 3]</script>',
            '<script id="lentille-context" type="application/json">{"data": {"problem": "x"}}</script>',
            "".join(chr(i) for i in range(1, 500)),
            '<script id="lentille-context" type="application/json">' + "[" * 200000 + "</script>",
        ],
    )
    def test_never_raises_and_fills_required_fields(self, document):
        record = extract(document)

        for value in (
            record.title,
            record.description,
            record.input_format,
            record.output_format,
            record.limit,
            record.difficulty,
        ):
            assert isinstance(value, str)
            assert value

    def test_empty_document_gives_all_sentinels(self):
        assert extract("") == ProblemRecord()


def test_extraction_and_formatting_are_deterministic():
    page = payload_page(A_PLUS_B)
    url = "https://www.luogu.com.cn/problem/P1001"

    first = format_problem(extract(page), "P1001", url)
    second = format_problem(ProblemPageParser().parse(page), "P1001", url)

    assert first == second
