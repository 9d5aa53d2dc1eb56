"""Tests for parsing model output."""

import pytest

from testgen.services.generation.models import CodeGenerationRequest
from testgen.services.generation.parser import (
    PARSE_ERROR_SUMMARY,
    is_valid_summary_item,
    parse_code,
    parse_summaries,
    strip_code_fences,
)


class TestParseSummaries:

    def test_plain_text_falls_back_to_sentinel(self):
        result = parse_summaries("not json at all")

        assert result.is_fallback
        assert len(result.summaries) == 1
        assert result.summaries[0].summary_id == "parse-error-1"

    def test_invalid_elements_are_dropped(self):
        text = (
            '[{"summaryId":"a","summaryText":"x"},'
            '{"summaryId":123,"summaryText":"y"},'
            '{"summaryId":"b","summaryText":"z"}]'
        )

        result = parse_summaries(text)

        assert not result.is_fallback
        assert [s.summary_id for s in result.summaries] == ["a", "b"]
        assert [s.summary_text for s in result.summaries] == ["x", "z"]

    def test_array_is_found_inside_prose_and_fences(self):
        text = (
            "Here are your tests:\n```json\n"
            '[{"summaryId": "test-app-1", "summaryText": "Handles empty input."}]\n'
            "```\nLet me know if you need more."
        )

        result = parse_summaries(text)

        assert [s.summary_id for s in result.summaries] == ["test-app-1"]

    def test_whole_text_is_tried_when_slice_fails(self):
        # The first-[ to last-] slice is not valid JSON on its own
        text = '"[not an array]"'

        result = parse_summaries(text)

        assert result.is_fallback

    def test_non_array_json_falls_back(self):
        result = parse_summaries('{"summaryId": "a", "summaryText": "x"}')

        assert result.summaries == [PARSE_ERROR_SUMMARY]

    def test_array_without_valid_items_falls_back(self):
        result = parse_summaries('[{"id": "a"}, "text", null, 3]')

        assert result.is_fallback
        assert result.summaries == [PARSE_ERROR_SUMMARY]

    @pytest.mark.parametrize("text", ["", "   ", "[", "]", "][", "[1, 2"])
    def test_degenerate_input_never_raises(self, text):
        result = parse_summaries(text)

        assert result.summaries == [PARSE_ERROR_SUMMARY]

    def test_extra_fields_are_ignored(self):
        result = parse_summaries('[{"summaryId": "a", "summaryText": "x", "priority": "high"}]')

        assert result.summaries[0].summary_text == "x"

    def test_deeply_nested_output_falls_back(self):
        text = "[" * 100000 + "]" * 100000

        result = parse_summaries(text)

        assert result.is_fallback
        assert result.summaries == [PARSE_ERROR_SUMMARY]

    def test_duplicate_ids_keep_first_occurrence(self):
        text = '[{"summaryId":"a","summaryText":"x"},{"summaryId":"a","summaryText":"y"}]'

        result = parse_summaries(text)

        assert not result.is_fallback
        assert [s.summary_id for s in result.summaries] == ["a"]
        assert result.summaries[0].summary_text == "x"

    def test_duplicate_after_invalid_item_is_still_dropped(self):
        text = (
            '[{"summaryId":"a"},'
            '{"summaryId":"a","summaryText":"x"},'
            '{"summaryId":"b","summaryText":"y"},'
            '{"summaryId":"a","summaryText":"z"}]'
        )

        result = parse_summaries(text)

        assert [(s.summary_id, s.summary_text) for s in result.summaries] == [("a", "x"), ("b", "y")]


@pytest.mark.parametrize("item, expected", [
    ({"summaryId": "a", "summaryText": "b"}, True),
    ({"summaryId": "a"}, False),
    ({"summaryId": "a", "summaryText": None}, False),
    ({"summaryId": 1, "summaryText": "b"}, False),
    (["a", "b"], False),
    (None, False),
])
def test_is_valid_summary_item(item, expected):
    assert is_valid_summary_item(item) is expected


class TestParseCode:

    def test_fences_are_removed(self):
        assert strip_code_fences("```typescript\nCODE\n```") == "CODE"

    def test_bare_fences_are_removed(self):
        assert strip_code_fences("```\nline1\nline2\n```") == "line1\nline2"

    def test_unfenced_code_is_kept_verbatim(self):
        code = "import pytest\n\n\ndef test_add():\n    assert 1 + 1 == 2"

        assert strip_code_fences(f"\n  {code}  \n") == code

    def test_inner_fences_are_untouched(self):
        text = '```python\ndoc = """\n```\nexample\n```\n"""\n```'

        assert strip_code_fences(text) == 'doc = """\n```\nexample\n```\n"""'

    def test_parse_code_labels_from_request(self):
        request = CodeGenerationRequest(
            summary_id="s1",
            summary_text="adds numbers",
            file_content="def add(a, b): return a + b",
            filename="calc.py",
        )

        artifact = parse_code("```typescript\nCODE\n```", request)

        assert artifact.code == "CODE"
        # Labels come from the request, not from the fence
        assert artifact.language == "Python"
        assert artifact.test_framework == "pytest"
