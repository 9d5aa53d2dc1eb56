"""Parse raw model output into summaries and test code.

Neither parser raises. Unusable summary output becomes a single sentinel
summary; code output is passed through once fence markers are removed.
"""

from __future__ import annotations

import json
import re
from typing import Any

from loguru import logger

from testgen.services.generation.models import (
    CodeGenerationRequest,
    GeneratedCodeArtifact,
    SummaryParseResult,
    TestSummary,
)
from testgen.services.generation.targets import resolve_test_target

PARSE_ERROR_SUMMARY = TestSummary(
    summary_id="parse-error-1",
    summary_text=(
        "AI generated response but failed to parse. "
        "Please try again or check the selected files."
    ),
)

_OPENING_FENCE = re.compile(r"^```[\w+#.-]*[ \t]*\n")
_CLOSING_FENCE = re.compile(r"\n```$")

_NOTHING = object()


def is_valid_summary_item(item: Any) -> bool:
    return (
        isinstance(item, dict)
        and isinstance(item.get("summaryId"), str)
        and isinstance(item.get("summaryText"), str)
    )


def _load_json(candidate: str) -> Any:
    try:
        return json.loads(candidate)
    except (ValueError, RecursionError):
        return _NOTHING


def _extract_json(text: str) -> Any:
    """First-'[' to last-']' slice, falling back to the whole text."""
    start = text.find("[")
    end = text.rfind("]")
    if start != -1 and end > start:
        parsed = _load_json(text[start:end + 1])
        if parsed is not _NOTHING:
            return parsed
    return _load_json(text)


def fallback_result() -> SummaryParseResult:
    return SummaryParseResult(summaries=[PARSE_ERROR_SUMMARY], is_fallback=True)


def parse_summaries(text: str) -> SummaryParseResult:
    clean_text = (text or "").strip()
    parsed = _extract_json(clean_text)

    if not isinstance(parsed, list):
        logger.warning("Failed to parse AI response: no JSON array found")
        logger.debug(f"Raw AI response: {text}")
        return fallback_result()

    # First occurrence of a summaryId wins
    summaries = []
    seen_ids = set()
    for item in parsed:
        if not is_valid_summary_item(item) or item["summaryId"] in seen_ids:
            continue
        seen_ids.add(item["summaryId"])
        summaries.append(TestSummary(summary_id=item["summaryId"], summary_text=item["summaryText"]))

    if not summaries:
        logger.warning(f"Failed to parse AI response: none of {len(parsed)} item(s) were valid")
        logger.debug(f"Raw AI response: {text}")
        return fallback_result()

    dropped = len(parsed) - len(summaries)
    if dropped:
        logger.debug(f"Dropped {dropped} malformed or duplicate summary item(s)")
    return SummaryParseResult(summaries=summaries)


def strip_code_fences(text: str) -> str:
    """Remove one leading ```lang line and one trailing ``` line."""
    code = (text or "").strip()
    code = _OPENING_FENCE.sub("", code, count=1)
    code = _CLOSING_FENCE.sub("", code, count=1)
    return code


def parse_code(text: str, request: CodeGenerationRequest) -> GeneratedCodeArtifact:
    target = resolve_test_target(request.filename, request.file_content)
    return GeneratedCodeArtifact(
        code=strip_code_fences(text),
        language=target.language,
        test_framework=target.test_framework,
    )
