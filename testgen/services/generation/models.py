"""Data types passed through the test generation pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FileInput:
    filename: str
    content: str


@dataclass(frozen=True)
class TestSummary:
    """One proposed test case."""

    __test__ = False

    summary_id: str
    summary_text: str


@dataclass(frozen=True)
class TestTarget:
    """Language and test framework the generated tests should use."""

    __test__ = False

    language: str
    test_framework: str


@dataclass(frozen=True)
class CodeGenerationRequest:
    summary_id: str
    summary_text: str
    file_content: str
    filename: str | None = None


@dataclass(frozen=True)
class GeneratedCodeArtifact:
    code: str
    language: str
    test_framework: str


@dataclass(frozen=True)
class SummaryParseResult:
    """Outcome of parsing model output into summaries.

    is_fallback is True when the output could not be used and summaries
    holds only the parse-error sentinel.
    """

    summaries: list[TestSummary] = field(default_factory=list)
    is_fallback: bool = False


@dataclass(frozen=True)
class SummaryGenerationResult:
    summaries: list[TestSummary]
    provider_label: str
    is_fallback: bool = False


@dataclass(frozen=True)
class CodeGenerationResult:
    artifact: GeneratedCodeArtifact
    provider_label: str
