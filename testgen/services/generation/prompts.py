"""Prompts for test summary and test code generation."""

from __future__ import annotations

from typing import Sequence

from testgen.services.generation.models import CodeGenerationRequest, FileInput, TestTarget

SUMMARY_CONTENT_LIMIT = 2000
CODE_CONTENT_LIMIT = 3000

SUMMARY_TRUNCATION_MARKER = "... (truncated)"
CODE_TRUNCATION_MARKER = "\n... (truncated)"


SUMMARY_FILE_BLOCK = """
**File: {filename}**
```
{content}
```
"""

SUMMARY_PROMPT = """You are a senior software engineer tasked with creating comprehensive test case summaries for the provided code files.

**Instructions:**
1. Analyze each file and understand its functionality
2. Generate 3-5 test case summaries per significant function/component
3. Focus on edge cases, error handling, and common user scenarios
4. Return ONLY a JSON array of test summaries in this exact format:
[
  {{"summaryId": "unique-id-1", "summaryText": "Test summary description"}},
  {{"summaryId": "unique-id-2", "summaryText": "Test summary description"}}
]

**Code Files to Analyze:**
{file_contents}

**Response Requirements:**
- Return ONLY valid JSON array
- Each summaryId should be unique (use format: test-{{filename}}-{{number}})
- Each summaryText should be 1-2 sentences describing a specific test case
- Focus on testing logic, edge cases, error conditions, and user interactions
- Do not include any explanation or additional text outside the JSON

Generate the test case summaries now:"""


CODE_PROMPT = """You are an expert test engineer. Generate comprehensive test code for the following scenario.

**Test Requirement:**
{summary_text}

**Source Code to Test:**
```{fence_language}
{content}
```

**Instructions:**
1. Generate complete, runnable test code using {framework}
2. Follow {language} best practices and conventions
3. Include proper imports and setup
4. Add descriptive test names and comments
5. Cover the scenario described in the test requirement
6. Include assertions that verify expected behavior
7. Add any necessary mocks or test utilities

**Response Format:**
Return ONLY the test code without any explanation or markdown formatting. Start directly with the imports/code.

**Language**: {language}
**Framework**: {framework}
**File**: {filename}

Generate the test code now:"""


def truncate_content(content: str, limit: int, marker: str) -> str:
    """Cut content to limit characters, appending marker only if cut."""
    if len(content) <= limit:
        return content
    return content[:limit] + marker


def build_summary_prompt(files: Sequence[FileInput]) -> str:
    file_contents = "\n".join(
        SUMMARY_FILE_BLOCK.format(
            filename=f.filename,
            content=truncate_content(f.content, SUMMARY_CONTENT_LIMIT, SUMMARY_TRUNCATION_MARKER),
        )
        for f in files
    )
    return SUMMARY_PROMPT.format(file_contents=file_contents)


def build_code_prompt(request: CodeGenerationRequest, target: TestTarget) -> str:
    return CODE_PROMPT.format(
        summary_text=request.summary_text,
        fence_language=target.language.lower(),
        content=truncate_content(request.file_content, CODE_CONTENT_LIMIT, CODE_TRUNCATION_MARKER),
        framework=target.test_framework,
        language=target.language,
        filename=request.filename or "unknown",
    )
