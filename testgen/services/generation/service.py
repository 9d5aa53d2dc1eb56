"""Service for generating test summaries and test code via LLM."""

from __future__ import annotations

from typing import Any, Sequence

from langchain_core.language_models.chat_models import BaseChatModel
from loguru import logger

from testgen.core.exceptions import (
    CodeGenerationError,
    LLMConfigurationError,
    SummaryGenerationError,
)
from testgen.services.generation.models import (
    CodeGenerationRequest,
    CodeGenerationResult,
    FileInput,
    SummaryGenerationResult,
)
from testgen.services.generation.parser import parse_code, parse_summaries
from testgen.services.generation.prompts import build_code_prompt, build_summary_prompt
from testgen.services.generation.targets import resolve_test_target


def _response_text(response: Any) -> str:
    """Flatten a chat model reply into plain text.

    Some providers return content as a list of blocks instead of a string.
    """
    content = getattr(response, "content", response)
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type", "text") == "text":
                parts.append(str(block.get("text", "")))
        return "".join(parts)
    return str(content or "")


class GenerationService:
    """Prompt -> model call -> parser, with no retries.

    The chat model is optional: without one, every operation fails with
    LLMConfigurationError before anything is sent.
    """

    def __init__(
        self,
        llm: BaseChatModel | None,
        provider_label: str,
        api_key_name: str = "GEMINI_API_KEY",
    ):
        self.llm = llm
        self.provider_label = provider_label
        self.api_key_name = api_key_name

    @property
    def is_configured(self) -> bool:
        return self.llm is not None

    def _require_llm(self) -> BaseChatModel:
        if self.llm is None:
            raise LLMConfigurationError(self.api_key_name)
        return self.llm

    async def generate_summaries(self, files: Sequence[FileInput]) -> SummaryGenerationResult:
        llm = self._require_llm()

        prompt = build_summary_prompt(files)
        logger.info(f"Generating test summaries for {len(files)} file(s) using {self.provider_label}")

        try:
            response = await llm.ainvoke(prompt)
        except Exception as e:
            logger.error(f"Summary generation call failed: {e}")
            raise SummaryGenerationError(str(e) or e.__class__.__name__) from e

        result = parse_summaries(_response_text(response))
        logger.info(f"Generated {len(result.summaries)} test summaries using {self.provider_label}")
        return SummaryGenerationResult(
            summaries=result.summaries,
            provider_label=self.provider_label,
            is_fallback=result.is_fallback,
        )

    async def generate_code(self, request: CodeGenerationRequest) -> CodeGenerationResult:
        llm = self._require_llm()

        target = resolve_test_target(request.filename, request.file_content)
        prompt = build_code_prompt(request, target)
        logger.info(
            f"Generating test code for summary {request.summary_id} "
            f"({target.language}/{target.test_framework})"
        )

        try:
            response = await llm.ainvoke(prompt)
        except Exception as e:
            logger.error(f"Code generation call failed: {e}")
            raise CodeGenerationError(str(e) or e.__class__.__name__) from e

        artifact = parse_code(_response_text(response), request)
        return CodeGenerationResult(artifact=artifact, provider_label=self.provider_label)
