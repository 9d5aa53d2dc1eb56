"""Exceptions for the test generation service."""


class GenerationException(Exception):
    """Base exception for AI generation operations."""

    error = "AI generation failed"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class LLMConfigurationError(GenerationException):
    """No chat model is available because the provider key is missing."""

    error = "AI service not configured"

    def __init__(self, api_key_name: str = "GEMINI_API_KEY"):
        self.api_key_name = api_key_name
        message = (
            f"AI service not configured. Please set {api_key_name} in environment variables."
        )
        super().__init__(message)


class SummaryGenerationError(GenerationException):
    """The model call for test summaries failed."""

    error = "Failed to generate test summaries"


class CodeGenerationError(GenerationException):
    """The model call for test code failed."""

    error = "Failed to generate test code"
