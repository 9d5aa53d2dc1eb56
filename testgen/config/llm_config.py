"""LLM configuration."""

from langchain_anthropic import ChatAnthropic
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI
from loguru import logger

from testgen.config.settings import Settings, settings as default_settings


PROVIDER_LABELS = {
    "gemini": "Google Gemini",
    "anthropic": "Anthropic Claude",
}


def get_provider_label(config: Settings = default_settings) -> str:
    """Human-readable name of the configured provider, reported to clients."""
    provider = config.LLM_PROVIDER
    if provider not in PROVIDER_LABELS:
        raise ValueError(f"Unsupported LLM provider: {provider}")
    return PROVIDER_LABELS[provider]


def get_llm(config: Settings = default_settings) -> BaseChatModel | None:
    """
    Returns the configured chat model, or None when the provider's API key
    is not set.

    Currently supports:
    - gemini: Google Gemini via langchain-google-genai
    - anthropic: Claude via langchain-anthropic

    To add a new provider:
    1. Add settings in settings.py
    2. Add a label in PROVIDER_LABELS
    3. Add elif block here
    """
    if config.LLM_PROVIDER == "gemini":
        if not config.GEMINI_API_KEY:
            logger.error("GEMINI_API_KEY not found. AI features will not work.")
            return None
        return ChatGoogleGenerativeAI(
            model=config.GEMINI_MODEL,
            google_api_key=config.GEMINI_API_KEY,
            temperature=config.LLM_TEMPERATURE,
            max_output_tokens=config.LLM_MAX_TOKENS,
            timeout=config.LLM_TIMEOUT,
        )

    elif config.LLM_PROVIDER == "anthropic":
        if not config.ANTHROPIC_API_KEY:
            logger.error("ANTHROPIC_API_KEY not found. AI features will not work.")
            return None
        return ChatAnthropic(
            model=config.ANTHROPIC_MODEL,
            api_key=config.ANTHROPIC_API_KEY,
            temperature=config.LLM_TEMPERATURE,
            max_tokens=config.LLM_MAX_TOKENS,
            timeout=config.LLM_TIMEOUT,
        )

    raise ValueError(f"Unsupported LLM provider: {config.LLM_PROVIDER}")


def get_api_key_name(config: Settings = default_settings) -> str:
    """Name of the environment variable holding the active provider's key."""
    return "ANTHROPIC_API_KEY" if config.LLM_PROVIDER == "anthropic" else "GEMINI_API_KEY"
