from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):

    # Application
    APP_NAME: str = Field(default="Test Case Generator API")
    APP_VERSION: str = Field(default="1.0.0")

    # Environment
    ENV: str = Field(default="development")
    PORT: int = Field(default=4000)
    CLIENT_ORIGIN_URL: str = Field(
        default="http://localhost:5173",
        description="Origin allowed by CORS (Vite dev server by default)"
    )

    # Logging
    LOG_TO_FILE: bool = Field(default=True, description="Write a per-start log file in addition to stdout")
    LOG_DIR: str = Field(default="logs")

    # GitHub
    GITHUB_TOKEN: Optional[str] = Field(default=None)
    GITHUB_API_URL: str = Field(default="https://api.github.com")
    GITHUB_RAW_URL: str = Field(default="https://raw.githubusercontent.com")
    GITHUB_TIMEOUT: float = Field(default=30.0, description="GitHub request timeout in seconds")

    # LLM Provider Selection
    LLM_PROVIDER: str = Field(
        default="gemini",
        description="LLM provider: 'gemini' or 'anthropic'"
    )

    # Google Gemini settings
    GEMINI_API_KEY: Optional[str] = Field(default=None)
    GEMINI_MODEL: str = Field(default="gemini-2.5-flash")

    # Anthropic settings
    ANTHROPIC_API_KEY: Optional[str] = Field(default=None)
    ANTHROPIC_MODEL: str = Field(default="claude-sonnet-4-5")

    LLM_MAX_TOKENS: int = Field(default=8192)
    LLM_TEMPERATURE: float = Field(default=0.2)
    LLM_TIMEOUT: float = Field(default=120.0, description="LLM request timeout in seconds")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
