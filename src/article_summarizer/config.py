from __future__ import annotations

import os
from pathlib import Path
from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, PositiveInt, ValidationError

MIN_CONTENT_LENGTH = 300


def _project_root() -> Path:
    """
    Resolve project root assuming this file lives in: <root>/src/article_summarizer/config.py
    """
    return Path(__file__).resolve().parents[2]


class PipelineConfig(BaseModel):
    """
    Read-only knobs shared by every summarization call of one pipeline instance.
    """

    model_config = ConfigDict(frozen=True)

    model: str = Field(..., min_length=1)
    max_content_length: PositiveInt
    max_summary_length: PositiveInt
    context_window_size: PositiveInt
    min_content_length: PositiveInt = MIN_CONTENT_LENGTH


class Settings(BaseModel):
    # Ollama ignores the key but the OpenAI SDK requires one
    openai_api_key: str = Field(default="ollama", min_length=1)
    openai_base_url: Optional[str] = Field(
        default=None,
        description="OpenAI-compatible endpoint, e.g. http://localhost:11434/v1 for Ollama",
    )

    summarizer_model: str = Field(default="llama3.2", min_length=1)
    max_content_length: PositiveInt = 4000
    max_summary_length: PositiveInt = 1000
    num_ctx: PositiveInt = 8192
    request_timeout_s: float = Field(default=120.0, gt=0)

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    def pipeline_config(self) -> PipelineConfig:
        return PipelineConfig(
            model=self.summarizer_model,
            max_content_length=self.max_content_length,
            max_summary_length=self.max_summary_length,
            context_window_size=self.num_ctx,
        )


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """
    Loads environment variables (optionally from .env) and validates Settings.

    Numeric values arrive as strings and are coerced here, so a malformed
    NUM_CTX fails at startup instead of inside a model call.
    """
    if env_file is None:
        env_file = _project_root() / ".env"

    # Load .env if present; environment variables override .env by default
    if env_file.exists():
        load_dotenv(env_file, override=False)

    data = {
        "openai_api_key": os.getenv("OPENAI_API_KEY", "ollama"),
        "openai_base_url": os.getenv("OPENAI_BASE_URL") or None,
        "summarizer_model": os.getenv("SUMMARIZER_MODEL", "llama3.2"),
        "max_content_length": os.getenv("MAX_CONTENT_LENGTH", "4000"),
        "max_summary_length": os.getenv("MAX_SUMMARY_LENGTH", "1000"),
        "num_ctx": os.getenv("NUM_CTX", "8192"),
        "request_timeout_s": os.getenv("REQUEST_TIMEOUT_S", "120"),
        "log_level": os.getenv("LOG_LEVEL", "INFO").upper(),
    }

    try:
        return Settings(**data)
    except ValidationError as e:
        raise RuntimeError(
            "Invalid configuration. Check the summarizer environment variables.\n"
            "Used: OPENAI_API_KEY, OPENAI_BASE_URL, SUMMARIZER_MODEL, MAX_CONTENT_LENGTH, "
            "MAX_SUMMARY_LENGTH, NUM_CTX, REQUEST_TIMEOUT_S, LOG_LEVEL\n"
            f"Details:\n{e}"
        ) from e


# Convenience singleton-style access
settings = load_settings()
