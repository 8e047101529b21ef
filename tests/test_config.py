from pathlib import Path

import pytest
from pydantic import ValidationError

from article_summarizer.config import MIN_CONTENT_LENGTH, PipelineConfig, load_settings

ENV_VARS = [
    "OPENAI_API_KEY",
    "OPENAI_BASE_URL",
    "SUMMARIZER_MODEL",
    "MAX_CONTENT_LENGTH",
    "MAX_SUMMARY_LENGTH",
    "NUM_CTX",
    "REQUEST_TIMEOUT_S",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        # recorded so teardown also undoes values set by load_dotenv
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_defaults(tmp_path: Path) -> None:
    settings = load_settings(tmp_path / "missing.env")

    assert settings.openai_api_key == "ollama"
    assert settings.openai_base_url is None
    assert settings.num_ctx == 8192
    assert settings.log_level == "INFO"


def test_env_values_are_coerced(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NUM_CTX", "4096")
    monkeypatch.setenv("MAX_CONTENT_LENGTH", "2500")
    monkeypatch.setenv("SUMMARIZER_MODEL", "mistral")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = load_settings(tmp_path / "missing.env")
    config = settings.pipeline_config()

    assert config == PipelineConfig(
        model="mistral",
        max_content_length=2500,
        max_summary_length=1000,
        context_window_size=4096,
    )
    assert settings.log_level == "DEBUG"


def test_env_file_is_loaded_without_overriding_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("SUMMARIZER_MODEL=from-file\nNUM_CTX=2048\n", encoding="utf-8")
    monkeypatch.setenv("NUM_CTX", "1024")

    settings = load_settings(env_file)

    assert settings.summarizer_model == "from-file"
    assert settings.num_ctx == 1024


@pytest.mark.parametrize("value", ["abc", "0", "-5"])
def test_malformed_context_window_is_rejected(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("NUM_CTX", value)

    with pytest.raises(RuntimeError, match="Invalid configuration"):
        load_settings(tmp_path / "missing.env")


def test_pipeline_config_is_read_only() -> None:
    config = PipelineConfig(model="m", max_content_length=1, max_summary_length=1, context_window_size=1)

    assert config.min_content_length == MIN_CONTENT_LENGTH == 300
    with pytest.raises(ValidationError):
        config.max_content_length = 10  # type: ignore[misc]
