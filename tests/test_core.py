"""Tests for settings and exceptions."""

import pytest
from pydantic import ValidationError

from nuvia.config.settings import Settings, get_settings
from nuvia.core.exceptions import FlowInputError, FlowOutputError, LLMError, MediaError, NuviaError


class TestSettings:
    """Test configuration loading."""

    def test_defaults(self, monkeypatch):
        """Test the default values."""
        for name in ("LLM_PROVIDER", "MAX_HISTORY_MESSAGES", "CHAT_EMPTY_RETRIES", "MAX_MEDIA_SIZE_MB"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.llm_provider == "bedrock"
        assert settings.max_history_messages == 20
        assert settings.chat_empty_retries == 1
        assert settings.max_media_size_bytes == 5 * 1024 * 1024

    def test_environment_overrides(self, monkeypatch):
        """Test that environment variables are read."""
        monkeypatch.setenv("LLM_PROVIDER", "anthropic")
        monkeypatch.setenv("MAX_HISTORY_MESSAGES", "6")

        settings = get_settings()

        assert settings.llm_provider == "anthropic"
        assert settings.max_history_messages == 6

    def test_invalid_provider_rejected(self, monkeypatch):
        """Test provider validation."""
        monkeypatch.setenv("LLM_PROVIDER", "openai")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_settings_are_cached(self):
        """Test that get_settings returns the same instance."""
        assert get_settings() is get_settings()


class TestExceptions:
    """Test the exception hierarchy."""

    @pytest.mark.parametrize(
        "error",
        [
            FlowInputError("bad input", field="x"),
            FlowOutputError("no output", flow="quiz"),
            LLMError(),
            MediaError("bad file"),
        ],
    )
    def test_all_derive_from_base(self, error):
        """Test that every error is a NuviaError."""
        assert isinstance(error, NuviaError)

    def test_to_dict(self):
        """Test error serialization."""
        error = FlowInputError("Either text or a document is required", field="text_content")

        assert error.to_dict() == {
            "error": "flow_input_error",
            "message": "Either text or a document is required",
            "details": "field=text_content",
        }

    def test_llm_error_default_message(self):
        """Test the default message."""
        assert LLMError().message == "LLM service unavailable"
