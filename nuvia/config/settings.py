"""Application settings and configuration."""

from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

# Load .env file if present
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Provider selection
    llm_provider: Literal["bedrock", "anthropic"] = Field(
        default="bedrock",
        description="Which hosted model provider to call",
        validation_alias="LLM_PROVIDER",
    )

    # AWS CONFIG (only needed for the bedrock provider)
    aws_api_key_id: str | None = Field(
        default=None,
        description="AWS API key ID",
        validation_alias="AWS_ACCESS_KEY_ID",
    )
    aws_api_key_secret: str | None = Field(
        default=None,
        description="AWS API key",
        validation_alias="AWS_SECRET_ACCESS_KEY",
    )
    aws_default_region: str | None = Field(
        default=None,
        description="AWS API region",
        validation_alias="AWS_DEFAULT_REGION",
    )

    # Anthropic CONFIG (only needed for the anthropic provider)
    anthropic_api_key: str | None = Field(
        default=None,
        description="Anthropic API key",
        validation_alias="ANTHROPIC_API_KEY",
    )

    # Model Configuration
    model_name: str = Field(
        default="anthropic.claude-3-7-sonnet-20250219-v1:0",
        description="Model to use (AWS Bedrock model ID)",
        validation_alias="MODEL_NAME",
    )
    anthropic_model_name: str = Field(
        default="claude-3-7-sonnet-20250219",
        description="Model to use with the Anthropic API",
        validation_alias="ANTHROPIC_MODEL_NAME",
    )

    # Generation Settings
    default_temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=1.0,
        description="Temperature for notes, quizzes and Q&A",
        validation_alias="DEFAULT_TEMPERATURE",
    )

    chat_temperature: float = Field(
        default=0.3,  # keeps chat answers consistent between turns
        ge=0.0,
        le=1.0,
        description="Temperature for the chat assistant",
        validation_alias="CHAT_TEMPERATURE",
    )

    planner_temperature: float = Field(
        default=0.4,
        ge=0.0,
        le=1.0,
        description="Temperature for assignment plans",
        validation_alias="PLANNER_TEMPERATURE",
    )

    # Chat Settings
    max_history_messages: int = Field(
        default=20,  # roughly 10 user/model pairs
        ge=0,
        description="How many previous messages are sent with each chat turn",
        validation_alias="MAX_HISTORY_MESSAGES",
    )

    chat_empty_retries: int = Field(
        default=1,
        ge=0,
        le=5,
        description="Extra attempts when the model returns an empty chat response",
        validation_alias="CHAT_EMPTY_RETRIES",
    )

    max_media_size_mb: float = Field(
        default=5,
        gt=0,
        description="Largest accepted attachment, in megabytes",
        validation_alias="MAX_MEDIA_SIZE_MB",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Console log level",
        validation_alias="LOG_LEVEL",
    )
    log_dir: str | None = Field(
        default=None,
        description="Directory for log files (defaults to ./logs)",
        validation_alias="LOG_DIR",
    )

    # Output Settings
    default_output_dir: str = Field(
        default="output",
        description="Directory for exported documents",
        validation_alias="DEFAULT_OUTPUT_DIR",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @property
    def max_media_size_bytes(self) -> int:
        return int(self.max_media_size_mb * 1024 * 1024)


# Loaded the first time and then cached for every flow
@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings object with loaded configuration
    """
    return Settings()
