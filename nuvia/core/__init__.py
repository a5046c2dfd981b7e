"""Core utilities: logging and exceptions."""

from .exceptions import FlowInputError, FlowOutputError, LLMError, MediaError, NuviaError
from .logging_config import get_logger, setup_logging

__all__ = [
    "NuviaError",
    "FlowInputError",
    "FlowOutputError",
    "LLMError",
    "MediaError",
    "get_logger",
    "setup_logging",
]
