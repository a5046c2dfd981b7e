"""
Custom exceptions for the study assistant.

Every error raised by a flow derives from ``NuviaError`` so callers
(the chat session, the CLI) can catch one type and surface a message.
"""
from typing import Optional


class NuviaError(Exception):
    """Base exception for all Nuvia errors."""

    error_code: str = "internal_error"

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        """Convert to error response dict."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class FlowInputError(NuviaError):
    """Raised when a flow is called with input it cannot work with."""

    error_code = "flow_input_error"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, details=f"field={field}" if field else None)
        self.field = field


class FlowOutputError(NuviaError):
    """Raised when the model returns no usable output for a flow."""

    error_code = "flow_output_error"

    def __init__(self, message: str, flow: Optional[str] = None):
        super().__init__(message, details=f"flow={flow}" if flow else None)
        self.flow = flow


class LLMError(NuviaError):
    """Raised when the hosted model call itself fails."""

    error_code = "llm_error"

    def __init__(self, message: str = "LLM service unavailable", details: Optional[str] = None):
        super().__init__(message, details)


class MediaError(NuviaError):
    """Raised for malformed, oversized or unsupported attachments."""

    error_code = "media_error"
