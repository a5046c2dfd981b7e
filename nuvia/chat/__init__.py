"""Chat session orchestration."""

from .session import SESSION_ERROR_MESSAGE, ChatSession

__all__ = ["ChatSession", "SESSION_ERROR_MESSAGE"]
