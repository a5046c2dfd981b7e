"""LangGraph state for a single chat turn."""

from typing import TypedDict

from nuvia.config.settings import get_settings
from nuvia.models.chat import ChatInput


class ChatState(TypedDict):
    """State passed between the chat workflow nodes."""

    chat_input: ChatInput
    response: str
    attempts: int
    max_attempts: int
    error: str | None


def create_initial_state(chat_input: ChatInput, max_attempts: int | None = None) -> ChatState:
    """
    Create the starting state for a chat turn.

    Args:
        chat_input: The turn to answer
        max_attempts: Total model calls allowed for an empty reply
            (defaults to one plus the configured retries)

    Returns:
        Initial ChatState
    """
    if max_attempts is None:
        max_attempts = 1 + get_settings().chat_empty_retries

    return ChatState(
        chat_input=chat_input,
        response="",
        attempts=0,
        max_attempts=max(1, max_attempts),
        error=None,
    )
