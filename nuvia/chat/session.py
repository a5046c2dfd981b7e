"""
Chat session - Client-side conversation state for the chat assistant.

A session keeps every message for display but only sends the most recent
ones to the model, and turns any failure into an apology message so the
conversation can continue.
"""
from typing import Callable, Optional

from nuvia.config.settings import get_settings
from nuvia.core.exceptions import NuviaError
from nuvia.core.logging_config import get_logger
from nuvia.flows.chat import generate_chat_response
from nuvia.models.chat import ChatInput, ChatMessage, ChatOutput, HistoryItem, MediaType

logger = get_logger(__name__)

SESSION_ERROR_MESSAGE = "Sorry, I couldn't process that. Please try again."
SUMMARIZE_PREFIX = "Please summarize the following text:\n\n"

ResponderFn = Callable[[ChatInput], ChatOutput]


class ChatSession:
    """
    Manages the messages of one chat conversation.

    Attributes:
        max_history_messages: How many previous messages accompany each turn
        messages: All messages, oldest first

    Example:
        >>> session = ChatSession()
        >>> reply = session.send("Explain photosynthesis")
        >>> reply.sender
        'ai'
    """

    def __init__(
        self,
        max_history_messages: Optional[int] = None,
        responder: Optional[ResponderFn] = None,
    ):
        """
        Initialize a chat session.

        Args:
            max_history_messages: Defaults to the configured value
            responder: Function that produces the reply (the chat flow by default)
        """
        if max_history_messages is None:
            max_history_messages = get_settings().max_history_messages
        self.max_history_messages = max_history_messages
        self.responder = responder or generate_chat_response
        self.messages: list[ChatMessage] = []
        self.last_error: Optional[str] = None

    def build_history(self, previous: list[ChatMessage]) -> list[HistoryItem]:
        """Truncate previous messages to the most recent ones and convert them."""
        if self.max_history_messages <= 0:
            return []
        recent = previous[-self.max_history_messages:]
        return [msg.to_history_item() for msg in recent]

    def send(
        self,
        text: str,
        media_data_uri: Optional[str] = None,
        media_type: Optional[MediaType] = None,
        file_name: Optional[str] = None,
    ) -> Optional[ChatMessage]:
        """
        Send a user message and record the assistant's reply.

        Blank text without an attachment is ignored.

        Args:
            text: The user's message
            media_data_uri: Optional attachment as a data URI
            media_type: Kind of attachment
            file_name: Attachment file name, for display

        Returns:
            The assistant's ChatMessage, or None when nothing was sent
        """
        trimmed = (text or "").strip()
        if not trimmed and not media_data_uri:
            return None

        previous = list(self.messages)
        user_message = ChatMessage(
            text=trimmed,
            sender="user",
            media_data_uri=media_data_uri,
            media_type=media_type,
            file_name=file_name,
        )
        self.messages.append(user_message)

        chat_input = ChatInput(
            user_input=trimmed,
            history=self.build_history(previous),
            media_data_uri=media_data_uri,
            media_type=media_type,
        )

        try:
            result = self.responder(chat_input)
            if result is None or not result.response.strip():
                raise NuviaError("Received an empty response from the AI.")
            reply_text = result.response
            self.last_error = None
        except NuviaError as e:
            logger.error(f"Chat session error: {e.message}")
            self.last_error = e.message
            reply_text = SESSION_ERROR_MESSAGE
        except Exception as e:
            logger.exception("Unexpected error in chat session")
            self.last_error = str(e) or type(e).__name__
            reply_text = SESSION_ERROR_MESSAGE

        ai_message = ChatMessage(text=reply_text, sender="ai")
        self.messages.append(ai_message)
        return ai_message

    def summarize_text(self, text: str) -> Optional[ChatMessage]:
        """Ask the assistant to summarize a block of text."""
        if not text or not text.strip():
            return None
        return self.send(f"{SUMMARIZE_PREFIX}{text.strip()}")

    def clear(self) -> None:
        """Remove all messages."""
        self.messages = []
        self.last_error = None

    @property
    def history(self) -> list[ChatMessage]:
        return self.messages.copy()

    @property
    def message_count(self) -> int:
        return len(self.messages)
