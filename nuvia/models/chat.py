"""Pydantic models for the chat assistant."""

import uuid
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

MediaType = Literal["image", "document", "audio"]

# Accept the camelCase names used by the web client as well as snake_case
CAMEL_CONFIG = {"alias_generator": to_camel, "populate_by_name": True}


class HistoryPart(BaseModel):
    """One text part of a history message."""

    text: str


class HistoryItem(BaseModel):
    """A previous message as the model sees it."""

    role: Literal["user", "model"]
    parts: list[HistoryPart] = Field(
        ...,
        min_length=1,
        description="Must contain at least one part, even if it's an empty string for text.",
    )

    @property
    def text(self) -> str:
        return "".join(part.text for part in self.parts)


class ChatInput(BaseModel):
    """Input for the chat flow."""

    user_input: str = Field(..., description="The input from the user.")
    media_data_uri: str | None = Field(
        None,
        description=(
            "A media file (image, document, or audio) as a data URI that must include a "
            "MIME type and use Base64 encoding. Expected format: 'data:<mimetype>;base64,<encoded_data>'."
        ),
    )
    media_type: MediaType | None = Field(
        None,
        description="The type of the media file: 'image', 'document', or 'audio'.",
    )
    history: list[HistoryItem] | None = Field(
        None,
        description="The conversation history up to this point. The current user input is separate.",
    )

    model_config = CAMEL_CONFIG


class ChatOutput(BaseModel):
    """Output of the chat flow."""

    response: str = Field(..., description="The response from the AI assistant.")


class ChatMessage(BaseModel):
    """A message kept by a chat session. Text is stored as sent or received."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    text: str = ""
    sender: Literal["user", "ai"]
    media_data_uri: str | None = None
    media_type: MediaType | None = None
    file_name: str | None = None
    created_at: datetime = Field(default_factory=datetime.now)

    def to_history_item(self) -> HistoryItem:
        """Convert to the shape the chat flow expects."""
        role = "user" if self.sender == "user" else "model"
        return HistoryItem(role=role, parts=[HistoryPart(text=self.text or "")])
