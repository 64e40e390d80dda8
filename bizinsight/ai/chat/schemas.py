"""Pydantic schemas for chat messages, rendering and the chat API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from bizinsight.ai.chat.constants import Sender


class Message(BaseModel):
    """A single chat message. Messages are never edited once created."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(description="Position-ordered id, unique within a conversation")
    text: str
    sender: Sender
    timestamp: datetime
    is_error: bool = Field(
        default=False, description="Marks a synthesized failure message"
    )


class TextSpan(BaseModel):
    """A run of text within a line, optionally emphasized."""

    text: str
    bold: bool = False


class DisplayBlock(BaseModel):
    """One rendered line of a message."""

    spans: list[TextSpan] = []
    is_list_item: bool = False

    @property
    def is_blank(self) -> bool:
        return not self.spans


class MessageView(BaseModel):
    """A message together with its rendered blocks."""

    message: Message
    blocks: list[DisplayBlock]


class ChatView(BaseModel):
    """Everything the chat panel needs to draw itself."""

    messages: list[MessageView]
    is_loading: bool
    draft: str
    can_send: bool
    starter_questions: list[str]


class SendMessageRequest(BaseModel):
    """Request to send a user message."""

    text: str


class DraftUpdateRequest(BaseModel):
    """Request to replace the pending input text."""

    draft: str


class SendResult(BaseModel):
    """Outcome of a send attempt.

    ``accepted`` is False when the send was ignored because the text was
    blank or another send was in flight; nothing was appended in that case.
    """

    accepted: bool
    appended: list[Message] = []

    @property
    def reply(self) -> Message | None:
        return self.appended[-1] if len(self.appended) == 2 else None
