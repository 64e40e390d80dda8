"""
In-memory conversation state for a single chat session.
"""

from datetime import datetime, timezone
from itertools import count

from bizinsight.ai.base import ChatTurn, TurnRole
from bizinsight.ai.chat.constants import (
    STARTER_QUESTION_MAX_MESSAGES,
    STARTER_QUESTIONS,
    WELCOME_MESSAGE,
    Sender,
)
from bizinsight.ai.chat.schemas import Message


class Conversation:
    """Ordered, append-only message list plus the busy flag and input draft.

    Message ids come from a per-conversation counter, so they increase with
    position in the list.
    """

    def __init__(self, greeting: str | None = WELCOME_MESSAGE):
        self._ids = count()
        self._messages: list[Message] = []
        self.is_loading = False
        self.draft = ""
        if greeting:
            self.append(greeting, Sender.BOT)

    @property
    def messages(self) -> list[Message]:
        return list(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def append(self, text: str, sender: Sender, is_error: bool = False) -> Message:
        message = Message(
            id=next(self._ids),
            text=text,
            sender=sender,
            timestamp=datetime.now(timezone.utc),
            is_error=is_error,
        )
        self._messages.append(message)
        return message

    @property
    def can_send(self) -> bool:
        """Whether the send control is enabled for the current draft."""
        return bool(self.draft.strip()) and not self.is_loading

    def starter_questions(self) -> list[str]:
        """Starter questions to offer, empty once the conversation is underway."""
        if len(self._messages) < STARTER_QUESTION_MAX_MESSAGES and not self.is_loading:
            return list(STARTER_QUESTIONS)
        return []


def to_chat_history(messages: list[Message]) -> list[ChatTurn]:
    """Map messages to model turns: user messages as "user", bot as "model"."""
    return [
        ChatTurn(
            role=TurnRole.USER if message.sender == Sender.USER else TurnRole.MODEL,
            content=message.text,
        )
        for message in messages
    ]
