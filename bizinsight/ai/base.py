"""Base classes for the chat provider abstraction."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

from pydantic import BaseModel


class TurnRole(str, Enum):
    """Roles understood by the remote chat model."""

    USER = "user"
    MODEL = "model"


class ChatTurn(BaseModel):
    """A single prior turn sent to the remote chat model as history.

    System instructions are passed separately via the instructions parameter.
    """

    role: TurnRole
    content: str


class ContentGenerationResult(BaseModel):
    """Result from content generation."""

    text: str
    usage: dict[str, Any] | None = None
    finish_reason: str | None = None


class ChatProvider(ABC):
    """Abstract base class for chat providers.

    A provider takes the prior turns of a conversation, a system instruction
    and a new outgoing message, and returns the generated reply. Any failure
    is raised to the caller.
    """

    @abstractmethod
    async def send_chat(
        self,
        history: list[ChatTurn],
        message: str,
        instructions: str | None = None,
        **kwargs,
    ) -> ContentGenerationResult:
        """Send one message in the context of a prior conversation.

        Args:
            history: Prior turns, oldest first
            message: The new user message
            instructions: System instruction for the model
            **kwargs: Provider-specific options (temperature, model, etc.)

        Returns:
            ContentGenerationResult: Generated reply; text may be empty
        """
        pass
