"""
FastAPI dependencies for the business chat.
"""

from typing import Annotated

from fastapi import Depends

from bizinsight.ai.base import ChatProvider
from bizinsight.ai.chat.conversation import Conversation
from bizinsight.ai.chat.service import BusinessChatService
from bizinsight.ai.providers import get_ai_provider
from bizinsight.utils.logger import logger

_conversation = Conversation()


def get_conversation() -> Conversation:
    """
    Get the session's conversation.

    Created at import time so concurrent first requests share one instance.

    Returns:
        Conversation: The conversation singleton
    """
    return _conversation


def set_conversation(conversation: Conversation | None) -> None:
    """Replace the conversation, or start a fresh one when None."""
    global _conversation
    _conversation = conversation if conversation is not None else Conversation()
    logger.info("Started new conversation")


def get_chat_provider() -> ChatProvider:
    return get_ai_provider()


def get_chat_service(
    provider: Annotated[ChatProvider, Depends(get_chat_provider)],
) -> BusinessChatService:
    return BusinessChatService(provider)
