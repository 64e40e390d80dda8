"""FastAPI router for the business chat endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from bizinsight.ai.chat.conversation import Conversation
from bizinsight.ai.chat.dependencies import get_chat_service, get_conversation
from bizinsight.ai.chat.formatting import render_message
from bizinsight.ai.chat.schemas import (
    ChatView,
    DraftUpdateRequest,
    MessageView,
    SendMessageRequest,
    SendResult,
)
from bizinsight.ai.chat.service import BusinessChatService
from bizinsight.business.dependencies import get_profile_store
from bizinsight.business.service import ProfileStore
from bizinsight.utils.logger import logger

router = APIRouter(prefix="/chat", tags=["Chat"])


def build_chat_view(conversation: Conversation) -> ChatView:
    return ChatView(
        messages=[
            MessageView(message=message, blocks=render_message(message))
            for message in conversation.messages
        ],
        is_loading=conversation.is_loading,
        draft=conversation.draft,
        can_send=conversation.can_send,
        starter_questions=conversation.starter_questions(),
    )


@router.get("", response_model=ChatView)
async def get_chat(
    conversation: Annotated[Conversation, Depends(get_conversation)],
) -> ChatView:
    """Return the conversation with rendered messages and panel state."""
    return build_chat_view(conversation)


@router.put("/draft", response_model=ChatView)
async def update_draft(
    request: DraftUpdateRequest,
    conversation: Annotated[Conversation, Depends(get_conversation)],
) -> ChatView:
    """Replace the pending input text."""
    conversation.draft = request.draft
    return build_chat_view(conversation)


@router.post("/messages", response_model=SendResult)
async def send_message(
    request: SendMessageRequest,
    conversation: Annotated[Conversation, Depends(get_conversation)],
    profile_store: Annotated[ProfileStore, Depends(get_profile_store)],
    chat_service: Annotated[BusinessChatService, Depends(get_chat_service)],
) -> SendResult:
    """
    Send a message to the assistant.

    The profile is read at send time, so profile edits apply from the next
    message on. A blank message or a send while another is in flight is
    ignored and reported with ``accepted: false``.

    Args:
        request: Message text
        conversation: Session conversation
        profile_store: Session profile store
        chat_service: Chat service dependency

    Returns:
        SendResult: The appended user and assistant messages
    """
    result = await chat_service.send_message(
        conversation, profile_store.get(), request.text
    )
    if not result.accepted:
        logger.info("Send ignored", is_loading=conversation.is_loading)
    return result
