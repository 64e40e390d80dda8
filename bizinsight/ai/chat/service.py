"""
Business chat service.

Sends user questions to the chat model with the business profile as the
system instruction, and records the reply (or a visible error) in the
conversation.
"""

from bizinsight.ai.base import ChatProvider
from bizinsight.ai.chat.constants import (
    CHAT_TEMPERATURE,
    EMPTY_RESPONSE_MESSAGE,
    ERROR_MESSAGE,
    Sender,
)
from bizinsight.ai.chat.conversation import Conversation, to_chat_history
from bizinsight.ai.chat.prompts import build_system_instruction
from bizinsight.ai.chat.schemas import SendResult
from bizinsight.business.schemas import BusinessProfile
from bizinsight.utils.logger import logger


class BusinessChatService:
    """Service for AI-powered business chat over a profile snapshot."""

    def __init__(self, provider: ChatProvider):
        self.provider = provider

    async def send_message(
        self,
        conversation: Conversation,
        profile: BusinessProfile,
        user_text: str,
    ) -> SendResult:
        """
        Send a user message and append the assistant's reply.

        Blank text, or a send while another is in flight, is ignored without
        touching the conversation. Otherwise exactly two messages are
        appended: the user message, then either the reply or an
        error-flagged message. The busy flag is cleared in every outcome.

        Args:
            conversation: Conversation to append to
            profile: Profile snapshot used for the system instruction
            user_text: Raw user input

        Returns:
            SendResult: Whether the send was accepted and what was appended
        """
        text = user_text.strip()
        if not text or conversation.is_loading:
            logger.debug(
                "Ignoring send",
                blank=not text,
                is_loading=conversation.is_loading,
            )
            return SendResult(accepted=False)

        # Guard and state change happen before the first await
        history = to_chat_history(conversation.messages)
        user_message = conversation.append(text, Sender.USER)
        conversation.is_loading = True
        conversation.draft = ""

        logger.info(
            "Sending chat message",
            message_id=user_message.id,
            history_length=len(history),
        )

        try:
            result = await self.provider.send_chat(
                history=history,
                message=text,
                instructions=build_system_instruction(profile),
                temperature=CHAT_TEMPERATURE,
            )
            reply_text = result.text or EMPTY_RESPONSE_MESSAGE
            reply = conversation.append(reply_text, Sender.BOT)
            logger.info(
                "Chat reply received",
                message_id=reply.id,
                empty=not result.text,
                finish_reason=result.finish_reason,
            )
        except Exception as e:
            logger.exception(
                "Chat request failed", error=str(e), error_type=type(e).__name__
            )
            reply = conversation.append(ERROR_MESSAGE, Sender.BOT, is_error=True)
        finally:
            conversation.is_loading = False

        return SendResult(accepted=True, appended=[user_message, reply])
