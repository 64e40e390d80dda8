"""Gemini provider implementation."""

from braintrust.wrappers.google_genai import setup_genai
from google import genai
from google.genai import errors
from google.genai.types import Content, GenerateContentConfig, HttpOptions, Part

from bizinsight.ai.base import ChatProvider, ChatTurn, ContentGenerationResult
from bizinsight.ai.gemini.config import GeminiSettings, get_gemini_settings
from bizinsight.ai.gemini.exceptions import (
    GeminiAuthenticationError,
    GeminiError,
    error_for_status,
)
from bizinsight.utils.logger import logger


def to_gemini_history(history: list[ChatTurn]) -> list[Content]:
    """Convert chat turns into Gemini contents, one text part per turn."""
    return [
        Content(role=turn.role.value, parts=[Part(text=turn.content)])
        for turn in history
    ]


class GeminiProvider(ChatProvider):
    """Gemini provider implementation.

    Uses Google's Gemini API through an async chat session seeded with the
    conversation history.
    """

    def __init__(self, settings: GeminiSettings | None = None):
        """Initialize Gemini provider.

        Args:
            settings: Gemini settings; the global settings are used if omitted
        """
        self._client: genai.Client | None = None
        self.settings = settings or get_gemini_settings()

    def _get_client(self) -> genai.Client:
        """Get or create the Gemini client.

        Sets up Braintrust tracing when a project name is configured.
        """
        if self._client is None:
            if not self.settings.api_key:
                raise GeminiAuthenticationError("Gemini API key is not configured")
            try:
                if self.settings.braintrust_project_name:
                    logger.info(
                        "Setting up Gemini with Braintrust tracing",
                        project=self.settings.braintrust_project_name,
                    )
                    setup_genai(project_name=self.settings.braintrust_project_name)

                self._client = genai.Client(
                    api_key=self.settings.api_key,
                    http_options=HttpOptions(timeout=self.settings.timeout * 1000),
                )
                logger.info("Gemini client initialized")
            except Exception as e:
                logger.error("Failed to initialize Gemini client", error=str(e))
                raise GeminiAuthenticationError(f"Failed to authenticate: {e}")
        return self._client

    async def send_chat(
        self,
        history: list[ChatTurn],
        message: str,
        instructions: str | None = None,
        **kwargs,
    ) -> ContentGenerationResult:
        """Send a message to a Gemini chat session.

        Args:
            history: Prior turns, oldest first
            message: The new user message
            instructions: System instruction for the session
            **kwargs: Additional options (temperature, model)

        Returns:
            ContentGenerationResult: Generated reply, empty text if the model
            returned no candidates

        Raises:
            GeminiError: If the call fails for any reason
        """
        try:
            client = self._get_client()

            model_name = kwargs.get("model") or self.settings.model_name
            temperature = kwargs.get("temperature")
            if temperature is None:
                temperature = self.settings.temperature

            logger.info(
                "Sending chat message",
                model_name=model_name,
                history_length=len(history),
            )

            chat = client.aio.chats.create(
                model=model_name,
                history=to_gemini_history(history),
                config=GenerateContentConfig(
                    system_instruction=instructions,
                    temperature=temperature,
                ),
            )
            response = await chat.send_message(message)

            usage = getattr(response, "usage_metadata", None)
            candidates = getattr(response, "candidates", None) or []
            finish_reason = getattr(candidates[0], "finish_reason", None) if candidates else None

            return ContentGenerationResult(
                text=response.text or "",
                usage=usage.model_dump(exclude_none=True) if usage else None,
                finish_reason=getattr(finish_reason, "value", finish_reason)
                if finish_reason
                else None,
            )

        except GeminiError:
            raise
        except errors.APIError as e:
            logger.error("Gemini API call failed", status_code=e.code, error=str(e))
            raise error_for_status(f"Chat failed: {e.message or e}", e.code)
        except Exception as e:
            logger.error("Chat failed", error=str(e), error_type=type(e).__name__)
            raise GeminiError(f"Chat failed: {e}")
