"""Tests for the Gemini chat provider."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from google.genai import errors, types

from bizinsight.ai.base import ChatTurn, TurnRole
from bizinsight.ai.gemini.config import GeminiSettings
from bizinsight.ai.gemini.exceptions import (
    GeminiAuthenticationError,
    GeminiError,
    GeminiRateLimitError,
    GeminiServerError,
    error_for_status,
)
from bizinsight.ai.providers.gemini import GeminiProvider, to_gemini_history


@pytest.fixture
def settings():
    return GeminiSettings(
        api_key="test-api-key",
        model_name="gemini-test",
        temperature=0.2,
        timeout=30,
    )


@pytest.fixture
def chat_session():
    session = MagicMock()
    response = MagicMock()
    response.text = "Focus on repeat customers."
    response.usage_metadata = None
    response.candidates = []
    session.send_message = AsyncMock(return_value=response)
    return session


@pytest.fixture
def genai_client(chat_session):
    client = MagicMock()
    client.aio.chats.create.return_value = chat_session
    return client


@pytest.fixture
def provider(settings, genai_client):
    with patch(
        "bizinsight.ai.providers.gemini.genai.Client", return_value=genai_client
    ):
        yield GeminiProvider(settings=settings)


def test_history_conversion_uses_one_text_part_per_turn():
    contents = to_gemini_history(
        [
            ChatTurn(role=TurnRole.MODEL, content="Hello!"),
            ChatTurn(role=TurnRole.USER, content="Why are sales down?"),
        ]
    )

    assert [c.role for c in contents] == ["model", "user"]
    assert [[p.text for p in c.parts] for c in contents] == [
        ["Hello!"],
        ["Why are sales down?"],
    ]


@pytest.mark.asyncio
async def test_send_chat_creates_session_with_history_and_config(
    provider, genai_client, chat_session
):
    history = [ChatTurn(role=TurnRole.MODEL, content="Hello!")]

    result = await provider.send_chat(
        history=history,
        message="How do I cut costs?",
        instructions="You are BizInsight.",
        temperature=0.7,
    )

    assert result.text == "Focus on repeat customers."
    create_kwargs = genai_client.aio.chats.create.call_args.kwargs
    assert create_kwargs["model"] == "gemini-test"
    assert create_kwargs["history"][0].role == "model"
    assert create_kwargs["config"].system_instruction == "You are BizInsight."
    assert create_kwargs["config"].temperature == 0.7
    chat_session.send_message.assert_awaited_once_with("How do I cut costs?")


@pytest.mark.asyncio
async def test_send_chat_falls_back_to_settings(provider, genai_client):
    await provider.send_chat(history=[], message="Hi")

    create_kwargs = genai_client.aio.chats.create.call_args.kwargs
    assert create_kwargs["config"].temperature == 0.2
    assert create_kwargs["config"].system_instruction is None


@pytest.mark.asyncio
async def test_missing_text_becomes_empty_string(provider, chat_session):
    chat_session.send_message.return_value.text = None

    result = await provider.send_chat(history=[], message="Hi")

    assert result.text == ""


@pytest.mark.asyncio
async def test_missing_api_key_raises_authentication_error():
    provider = GeminiProvider(settings=GeminiSettings(api_key=None, model_name="m"))

    with pytest.raises(GeminiAuthenticationError):
        await provider.send_chat(history=[], message="Hi")


@pytest.mark.asyncio
async def test_api_error_is_mapped_by_status(provider, chat_session):
    chat_session.send_message.side_effect = errors.ClientError(
        429,
        {"error": {"code": 429, "message": "Quota exceeded", "status": "RESOURCE_EXHAUSTED"}},
    )

    with pytest.raises(GeminiRateLimitError) as exc_info:
        await provider.send_chat(history=[], message="Hi")

    assert exc_info.value.status_code == 429


@pytest.mark.asyncio
async def test_other_failures_are_wrapped(provider, chat_session):
    chat_session.send_message.side_effect = ConnectionError("network down")

    with pytest.raises(GeminiError, match="network down"):
        await provider.send_chat(history=[], message="Hi")


@pytest.mark.parametrize(
    "status_code,expected",
    [
        (401, GeminiAuthenticationError),
        (403, GeminiAuthenticationError),
        (429, GeminiRateLimitError),
        (503, GeminiServerError),
    ],
)
def test_error_for_status(status_code, expected):
    error = error_for_status("failed", status_code)

    assert type(error) is expected
    assert error.status_code == status_code


@pytest.mark.asyncio
async def test_finish_reason_is_reported_by_value(provider, chat_session):
    candidate = MagicMock()
    candidate.finish_reason = types.FinishReason.STOP
    chat_session.send_message.return_value.candidates = [candidate]

    result = await provider.send_chat(history=[], message="Hi")

    assert result.finish_reason == "STOP"
