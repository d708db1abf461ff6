"""Tests for the model gateway."""

import asyncio
from collections.abc import Sequence

import pytest

from excel_interviewer.domain.errors import ModelUnavailableError
from excel_interviewer.domain.interviews import HistoryEntry, HistoryRole
from excel_interviewer.services.gateway import ChatClient
from tests.conftest import FailingChatClient, FakeChatClient, build_gateway


class SlowChatClient(ChatClient):
    async def complete(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        max_output_tokens: int,
        messages: Sequence[HistoryEntry],
    ) -> str:
        await asyncio.sleep(1)
        return "too late"


class BlankChatClient(ChatClient):
    async def complete(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        max_output_tokens: int,
        messages: Sequence[HistoryEntry],
    ) -> str:
        return "   "


def test_generate_appends_prompt_after_history() -> None:
    client = FakeChatClient()
    gateway = build_gateway(client)
    history = (
        HistoryEntry(role=HistoryRole.USER, text="opening"),
        HistoryEntry(role=HistoryRole.MODEL, text="first question"),
    )

    reply = asyncio.run(gateway.generate("follow up", history))

    assert reply == "Question 1"
    assert client.calls[0] == [
        *history,
        HistoryEntry(role=HistoryRole.USER, text="follow up"),
    ]


def test_generate_wraps_client_errors() -> None:
    error = ConnectionError("connection reset")
    gateway = build_gateway(FailingChatClient(error=error))

    with pytest.raises(ModelUnavailableError) as exc_info:
        asyncio.run(gateway.generate("hello"))

    assert exc_info.value.__cause__ is error


def test_generate_times_out() -> None:
    gateway = build_gateway(SlowChatClient(), timeout_seconds=0.01)

    with pytest.raises(ModelUnavailableError) as exc_info:
        asyncio.run(gateway.generate("hello"))

    assert isinstance(exc_info.value.__cause__, TimeoutError)


def test_generate_rejects_blank_reply() -> None:
    gateway = build_gateway(BlankChatClient())

    with pytest.raises(ModelUnavailableError):
        asyncio.run(gateway.generate("hello"))
