"""Language model gateway with a bounded, typed failure surface."""

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from excel_interviewer.domain.errors import ModelUnavailableError
from excel_interviewer.domain.interviews import HistoryEntry, HistoryRole

logger = logging.getLogger(__name__)


class ChatClient(Protocol):
    """Interface for chat-style text generation."""

    async def complete(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        max_output_tokens: int,
        messages: Sequence[HistoryEntry],
    ) -> str:
        """Return the model's reply to the message list."""


@dataclass
class ModelGateway:
    """Sends prompts plus replayed history to the configured chat client."""

    client: ChatClient
    model: str
    reasoning_effort: str | None
    store: bool
    max_response_tokens: int
    timeout_seconds: float

    async def generate(
        self, prompt: str, history: Sequence[HistoryEntry] = ()
    ) -> str:
        """Return the model's continuation of ``history`` followed by ``prompt``.

        Every call is stateless: ``history`` must hold every earlier turn the
        model is expected to remember. Any failure, including a timeout or an
        empty reply, is raised as :class:`ModelUnavailableError`.
        """
        messages = [*history, HistoryEntry(role=HistoryRole.USER, text=prompt)]
        try:
            text = await asyncio.wait_for(
                self.client.complete(
                    model=self.model,
                    reasoning_effort=self.reasoning_effort,
                    store=self.store,
                    max_output_tokens=self.max_response_tokens,
                    messages=messages,
                ),
                timeout=self.timeout_seconds,
            )
        except TimeoutError as exc:
            logger.exception(
                "Model call timed out",
                extra={"model": self.model, "timeout": self.timeout_seconds},
            )
            raise ModelUnavailableError(
                "The AI model did not respond in time."
            ) from exc
        except Exception as exc:
            logger.exception(
                "Model call failed",
                extra={"model": self.model, "messages": len(messages)},
            )
            raise ModelUnavailableError(
                "Failed to get response from AI model."
            ) from exc
        if not text or not text.strip():
            raise ModelUnavailableError("The AI model returned an empty response.")
        return text
