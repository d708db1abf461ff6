"""OpenAI Responses API client for interview dialogue."""

from collections.abc import Sequence
from dataclasses import dataclass

import httpx
from openai import AsyncOpenAI

from excel_interviewer.domain.interviews import HistoryEntry, HistoryRole
from excel_interviewer.services.gateway import ChatClient

_ROLES = {
    HistoryRole.USER: "user",
    HistoryRole.MODEL: "assistant",
}


@dataclass
class OpenAIChatClient(ChatClient):
    """Chat client backed by OpenAI Responses API."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str, timeout: float) -> "OpenAIChatClient":
        """Create an OpenAI chat client."""
        http_client = httpx.AsyncClient(timeout=timeout)
        return cls(
            client=AsyncOpenAI(
                api_key=api_key, http_client=http_client, max_retries=0
            )
        )

    async def complete(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        max_output_tokens: int,
        messages: Sequence[HistoryEntry],
    ) -> str:
        """Replay the conversation and return the generated reply."""
        request_payload: dict[str, object] = {
            "model": model,
            "input": [
                {"role": _ROLES[message.role], "content": message.text}
                for message in messages
            ],
            "max_output_tokens": max_output_tokens,
            "store": store,
        }
        if reasoning_effort:
            request_payload["reasoning"] = {"effort": reasoning_effort}

        response = await self.client.responses.create(**request_payload)
        output_text = response.output_text
        if not output_text:
            raise RuntimeError("OpenAI returned an empty response")
        return output_text

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
