"""Shared test fixtures."""

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass, field
from uuid import UUID

import pytest

from excel_interviewer.config import Settings
from excel_interviewer.containers import AppContainer
from excel_interviewer.domain.interviews import (
    HistoryEntry,
    InterviewRecord,
    InterviewSummary,
)
from excel_interviewer.services.feedback import FeedbackCompiler
from excel_interviewer.services.gateway import ChatClient, ModelGateway
from excel_interviewer.services.interviews import (
    InterviewRepository,
    InterviewService,
)


@dataclass
class InMemoryInterviewRepository(InterviewRepository):
    """In-memory interview repository for tests."""

    interviews: dict[UUID, InterviewRecord] = field(default_factory=dict)
    writes: int = 0

    def create_interview(self, record: InterviewRecord) -> None:
        self.interviews[record.id] = record
        self.writes += 1

    def get_interview(self, interview_id: UUID) -> InterviewRecord | None:
        return self.interviews.get(interview_id)

    def update_interview(self, record: InterviewRecord) -> None:
        self.interviews[record.id] = record
        self.writes += 1

    def list_interviews(self) -> list[InterviewSummary]:
        records = sorted(
            self.interviews.values(),
            key=lambda record: record.start_time,
            reverse=True,
        )
        return [
            InterviewSummary(
                id=record.id,
                candidate_name=record.candidate_name,
                start_time=record.start_time,
                status=record.status,
            )
            for record in records
        ]


@dataclass
class FakeChatClient(ChatClient):
    """Fake chat client that numbers its replies and records every call."""

    calls: list[list[HistoryEntry]] = field(default_factory=list)
    reply_prefix: str = "Question"

    async def complete(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        max_output_tokens: int,
        messages: Sequence[HistoryEntry],
    ) -> str:
        self.calls.append(list(messages))
        await asyncio.sleep(0)
        return f"{self.reply_prefix} {len(self.calls)}"


@dataclass
class FailingChatClient(ChatClient):
    """Fake chat client that fails once ``fail_after`` calls have succeeded."""

    fail_after: int = 0
    calls: int = 0
    error: Exception = field(default_factory=lambda: RuntimeError("quota exceeded"))

    async def complete(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        max_output_tokens: int,
        messages: Sequence[HistoryEntry],
    ) -> str:
        self.calls += 1
        if self.calls > self.fail_after:
            raise self.error
        return f"Reply {self.calls}"


def build_gateway(client: ChatClient, timeout_seconds: float = 5.0) -> ModelGateway:
    return ModelGateway(
        client=client,
        model="gpt-4.1-mini",
        reasoning_effort=None,
        store=False,
        max_response_tokens=500,
        timeout_seconds=timeout_seconds,
    )


def build_service(
    client: ChatClient,
    repository: InMemoryInterviewRepository | None = None,
) -> InterviewService:
    gateway = build_gateway(client)
    return InterviewService(
        repository=repository or InMemoryInterviewRepository(),
        gateway=gateway,
        feedback_compiler=FeedbackCompiler(gateway),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        openai_api_key="openai-key",
        api_prefix="/api",
        interview_store_path="unused.json",
    )


@pytest.fixture
def interview_repository() -> InMemoryInterviewRepository:
    return InMemoryInterviewRepository()


@pytest.fixture
def chat_client() -> FakeChatClient:
    return FakeChatClient()


@pytest.fixture
def container(
    settings: Settings,
    interview_repository: InMemoryInterviewRepository,
    chat_client: FakeChatClient,
) -> AppContainer:
    gateway = build_gateway(chat_client)
    feedback_compiler = FeedbackCompiler(gateway)
    interview_service = InterviewService(
        repository=interview_repository,
        gateway=gateway,
        feedback_compiler=feedback_compiler,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        interview_repository=interview_repository,
        model_gateway=gateway,
        feedback_compiler=feedback_compiler,
        interview_service=interview_service,
        close_resources=close_resources,
    )
