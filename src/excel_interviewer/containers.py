"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path

from supabase import create_client

from excel_interviewer.adapters.json_interview_repository import (
    JsonFileInterviewRepository,
)
from excel_interviewer.adapters.openai_chat_client import OpenAIChatClient
from excel_interviewer.adapters.supabase_interview_repository import (
    SupabaseInterviewRepository,
)
from excel_interviewer.config import Settings
from excel_interviewer.services.feedback import FeedbackCompiler
from excel_interviewer.services.gateway import ModelGateway
from excel_interviewer.services.interviews import (
    InterviewRepository,
    InterviewService,
)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    interview_repository: InterviewRepository
    model_gateway: ModelGateway
    feedback_compiler: FeedbackCompiler
    interview_service: InterviewService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    interview_repository = _build_repository(resolved_settings)
    chat_client = OpenAIChatClient.create(
        resolved_settings.openai_api_key,
        timeout=resolved_settings.model_timeout_seconds,
    )
    model_gateway = ModelGateway(
        client=chat_client,
        model=resolved_settings.openai_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        store=resolved_settings.openai_store,
        max_response_tokens=resolved_settings.max_response_tokens,
        timeout_seconds=resolved_settings.model_timeout_seconds,
    )
    feedback_compiler = FeedbackCompiler(model_gateway)
    interview_service = InterviewService(
        repository=interview_repository,
        gateway=model_gateway,
        feedback_compiler=feedback_compiler,
    )

    async def close_resources() -> None:
        await chat_client.close()

    return AppContainer(
        settings=resolved_settings,
        interview_repository=interview_repository,
        model_gateway=model_gateway,
        feedback_compiler=feedback_compiler,
        interview_service=interview_service,
        close_resources=close_resources,
    )


def _build_repository(settings: Settings) -> InterviewRepository:
    """Use Supabase when configured, otherwise the local JSON document."""
    if settings.uses_supabase:
        supabase_client = create_client(
            settings.supabase_url, settings.supabase_service_key
        )
        return SupabaseInterviewRepository(supabase_client)
    return JsonFileInterviewRepository(Path(settings.interview_store_path))
