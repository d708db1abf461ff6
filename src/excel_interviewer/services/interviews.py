"""Interview state machine and dialogue orchestration."""

import asyncio
import logging
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID, uuid4
from weakref import WeakValueDictionary

from excel_interviewer.domain.errors import (
    InvalidStateError,
    NotFoundError,
    ValidationError,
)
from excel_interviewer.domain.interviews import (
    HistoryEntry,
    HistoryRole,
    InterviewRecord,
    InterviewStatus,
    InterviewSummary,
    Speaker,
    TranscriptEntry,
)
from excel_interviewer.services.feedback import FeedbackCompiler
from excel_interviewer.services.gateway import ModelGateway
from excel_interviewer.services.prompts import (
    build_follow_up_prompt,
    build_opening_prompt,
)

logger = logging.getLogger(__name__)


class InterviewRepository(Protocol):
    """Persistence interface for interviews."""

    def create_interview(self, record: InterviewRecord) -> None:
        """Store a new interview."""

    def get_interview(self, interview_id: UUID) -> InterviewRecord | None:
        """Return an interview by id, if present."""

    def update_interview(self, record: InterviewRecord) -> None:
        """Replace the stored interview with ``record``."""

    def list_interviews(self) -> list[InterviewSummary]:
        """Return summaries of all interviews, newest first."""


@dataclass
class InterviewService:
    """Drives a single interview from greeting to feedback.

    Operations that change an existing interview are serialized per interview
    id. Each one reads the record, waits for the model, and writes the new
    record only after the model call succeeded, so a failed call leaves the
    transcript and model history exactly as they were. The single exception
    is :meth:`end`: the interview is committed as completed before feedback
    is compiled, and :meth:`regenerate_feedback` recovers a failed report.
    """

    repository: InterviewRepository
    gateway: ModelGateway
    feedback_compiler: FeedbackCompiler
    _locks: "WeakValueDictionary[UUID, asyncio.Lock]" = field(
        default_factory=WeakValueDictionary, init=False, repr=False
    )

    async def start(self, candidate_name: str) -> tuple[UUID, str]:
        """Create an interview and return its id and the first question.

        Nothing is stored when the model call fails.
        """
        name = (candidate_name or "").strip()
        if not name:
            raise ValidationError("Candidate name is required.")

        interview_id = uuid4()
        start_time = datetime.now(tz=UTC)
        prompt = build_opening_prompt(name)
        question = await self.gateway.generate(prompt)

        record = InterviewRecord(
            id=interview_id,
            candidate_name=name,
            status=InterviewStatus.IN_PROGRESS,
            start_time=start_time,
            transcript=(TranscriptEntry(role=Speaker.AI, text=question),),
            model_history=(
                HistoryEntry(role=HistoryRole.USER, text=prompt),
                HistoryEntry(role=HistoryRole.MODEL, text=question),
            ),
        )
        self.repository.create_interview(record)
        logger.info("Interview started", extra={"interview_id": str(interview_id)})
        return interview_id, question

    async def submit_answer(self, interview_id: UUID, answer: str) -> str:
        """Record the candidate's answer and return the next question.

        The answer is only stored together with the model's reply; on a model
        failure the caller resubmits the same answer.
        """
        if not answer or not answer.strip():
            raise ValidationError("Answer is required.")

        async with self._lock_for(interview_id):
            record = self._require_in_progress(interview_id)
            prompt = build_follow_up_prompt(answer)
            question = await self.gateway.generate(prompt, record.model_history)
            updated = replace(
                record,
                transcript=(
                    *record.transcript,
                    TranscriptEntry(role=Speaker.CANDIDATE, text=answer),
                    TranscriptEntry(role=Speaker.AI, text=question),
                ),
                model_history=(
                    *record.model_history,
                    HistoryEntry(role=HistoryRole.USER, text=prompt),
                    HistoryEntry(role=HistoryRole.MODEL, text=question),
                ),
            )
            self.repository.update_interview(updated)

        logger.info(
            "Answer recorded",
            extra={
                "interview_id": str(interview_id),
                "turn": _answer_count(updated),
            },
        )
        return question

    async def end(self, interview_id: UUID) -> str:
        """Complete the interview and return the feedback report."""
        async with self._lock_for(interview_id):
            record = self._require_in_progress(interview_id)
            completed = replace(
                record,
                status=InterviewStatus.COMPLETED,
                end_time=datetime.now(tz=UTC),
            )
            self.repository.update_interview(completed)
            logger.info(
                "Interview completed", extra={"interview_id": str(interview_id)}
            )
            return await self._compile_feedback(completed)

    async def regenerate_feedback(self, interview_id: UUID) -> str:
        """Compile feedback for a completed interview whose report is missing."""
        async with self._lock_for(interview_id):
            record = self._require(interview_id)
            if not record.feedback_pending:
                if record.is_completed:
                    raise InvalidStateError("Feedback has already been generated.")
                raise InvalidStateError("Interview has not ended yet.")
            return await self._compile_feedback(record)

    def get_interview(self, interview_id: UUID) -> InterviewRecord:
        """Return the full interview record."""
        return self._require(interview_id)

    def list_interviews(self) -> list[InterviewSummary]:
        """Return summaries of every interview."""
        return self.repository.list_interviews()

    async def _compile_feedback(self, record: InterviewRecord) -> str:
        try:
            feedback = await self.feedback_compiler.compile(
                record.candidate_name, record.transcript
            )
        except Exception:
            logger.warning(
                "Feedback pending after failed compilation",
                extra={"interview_id": str(record.id)},
            )
            raise
        self.repository.update_interview(replace(record, feedback=feedback))
        return feedback

    def _require(self, interview_id: UUID) -> InterviewRecord:
        record = self.repository.get_interview(interview_id)
        if record is None:
            raise NotFoundError("Interview not found.")
        return record

    def _require_in_progress(self, interview_id: UUID) -> InterviewRecord:
        record = self._require(interview_id)
        if record.status != InterviewStatus.IN_PROGRESS:
            raise InvalidStateError("Interview has already ended.")
        return record

    def _lock_for(self, interview_id: UUID) -> asyncio.Lock:
        lock = self._locks.get(interview_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[interview_id] = lock
        return lock


def _answer_count(record: InterviewRecord) -> int:
    return sum(1 for entry in record.transcript if entry.role == Speaker.CANDIDATE)
