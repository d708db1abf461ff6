"""Domain models for interview sessions."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from uuid import UUID


class InterviewStatus(StrEnum):
    """Lifecycle status of an interview."""

    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


class Speaker(StrEnum):
    """Who said a transcript line."""

    AI = "ai"
    CANDIDATE = "candidate"


class HistoryRole(StrEnum):
    """Role of a message replayed to the language model."""

    USER = "user"
    MODEL = "model"


@dataclass(frozen=True)
class TranscriptEntry:
    """Single human-readable line of the interview."""

    role: Speaker
    text: str


@dataclass(frozen=True)
class HistoryEntry:
    """Single message the language model has seen."""

    role: HistoryRole
    text: str


@dataclass(frozen=True)
class InterviewRecord:
    """Represents a persisted interview."""

    id: UUID
    candidate_name: str
    status: InterviewStatus
    start_time: datetime
    end_time: datetime | None = None
    transcript: tuple[TranscriptEntry, ...] = field(default_factory=tuple)
    model_history: tuple[HistoryEntry, ...] = field(default_factory=tuple)
    feedback: str | None = None

    @property
    def is_completed(self) -> bool:
        return self.status == InterviewStatus.COMPLETED

    @property
    def feedback_pending(self) -> bool:
        """Completed, but the feedback report was never stored."""
        return self.is_completed and self.feedback is None


@dataclass(frozen=True)
class InterviewSummary:
    """Lightweight listing row for recruiter dashboards."""

    id: UUID
    candidate_name: str
    start_time: datetime
    status: InterviewStatus
