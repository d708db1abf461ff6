"""Request and response models for the interview API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from excel_interviewer.domain.interviews import InterviewRecord, InterviewSummary


class _ApiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())


class StartInterviewRequest(_ApiModel):
    """Body of ``POST /interview/start``."""

    candidate_name: str = Field(alias="candidateName")


class StartInterviewResponse(_ApiModel):
    interview_id: UUID = Field(alias="interviewId")
    first_question: str = Field(alias="firstQuestion")


class SubmitAnswerRequest(_ApiModel):
    """Body of ``POST /interview/{id}/answer``."""

    answer: str


class SubmitAnswerResponse(_ApiModel):
    next_question: str = Field(alias="nextQuestion")


class EndInterviewResponse(_ApiModel):
    message: str = "Interview ended and feedback generated."
    feedback: str


class FeedbackResponse(_ApiModel):
    feedback: str


class TranscriptLine(_ApiModel):
    role: str
    text: str


class InterviewSummaryResponse(_ApiModel):
    """Row of the recruiter interview list."""

    id: UUID
    candidate_name: str = Field(alias="candidateName")
    start_time: datetime = Field(alias="startTime")
    status: str

    @classmethod
    def from_domain(cls, summary: InterviewSummary) -> "InterviewSummaryResponse":
        return cls(
            id=summary.id,
            candidate_name=summary.candidate_name,
            start_time=summary.start_time,
            status=summary.status.value,
        )


class InterviewDetailResponse(_ApiModel):
    """Full interview record, including transcript and feedback."""

    id: UUID
    candidate_name: str = Field(alias="candidateName")
    start_time: datetime = Field(alias="startTime")
    end_time: datetime | None = Field(default=None, alias="endTime")
    status: str
    transcript: list[TranscriptLine]
    model_history: list[TranscriptLine] = Field(alias="modelHistory")
    feedback: str | None = None

    @classmethod
    def from_domain(cls, record: InterviewRecord) -> "InterviewDetailResponse":
        return cls(
            id=record.id,
            candidate_name=record.candidate_name,
            start_time=record.start_time,
            end_time=record.end_time,
            status=record.status.value,
            transcript=[
                TranscriptLine(role=entry.role.value, text=entry.text)
                for entry in record.transcript
            ],
            model_history=[
                TranscriptLine(role=entry.role.value, text=entry.text)
                for entry in record.model_history
            ],
            feedback=record.feedback,
        )
