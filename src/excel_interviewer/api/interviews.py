"""Interview API endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from fastapi import APIRouter, Request, status

from excel_interviewer.api.models import (
    EndInterviewResponse,
    FeedbackResponse,
    InterviewDetailResponse,
    InterviewSummaryResponse,
    StartInterviewRequest,
    StartInterviewResponse,
    SubmitAnswerRequest,
    SubmitAnswerResponse,
)
from excel_interviewer.domain.errors import NotFoundError

if TYPE_CHECKING:
    from excel_interviewer.services.interviews import InterviewService

router = APIRouter(tags=["interviews"])


def _service(request: Request) -> InterviewService:
    return request.app.state.container.interview_service


@router.post(
    "/interview/start",
    status_code=status.HTTP_201_CREATED,
    response_model=StartInterviewResponse,
)
async def start_interview(
    body: StartInterviewRequest, request: Request
) -> StartInterviewResponse:
    """Create an interview and return the opening question."""
    interview_id, question = await _service(request).start(body.candidate_name)
    return StartInterviewResponse(interview_id=interview_id, first_question=question)


@router.post("/interview/{interview_id}/answer", response_model=SubmitAnswerResponse)
async def submit_answer(
    interview_id: str, body: SubmitAnswerRequest, request: Request
) -> SubmitAnswerResponse:
    """Record the candidate's answer and return the next question."""
    question = await _service(request).submit_answer(
        _parse_interview_id(interview_id), body.answer
    )
    return SubmitAnswerResponse(next_question=question)


@router.post("/interview/{interview_id}/end", response_model=EndInterviewResponse)
async def end_interview(interview_id: str, request: Request) -> EndInterviewResponse:
    """End the interview and return the feedback report."""
    feedback = await _service(request).end(_parse_interview_id(interview_id))
    return EndInterviewResponse(feedback=feedback)


@router.post("/interview/{interview_id}/feedback", response_model=FeedbackResponse)
async def regenerate_feedback(interview_id: str, request: Request) -> FeedbackResponse:
    """Retry feedback compilation for a completed interview without a report."""
    feedback = await _service(request).regenerate_feedback(
        _parse_interview_id(interview_id)
    )
    return FeedbackResponse(feedback=feedback)


@router.get("/interviews", response_model=list[InterviewSummaryResponse])
async def list_interviews(request: Request) -> list[InterviewSummaryResponse]:
    """Return summaries of every interview for the recruiter view."""
    return [
        InterviewSummaryResponse.from_domain(summary)
        for summary in _service(request).list_interviews()
    ]


@router.get("/interview/{interview_id}", response_model=InterviewDetailResponse)
async def interview_detail(
    interview_id: str, request: Request
) -> InterviewDetailResponse:
    """Return the full interview record."""
    record = _service(request).get_interview(_parse_interview_id(interview_id))
    return InterviewDetailResponse.from_domain(record)


def _parse_interview_id(raw: str) -> UUID:
    """Parse an interview id, treating malformed ids as unknown."""
    try:
        return UUID(raw)
    except ValueError as exc:
        raise NotFoundError("Interview not found.") from exc
