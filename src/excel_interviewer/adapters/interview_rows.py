"""Row mapping shared by the interview store adapters."""

from datetime import datetime
from uuid import UUID

from excel_interviewer.domain.interviews import (
    HistoryEntry,
    HistoryRole,
    InterviewRecord,
    InterviewStatus,
    InterviewSummary,
    Speaker,
    TranscriptEntry,
)


def record_to_row(record: InterviewRecord) -> dict[str, object]:
    """Serialize an interview into its stored JSON-compatible row."""
    return {
        "id": str(record.id),
        "candidate_name": record.candidate_name,
        "status": record.status.value,
        "start_time": record.start_time.isoformat(),
        "end_time": record.end_time.isoformat() if record.end_time else None,
        "transcript": [
            {"role": entry.role.value, "text": entry.text}
            for entry in record.transcript
        ],
        "model_history": [
            {"role": entry.role.value, "text": entry.text}
            for entry in record.model_history
        ],
        "feedback": record.feedback,
    }


def row_to_record(row: dict[str, object]) -> InterviewRecord:
    """Build an interview from a stored row."""
    transcript = row.get("transcript") or []
    history = row.get("model_history") or []
    return InterviewRecord(
        id=UUID(str(row["id"])),
        candidate_name=str(row["candidate_name"]),
        status=InterviewStatus(row["status"]),
        start_time=_parse_datetime(row["start_time"]),
        end_time=_parse_datetime(row["end_time"]) if row.get("end_time") else None,
        transcript=tuple(
            TranscriptEntry(role=Speaker(item["role"]), text=item["text"])
            for item in transcript
        ),
        model_history=tuple(
            HistoryEntry(role=HistoryRole(item["role"]), text=item["text"])
            for item in history
        ),
        feedback=row.get("feedback"),
    )


def row_to_summary(row: dict[str, object]) -> InterviewSummary:
    """Build a listing summary from a stored row."""
    return InterviewSummary(
        id=UUID(str(row["id"])),
        candidate_name=str(row["candidate_name"]),
        start_time=_parse_datetime(row["start_time"]),
        status=InterviewStatus(row["status"]),
    )


def _parse_datetime(value: object) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))
