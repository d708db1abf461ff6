"""Supabase-backed interview repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from excel_interviewer.adapters.interview_rows import (
    record_to_row,
    row_to_record,
    row_to_summary,
)
from excel_interviewer.domain.interviews import InterviewRecord, InterviewSummary
from excel_interviewer.services.interviews import InterviewRepository

_TABLE = "interviews"
_COLUMNS = (
    "id, candidate_name, status, start_time, end_time, transcript, "
    "model_history, feedback"
)


@dataclass
class SupabaseInterviewRepository(InterviewRepository):
    """Supabase implementation for interviews."""

    client: Client

    def create_interview(self, record: InterviewRecord) -> None:
        """Insert an interview row."""
        response = self.client.table(_TABLE).insert(record_to_row(record)).execute()
        if not response.data:
            raise RuntimeError("Failed to create interview")

    def get_interview(self, interview_id: UUID) -> InterviewRecord | None:
        """Return an interview by id, if present."""
        response = (
            self.client.table(_TABLE)
            .select(_COLUMNS)
            .eq("id", str(interview_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return row_to_record(response.data[0])

    def update_interview(self, record: InterviewRecord) -> None:
        """Overwrite the mutable columns of an interview row."""
        row = record_to_row(record)
        row.pop("id")
        self.client.table(_TABLE).update(row).eq("id", str(record.id)).execute()

    def list_interviews(self) -> list[InterviewSummary]:
        """Return interview summaries, newest first."""
        response = (
            self.client.table(_TABLE)
            .select("id, candidate_name, start_time, status")
            .order("start_time", desc=True)
            .execute()
        )
        return [row_to_summary(row) for row in response.data or []]
