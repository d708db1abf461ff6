"""JSON file interview repository for local development."""

import json
import threading
from dataclasses import dataclass, field
from pathlib import Path
from uuid import UUID

from excel_interviewer.adapters.interview_rows import (
    record_to_row,
    row_to_record,
    row_to_summary,
)
from excel_interviewer.domain.interviews import InterviewRecord, InterviewSummary
from excel_interviewer.services.interviews import InterviewRepository


@dataclass
class JsonFileInterviewRepository(InterviewRepository):
    """Stores every interview in a single ``{"interviews": [...]}`` document."""

    path: Path
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False)

    def create_interview(self, record: InterviewRecord) -> None:
        """Append an interview to the document."""
        with self._lock:
            rows = self._read()
            if any(row["id"] == str(record.id) for row in rows):
                raise RuntimeError(f"Interview {record.id} already exists")
            rows.append(record_to_row(record))
            self._write(rows)

    def get_interview(self, interview_id: UUID) -> InterviewRecord | None:
        """Return an interview by id, if present."""
        with self._lock:
            rows = self._read()
        for row in rows:
            if row["id"] == str(interview_id):
                return row_to_record(row)
        return None

    def update_interview(self, record: InterviewRecord) -> None:
        """Replace the stored row for ``record.id``."""
        with self._lock:
            rows = self._read()
            for index, row in enumerate(rows):
                if row["id"] == str(record.id):
                    rows[index] = record_to_row(record)
                    break
            else:
                raise RuntimeError(f"Interview {record.id} does not exist")
            self._write(rows)

    def list_interviews(self) -> list[InterviewSummary]:
        """Return interview summaries, newest first."""
        with self._lock:
            rows = self._read()
        summaries = [row_to_summary(row) for row in rows]
        return sorted(summaries, key=lambda summary: summary.start_time, reverse=True)

    def _read(self) -> list[dict[str, object]]:
        if not self.path.exists():
            return []
        data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        return list(data.get("interviews", []))

    def _write(self, rows: list[dict[str, object]]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(
            json.dumps({"interviews": rows}, indent=2), encoding="utf-8"
        )
        tmp_path.replace(self.path)
