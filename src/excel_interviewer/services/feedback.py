"""Feedback report compilation."""

from collections.abc import Sequence
from dataclasses import dataclass

from excel_interviewer.domain.interviews import TranscriptEntry
from excel_interviewer.services.gateway import ModelGateway
from excel_interviewer.services.prompts import (
    build_feedback_prompt,
    render_transcript,
)


@dataclass
class FeedbackCompiler:
    """Turns a finished transcript into a structured feedback report."""

    gateway: ModelGateway

    async def compile(
        self, candidate_name: str, transcript: Sequence[TranscriptEntry]
    ) -> str:
        """Return the report text exactly as the model produced it."""
        prompt = build_feedback_prompt(candidate_name, render_transcript(transcript))
        return await self.gateway.generate(prompt)
