"""Prompt templates for each interview phase."""

from collections.abc import Sequence

from excel_interviewer.domain.interviews import Speaker, TranscriptEntry

MIN_QUESTIONS = 5
MAX_QUESTIONS = 6


def build_opening_prompt(candidate_name: str) -> str:
    """Prompt that sets up the interviewer persona and asks the first question."""
    return (
        "You are an AI Excel interviewer. Your task is to assess a candidate's "
        "Excel skills through a conversation. Start by greeting the candidate "
        "by name and asking your first conceptual or practical Excel question. "
        "Focus on one question at a time. Keep your questions clear and "
        "concise. Do not provide answers. Vary your questions so that no two "
        "interviews follow the same script. "
        f"End the interview after {MIN_QUESTIONS}-{MAX_QUESTIONS} questions by "
        "thanking the candidate properly. "
        f"The candidate's name is {candidate_name}."
    )


def build_follow_up_prompt(answer: str) -> str:
    """Prompt that evaluates the last answer and asks the next question."""
    return (
        f'The candidate\'s previous answer was: "{answer}". '
        "Based on this, evaluate their understanding without telling them the "
        "verdict, then ask the *next* Excel-related question. If their answer "
        "was insufficient, you can ask a follow-up or a clarifying question "
        "instead. Keep the interview moving towards assessing various Excel "
        "skills (formulas, functions, data manipulation, pivot tables, "
        "VLOOKUP and other lookups, etc.). Do not provide the answer."
    )


def render_transcript(transcript: Sequence[TranscriptEntry]) -> str:
    """Render the transcript as a speaker-labelled script."""
    return "\n\n".join(
        f"{_speaker_label(entry.role)}: {entry.text}" for entry in transcript
    )


def build_feedback_prompt(candidate_name: str, script: str) -> str:
    """Prompt that turns a rendered transcript into a feedback report."""
    return (
        f"The following is an Excel interview transcript with {candidate_name}:"
        f"\n\n{script}\n\n"
        "Please analyze this transcript thoroughly and provide detailed "
        "feedback on the candidate's Excel skills. Cover strengths, "
        "weaknesses, specific areas for improvement, and an overall "
        "assessment. Structure the feedback clearly with Markdown headings. "
        "Provide constructive advice."
    )


def _speaker_label(role: Speaker) -> str:
    if role == Speaker.AI:
        return "Interviewer"
    return "Candidate"
