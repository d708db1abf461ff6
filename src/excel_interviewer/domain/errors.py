"""Error taxonomy surfaced by the interview core."""


class InterviewError(Exception):
    """Base class for errors reported to API callers."""


class ValidationError(InterviewError):
    """Required input is missing or blank."""


class NotFoundError(InterviewError):
    """No interview exists for the given id."""


class InvalidStateError(InterviewError):
    """Operation is not allowed in the interview's current status."""


class ModelUnavailableError(InterviewError):
    """The language model call failed or timed out."""
