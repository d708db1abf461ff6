"""Logging configuration helpers."""

import logging

_CONTEXT_FIELDS = ("interview_id", "turn", "model", "timeout", "path", "error")


class ContextFormatter(logging.Formatter):
    """Formatter that appends known ``extra`` fields as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = " ".join(
            f"{name}={getattr(record, name)}"
            for name in _CONTEXT_FIELDS
            if hasattr(record, name)
        )
        if not context:
            return message
        first_line, newline, rest = message.partition("\n")
        return f"{first_line} [{context}]{newline}{rest}"


def configure_logging(level: str = "INFO") -> None:
    """Configure the ``excel_interviewer`` logger once with a stream handler."""
    logger = logging.getLogger("excel_interviewer")
    logger.setLevel(level.upper())
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(ContextFormatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
