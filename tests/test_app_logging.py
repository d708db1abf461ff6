"""Tests for logging configuration."""

import logging

from excel_interviewer.app_logging import ContextFormatter, configure_logging


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("excel_interviewer")
    logger.handlers.clear()

    configure_logging()
    configure_logging("debug")

    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG


def test_context_formatter_appends_extra_fields() -> None:
    formatter = ContextFormatter("%(levelname)s: %(message)s")
    record = logging.LogRecord(
        name="excel_interviewer.services.interviews",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Answer recorded",
        args=(),
        exc_info=None,
    )
    record.interview_id = "abc"
    record.turn = 2

    assert formatter.format(record) == (
        "INFO: Answer recorded [interview_id=abc turn=2]"
    )


def test_context_formatter_leaves_plain_records_alone() -> None:
    formatter = ContextFormatter("%(message)s")
    record = logging.LogRecord(
        name="excel_interviewer",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Interview started",
        args=(),
        exc_info=None,
    )

    assert formatter.format(record) == "Interview started"
