"""ASGI entrypoint for the interviewer API."""

from excel_interviewer.api.app import create_app
from excel_interviewer.containers import build_container

app = create_app(build_container())
