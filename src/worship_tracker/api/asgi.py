"""ASGI entrypoint for the worship tracker API."""

from worship_tracker.api.app import create_app
from worship_tracker.config import Settings
from worship_tracker.containers import build_container

settings = Settings()
app = create_app(build_container(settings))
