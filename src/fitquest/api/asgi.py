"""ASGI entrypoint for the FitQuest API."""

from fitquest.api.app import create_app
from fitquest.containers import build_container

app = create_app(build_container())
