"""ASGI entrypoint for the NutriMate API."""

from nutrimate.api.app import create_app
from nutrimate.containers import build_container

app = create_app(build_container())
