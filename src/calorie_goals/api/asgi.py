"""ASGI entrypoint for the calorie goal API."""

from calorie_goals.api.app import create_app
from calorie_goals.containers import build_container

app = create_app(build_container())
