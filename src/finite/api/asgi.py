"""ASGI entrypoint for the Finite API."""

from finite.api.app import create_app
from finite.containers import build_container

app = create_app(build_container())
