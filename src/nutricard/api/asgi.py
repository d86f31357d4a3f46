"""ASGI entrypoint for the nutricard API."""

from nutricard.api.app import create_app
from nutricard.containers import build_container

app = create_app(build_container())
