"""ASGI entrypoint for the wedding site API."""

from wedding_site.api.app import create_app
from wedding_site.containers import build_container

app = create_app(build_container())
