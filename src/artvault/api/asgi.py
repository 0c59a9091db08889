"""Module-level app for ``uvicorn artvault.api.asgi:app``."""

from artvault.api.app import create_app
from artvault.config import Settings
from artvault.containers import build_container

settings = Settings()
app = create_app(build_container(settings))
