"""Server module - FastAPI player API."""

from tierboard.server.app import app, create_app
from tierboard.server.handlers import PlayerHandler

__all__ = ["app", "create_app", "PlayerHandler"]
