"""Database module for leaderboard persistence."""

from tierboard.db.models import Base, Player
from tierboard.db.session import (
    build_engine,
    build_session_factory,
    create_tables,
    session_scope,
)

__all__ = [
    "Base",
    "Player",
    "build_engine",
    "build_session_factory",
    "create_tables",
    "session_scope",
]
