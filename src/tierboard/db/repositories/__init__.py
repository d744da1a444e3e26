"""Repository layer for data access."""

from tierboard.db.repositories.player import PlayerRepository

__all__ = [
    "PlayerRepository",
]
