"""Service layer for business logic."""

from tierboard.ranking.services.player import PlayerService

__all__ = [
    "PlayerService",
]
