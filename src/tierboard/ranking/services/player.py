"""Player service for business logic."""

import logging

from sqlalchemy.orm import Session

from tierboard.core.result import ErrorKind, Result
from tierboard.db.repositories import PlayerRepository
from tierboard.ranking.validation import validate_player

logger = logging.getLogger(__name__)


class PlayerService:
    """Business logic for leaderboard player operations.

    Input is validated and scored before the repository is touched, so a
    rejected request never opens a database connection.
    """

    def __init__(self, session: Session):
        self.session = session
        self.player_repo = PlayerRepository(session)

    def create_player(
        self,
        player_name: str | None,
        tier: str | None,
        macetier: str | None,
        region: str | None,
    ) -> Result[dict]:
        """Validate, score and insert a new player."""
        validation = validate_player(player_name, tier, macetier, region)
        if validation.is_err:
            logger.info(f"Rejected new player: {validation.error}")
            return Result.err(validation.error, ErrorKind.VALIDATION)

        player = self.player_repo.create(validation.unwrap())
        logger.info(
            f"[{player.id}] Player created: {player.player_name} "
            f"({player.points} pts, {player.player_title})"
        )
        return Result.ok(player.to_summary())

    def list_players(self) -> Result[list[dict]]:
        """Get all players in listing order."""
        players = self.player_repo.list_all()
        logger.debug(f"Listing {len(players)} players")
        return Result.ok([player.to_dict() for player in players])

    def update_player(
        self,
        player_id: int,
        player_name: str | None,
        tier: str | None,
        macetier: str | None,
        region: str | None,
    ) -> Result[dict]:
        """Replace a player's fields and recompute points and title."""
        validation = validate_player(player_name, tier, macetier, region)
        if validation.is_err:
            logger.info(f"[{player_id}] Rejected update: {validation.error}")
            return Result.err(validation.error, ErrorKind.VALIDATION)

        player = self.player_repo.get_by_id(player_id)
        if player is None:
            logger.warning(f"[{player_id}] Player not found for update")
            return Result.err("Player not found", ErrorKind.NOT_FOUND)

        self.player_repo.update(player, validation.unwrap())
        logger.info(
            f"[{player_id}] Player updated: {player.player_name} "
            f"({player.points} pts, {player.player_title})"
        )
        return Result.ok(player.to_summary())

    def delete_player(self, player_id: int) -> Result[int]:
        """Delete a player by ID."""
        player = self.player_repo.get_by_id(player_id)
        if player is None:
            logger.warning(f"[{player_id}] Player not found for delete")
            return Result.err("Player not found", ErrorKind.NOT_FOUND)

        self.player_repo.delete(player)
        logger.info(f"[{player_id}] Player deleted")
        return Result.ok(player_id)
