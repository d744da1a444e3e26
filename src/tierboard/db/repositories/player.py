"""Player repository for data access."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from tierboard.db.models import Player
from tierboard.ranking.validation import PlayerFields

# Ids are signed 64-bit integers on every supported backend
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1


class PlayerRepository:
    """Pure data access for Player entities."""

    # id first, so the remaining keys only matter for rows sharing an id
    LIST_ORDER = (
        Player.id.desc(),
        Player.tier_class.desc(),
        Player.region.asc(),
        Player.rank.asc(),
        Player.mace_tier.asc(),
    )

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, player_id: int) -> Player | None:
        """Get a player by ID, or None if no row can have it."""
        if not MIN_ID <= player_id <= MAX_ID:
            return None
        result = self.session.execute(select(Player).where(Player.id == player_id))
        return result.scalar_one_or_none()

    def list_all(self) -> list[Player]:
        """Get every player in listing order."""
        result = self.session.execute(select(Player).order_by(*self.LIST_ORDER))
        return list(result.scalars().all())

    def create(self, fields: PlayerFields) -> Player:
        """Insert a new player and assign its id."""
        player = Player()
        self._apply(player, fields)
        self.session.add(player)
        self.session.flush()
        return player

    def update(self, player: Player, fields: PlayerFields) -> Player:
        """Replace every editable field of a player."""
        self._apply(player, fields)
        self.session.add(player)
        self.session.flush()
        return player

    def delete(self, player: Player) -> None:
        """Remove a player."""
        self.session.delete(player)
        self.session.flush()

    @staticmethod
    def _apply(player: Player, fields: PlayerFields) -> None:
        player.player_name = fields.player_name
        player.player_title = fields.player_title
        player.points = fields.points
        player.tier_class = fields.tier_class
        player.region = fields.region
        player.mace_tier = fields.mace_tier
