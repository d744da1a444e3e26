"""SQLAlchemy models for the tier leaderboard."""

from sqlalchemy import String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class Player(Base):
    """A leaderboard entry with its denormalized score.

    Column names keep the camelCase of the existing `players` table so the
    model can sit on top of a database created by earlier deployments.
    """

    __tablename__ = "players"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    player_name: Mapped[str] = mapped_column("playerName", String(100))
    player_title: Mapped[str] = mapped_column("playerTitle", String(50))
    points: Mapped[int] = mapped_column(default=0)
    tier_class: Mapped[str | None] = mapped_column("tierClass", String(3), nullable=True)
    region: Mapped[str] = mapped_column(String(100))
    mace_tier: Mapped[str | None] = mapped_column("maceTier", String(3), nullable=True)

    # Listed in the sort order but never written by this application
    rank: Mapped[str | None] = mapped_column(String(50), nullable=True)

    def to_summary(self) -> dict:
        """Convert to the shape echoed back by create and update."""
        return {
            "id": self.id,
            "playerName": self.player_name,
            "playerTitle": self.player_title,
            "points": self.points,
            "tierClass": self.tier_class,
            "maceTier": self.mace_tier,
            "region": self.region,
        }

    def to_dict(self) -> dict:
        """Convert the full row to a dictionary for API responses."""
        return {
            "id": self.id,
            "playerName": self.player_name,
            "playerTitle": self.player_title,
            "rank": self.rank,
            "points": self.points,
            "tierClass": self.tier_class,
            "maceTier": self.mace_tier,
            "region": self.region,
        }
