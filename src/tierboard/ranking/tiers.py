"""Tier vocabulary, point table and title ladder."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TierScore:
    """Derived score for a tier/macetier pair."""

    points: int
    title: str

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {"points": self.points, "playerTitle": self.title}


class TierCalculator:
    """Scores combat tiers and macetiers."""

    # Ordered weakest to strongest (L/H = low/high within a numbered tier)
    TIER_POINTS = {
        "LT5": 1,
        "HT5": 2,
        "LT4": 3,
        "HT4": 4,
        "LT3": 6,
        "HT3": 10,
        "LT2": 20,
        "HT2": 30,
        "LT1": 45,
        "HT1": 60,
    }

    VALID_TIERS = tuple(TIER_POINTS)

    # Title ladder, checked top-down. Only the top rung is strictly greater-than.
    MASTER_THRESHOLD = 250
    TITLE_LADDER = (
        (100, "Combat Ace"),
        (50, "Combat Specialist"),
        (20, "Combat Cadet"),
        (10, "Combat Novice"),
    )
    MASTER_TITLE = "Combat Master"
    DEFAULT_TITLE = "Rookie"

    @classmethod
    def is_valid_tier(cls, tier: str) -> bool:
        """Check a tier code against the vocabulary, ignoring case.

        Surrounding whitespace is not stripped, so callers must check for
        blank input themselves before calling this.
        """
        return tier.upper() in cls.VALID_TIERS

    @classmethod
    def tier_points(cls, tier: str | None) -> int:
        """Points for a single slot; blank or unknown codes are worth nothing."""
        if not tier:
            return 0
        return cls.TIER_POINTS.get(tier.upper(), 0)

    @classmethod
    def calculate_points(cls, tier: str | None, macetier: str | None) -> int:
        """Sum the points of both rating slots."""
        return cls.tier_points(tier) + cls.tier_points(macetier)

    @classmethod
    def get_player_title(cls, points: int) -> str:
        """Map a point total to a title."""
        if points > cls.MASTER_THRESHOLD:
            return cls.MASTER_TITLE
        for threshold, title in cls.TITLE_LADDER:
            if points >= threshold:
                return title
        return cls.DEFAULT_TITLE

    @classmethod
    def score(cls, tier: str | None, macetier: str | None) -> TierScore:
        """Calculate points and title for a tier pair."""
        points = cls.calculate_points(tier, macetier)
        return TierScore(points=points, title=cls.get_player_title(points))
