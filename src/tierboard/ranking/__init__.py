"""Scoring and validation rules for the tier leaderboard."""

from tierboard.ranking.tiers import TierCalculator, TierScore
from tierboard.ranking.validation import (
    PlayerField,
    PlayerFields,
    find_problems,
    validate_player,
)

__all__ = [
    "TierCalculator",
    "TierScore",
    "PlayerField",
    "PlayerFields",
    "find_problems",
    "validate_player",
]
