"""Player input rules shared by the API and the client form.

Both call sites run the same ordered rule list from find_problems(); they
differ only in how the problems are worded and how many are reported.
"""

from dataclasses import dataclass
from enum import Enum

from tierboard.core.result import ErrorKind, Result
from tierboard.ranking.tiers import TierCalculator


class PlayerField(str, Enum):
    """Rules checked on player input, in evaluation order."""

    PLAYER_NAME = "playerName"
    REGION = "region"
    TIER_REQUIRED = "tierRequired"
    TIER = "tier"
    MACETIER = "macetier"


_TIER_HINT = ", ".join(TierCalculator.VALID_TIERS)

SERVER_MESSAGES: dict[PlayerField, str] = {
    PlayerField.PLAYER_NAME: "Player name is required",
    PlayerField.REGION: "Region is required",
    PlayerField.TIER_REQUIRED: "At least one tier is required",
    PlayerField.TIER: "Invalid tier format",
    PlayerField.MACETIER: "Invalid macetier format",
}

FORM_MESSAGES: dict[PlayerField, str] = {
    PlayerField.PLAYER_NAME: "Player name is required",
    PlayerField.REGION: "Region is required",
    PlayerField.TIER_REQUIRED: "At least one tier (Tier or Macetier) is required",
    PlayerField.TIER: f"Invalid tier. Use: {_TIER_HINT}",
    PlayerField.MACETIER: f"Invalid macetier. Use: {_TIER_HINT}",
}


@dataclass(frozen=True)
class PlayerFields:
    """Normalized, scored player values ready to be stored."""

    player_name: str
    region: str
    tier_class: str | None
    mace_tier: str | None
    points: int
    player_title: str


def is_blank(value: str | None) -> bool:
    """Check for a missing or whitespace-only value."""
    return value is None or not value.strip()


def normalize_tier(value: str | None) -> str | None:
    """Trim and upper-case a tier code, mapping blank to None."""
    if is_blank(value):
        return None
    return value.strip().upper()


def find_problems(
    player_name: str | None,
    tier: str | None,
    macetier: str | None,
    region: str | None,
) -> list[PlayerField]:
    """Return every rule the input breaks, in evaluation order."""
    problems: list[PlayerField] = []

    if is_blank(player_name):
        problems.append(PlayerField.PLAYER_NAME)
    if is_blank(region):
        problems.append(PlayerField.REGION)
    if is_blank(tier) and is_blank(macetier):
        problems.append(PlayerField.TIER_REQUIRED)
    if not is_blank(tier) and not TierCalculator.is_valid_tier(tier):
        problems.append(PlayerField.TIER)
    if not is_blank(macetier) and not TierCalculator.is_valid_tier(macetier):
        problems.append(PlayerField.MACETIER)

    return problems


def validate_player(
    player_name: str | None,
    tier: str | None,
    macetier: str | None,
    region: str | None,
) -> Result[PlayerFields]:
    """Validate player input and compute its derived fields.

    Only the first broken rule is reported, matching the API contract.
    """
    problems = find_problems(player_name, tier, macetier, region)
    if problems:
        return Result.err(SERVER_MESSAGES[problems[0]], ErrorKind.VALIDATION)

    score = TierCalculator.score(tier, macetier)
    return Result.ok(
        PlayerFields(
            player_name=player_name.strip(),
            region=region.strip(),
            tier_class=normalize_tier(tier),
            mace_tier=normalize_tier(macetier),
            points=score.points,
            player_title=score.title,
        )
    )
