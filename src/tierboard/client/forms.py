"""Client-side form state and validation.

The player form runs the same rule list as the API so an operator sees
problems before anything is sent; the server still re-checks everything.
"""

import re
from dataclasses import dataclass
from typing import Any

from tierboard.auth import CredentialChecker
from tierboard.ranking.tiers import TierCalculator, TierScore
from tierboard.ranking.validation import FORM_MESSAGES, find_problems

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass
class PlayerForm:
    """Add/edit form for a single player."""

    player_name: str = ""
    tier: str = ""
    macetier: str = ""
    region: str = ""
    editing_id: int | None = None

    @classmethod
    def from_player(cls, player: dict[str, Any]) -> "PlayerForm":
        """Prefill the form from a listed player for editing."""
        return cls(
            player_name=player.get("playerName") or "",
            tier=player.get("tierClass") or "",
            macetier=player.get("maceTier") or "",
            region=player.get("region") or "",
            editing_id=player.get("id"),
        )

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    def validate(self) -> dict[str, str]:
        """Return a message for every broken rule, keyed by field."""
        problems = find_problems(self.player_name, self.tier, self.macetier, self.region)
        return {problem.value: FORM_MESSAGES[problem] for problem in problems}

    def preview(self) -> TierScore:
        """Points and title the current input would earn."""
        return TierCalculator.score(self.tier, self.macetier)

    def to_payload(self) -> dict[str, str]:
        """Build the trimmed request body."""
        return {
            "playerName": self.player_name.strip(),
            "tier": self.tier.strip(),
            "macetier": self.macetier.strip(),
            "region": self.region.strip(),
        }

    def reset(self) -> None:
        """Clear the form after a successful submit."""
        self.player_name = ""
        self.tier = ""
        self.macetier = ""
        self.region = ""
        self.editing_id = None


@dataclass
class LoginForm:
    """Operator login input."""

    email: str = ""
    password: str = ""

    def validate(self, checker: CredentialChecker) -> dict[str, str]:
        """Check the input's shape, then ask the checker.

        The checker is only consulted once both fields are present and the
        email is well formed; a rejection flags both fields.
        """
        errors: dict[str, str] = {}

        if not self.email:
            errors["email"] = "Email is required"
        elif not EMAIL_PATTERN.match(self.email):
            errors["email"] = "Please enter a valid email"

        if not self.password:
            errors["password"] = "Password is required"

        if not errors and not checker.verify(self.email, self.password):
            errors["email"] = "Invalid credentials"
            errors["password"] = "Invalid credentials"

        return errors


def filter_players(players: list[dict[str, Any]], term: str) -> list[dict[str, Any]]:
    """Case-insensitive search over name, region, title and both tiers."""
    if not term:
        return players

    needle = term.lower()
    keys = ("playerName", "region", "playerTitle", "tierClass", "maceTier")
    return [
        player
        for player in players
        if any(needle in (player.get(key) or "").lower() for key in keys)
    ]
