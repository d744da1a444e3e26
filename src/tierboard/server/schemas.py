"""HTTP request and response schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PlayerPayload(BaseModel):
    """Body of create and update requests.

    Every field is optional at the schema level; missing and blank values
    are reported by the validation rules with field-specific messages.
    """

    model_config = ConfigDict(populate_by_name=True)

    player_name: str | None = Field(default=None, alias="playerName", description="Player name")
    tier: str | None = Field(default=None, description="Combat tier code, may be empty")
    macetier: str | None = Field(default=None, description="Macetier code, may be empty")
    region: str | None = Field(default=None, description="Player region")


class PlayerSummary(BaseModel):
    """Player as echoed back by create and update."""

    id: int
    playerName: str
    playerTitle: str
    points: int
    tierClass: str | None
    maceTier: str | None
    region: str


class PlayerRow(PlayerSummary):
    """Player as returned by the listing (the full stored row)."""

    rank: str | None = None


class PlayerSaved(BaseModel):
    """Response to a successful create or update."""

    message: str
    player: PlayerSummary


class MessageResponse(BaseModel):
    """Response carrying only a message."""

    message: str


class ErrorResponse(BaseModel):
    """Response for any failed request."""

    error: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: str


# Helper functions to build common response bodies

def player_saved_body(message: str, player: dict[str, Any]) -> dict[str, Any]:
    """Create the body for a saved player."""
    return {"message": message, "player": player}


def message_body(message: str) -> dict[str, Any]:
    """Create a message-only body."""
    return {"message": message}


def error_body(error: str) -> dict[str, Any]:
    """Create an error body."""
    return {"error": error}
