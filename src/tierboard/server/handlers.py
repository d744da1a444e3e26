"""Player request handlers - testable without an HTTP client."""

import logging
import re
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from tierboard.context import AppContext
from tierboard.core.result import Result
from tierboard.ranking.services import PlayerService
from tierboard.server.schemas import (
    PlayerPayload,
    error_body,
    message_body,
    player_saved_body,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal server error"
INVALID_PLAYER_ID = "Invalid player ID"

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


@dataclass
class ApiResponse:
    """Status code and JSON body for a handled request."""

    status_code: int
    body: Any = field(default_factory=dict)


def parse_player_id(raw: str) -> int | None:
    """Parse a path id the way JavaScript's parseInt does.

    Leading whitespace and a sign are allowed and trailing garbage is
    ignored ("12abc" is 12). Returns None when there are no leading digits.
    """
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    return int(match.group(1))


def error_response(result: Result) -> ApiResponse:
    """Map a failed result to its status code and error body."""
    return ApiResponse(result.kind.status_code, error_body(result.error))


def internal_error() -> ApiResponse:
    return ApiResponse(500, error_body(INTERNAL_ERROR))


class PlayerHandler:
    """Handles player API requests - testable without HTTP mocking."""

    def __init__(self, ctx: AppContext):
        self.ctx = ctx

    def handle_create(self, payload: PlayerPayload) -> ApiResponse:
        """Handle a new player submission."""
        try:
            with self.ctx.session() as session:
                result = PlayerService(session).create_player(
                    payload.player_name, payload.tier, payload.macetier, payload.region
                )
        except SQLAlchemyError:
            logger.exception("Error adding player")
            return internal_error()

        if result.is_err:
            return error_response(result)
        return ApiResponse(201, player_saved_body("Player added successfully", result.unwrap()))

    def handle_list(self) -> ApiResponse:
        """Handle a request for every player."""
        try:
            with self.ctx.session() as session:
                result = PlayerService(session).list_players()
        except SQLAlchemyError:
            logger.exception("Error fetching players")
            return internal_error()

        return ApiResponse(200, result.unwrap())

    def handle_update(self, raw_id: str, payload: PlayerPayload) -> ApiResponse:
        """Handle a full replacement of an existing player."""
        player_id = parse_player_id(raw_id)
        if player_id is None:
            return ApiResponse(400, error_body(INVALID_PLAYER_ID))

        try:
            with self.ctx.session() as session:
                result = PlayerService(session).update_player(
                    player_id,
                    payload.player_name,
                    payload.tier,
                    payload.macetier,
                    payload.region,
                )
        except SQLAlchemyError:
            logger.exception(f"[{player_id}] Error updating player")
            return internal_error()

        if result.is_err:
            return error_response(result)
        return ApiResponse(200, player_saved_body("Player updated successfully", result.unwrap()))

    def handle_delete(self, raw_id: str) -> ApiResponse:
        """Handle removal of a player."""
        player_id = parse_player_id(raw_id)
        if player_id is None:
            return ApiResponse(400, error_body(INVALID_PLAYER_ID))

        try:
            with self.ctx.session() as session:
                result = PlayerService(session).delete_player(player_id)
        except SQLAlchemyError:
            logger.exception(f"[{player_id}] Error deleting player")
            return internal_error()

        if result.is_err:
            return error_response(result)
        return ApiResponse(200, message_body("Player deleted successfully"))
