"""HTTP client for the player API."""

import logging
from typing import Any

import httpx

from tierboard.config import get_settings

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class ApiError(Exception):
    """Raised when the player API rejects a request or cannot be reached."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class PlayerApiClient:
    """Thin wrapper over the player API.

    Accepts any httpx.Client, so tests can hand in FastAPI's TestClient.
    """

    def __init__(self, base_url: str | None = None, http: httpx.Client | None = None):
        if http is None:
            base_url = base_url or get_settings().api_base_url
            http = httpx.Client(base_url=base_url, timeout=DEFAULT_TIMEOUT)
        self.http = http

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "PlayerApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def insert_player(self, payload: dict[str, str]) -> dict[str, Any]:
        """Add a player and return the API's response body."""
        return self._request("POST", "/api/players", "Failed to add player", json=payload)

    def update_player(self, player_id: int, payload: dict[str, str]) -> dict[str, Any]:
        """Replace a player and return the API's response body."""
        return self._request(
            "PUT", f"/api/players/{player_id}", "Failed to update player", json=payload
        )

    def list_players(self) -> list[dict[str, Any]]:
        """Fetch every player.

        Older deployments wrapped the list in {"players": [...]}; both
        shapes are accepted.
        """
        data = self._request("GET", "/api/players", "Failed to fetch players")
        if isinstance(data, list):
            return data
        return data.get("players", [])

    def delete_player(self, player_id: int) -> dict[str, Any]:
        """Delete a player."""
        return self._request("DELETE", f"/api/players/{player_id}", "Failed to delete player")

    def health(self) -> dict[str, Any]:
        """Check that the server is up."""
        return self._request("GET", "/api/health", "Health check failed")

    def _request(self, method: str, url: str, failure: str, **kwargs) -> Any:
        try:
            response = self.http.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{method} {url} failed: {e}")
            raise ApiError(failure) from e

        if response.is_success:
            return response.json()

        try:
            body = response.json()
        except ValueError:
            body = None
        message = (body.get("error") if isinstance(body, dict) else None) or failure
        logger.warning(f"{method} {url} -> {response.status_code}: {message}")
        raise ApiError(message, response.status_code)
