"""Client-side pieces: API wrapper, forms, login gate and text front-end."""

from tierboard.client.api import ApiError, PlayerApiClient
from tierboard.client.forms import LoginForm, PlayerForm, filter_players
from tierboard.client.session import LoginGate, NotAuthenticatedError

__all__ = [
    "ApiError",
    "PlayerApiClient",
    "LoginForm",
    "PlayerForm",
    "filter_players",
    "LoginGate",
    "NotAuthenticatedError",
]
