"""In-memory login gate for the client views."""

import logging

from tierboard.auth import CredentialChecker
from tierboard.client.forms import LoginForm

logger = logging.getLogger(__name__)

# Views that need a logged-in operator
PROTECTED_VIEWS = frozenset({"form", "players"})


class NotAuthenticatedError(Exception):
    """Raised when a protected view is opened without logging in."""


class LoginGate:
    """Holds the authenticated flag for one client process.

    Nothing is persisted and the API never sees this flag.
    """

    def __init__(self, checker: CredentialChecker):
        self.checker = checker
        self.authenticated = False

    def login(self, email: str, password: str) -> dict[str, str]:
        """Try to log in; returns field errors, empty on success."""
        errors = LoginForm(email=email, password=password).validate(self.checker)
        if errors:
            logger.info("Login rejected")
            return errors
        self.authenticated = True
        logger.info("Operator logged in")
        return {}

    def logout(self) -> None:
        self.authenticated = False

    def require_auth(self, view: str) -> None:
        """Raise unless the view is public or the operator is logged in."""
        if view in PROTECTED_VIEWS and not self.authenticated:
            raise NotAuthenticatedError(f"Log in to open the {view} view")
