"""Credential checks for the operator login gate.

The gate lives entirely in the client; the player API itself is open.
"""

import logging
from pathlib import Path
from typing import Protocol

from pydantic import BaseModel

from tierboard.config import Settings

logger = logging.getLogger(__name__)


class CredentialChecker(Protocol):
    """Anything that can decide whether a login attempt is allowed."""

    def verify(self, identifier: str, secret: str) -> bool: ...


class Credential(BaseModel):
    """Shape of the JSON credentials file."""

    email: str
    password: str


class StaticCredentialChecker:
    """Compares login input verbatim against a single configured pair."""

    def __init__(self, email: str, password: str):
        self.email = email
        self.password = password

    @classmethod
    def from_file(cls, path: str | Path) -> "StaticCredentialChecker":
        """Load the pair from a JSON file with email and password keys."""
        credential = Credential.model_validate_json(Path(path).read_text(encoding="utf-8"))
        return cls(credential.email, credential.password)

    def verify(self, identifier: str, secret: str) -> bool:
        # An unconfigured pair must not let an empty login through
        if not self.email or not self.password:
            return False
        return identifier == self.email and secret == self.password


def load_credential_checker(settings: Settings) -> StaticCredentialChecker:
    """Build the checker once at startup, preferring the credentials file."""
    if settings.has_credentials_file:
        logger.info(f"Loading login credentials from {settings.credentials_file}")
        return StaticCredentialChecker.from_file(settings.credentials_file)

    if not settings.admin_email or not settings.admin_password:
        logger.warning("No login credentials configured - every login will be rejected")
    return StaticCredentialChecker(settings.admin_email, settings.admin_password)
