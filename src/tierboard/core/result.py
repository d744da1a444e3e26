"""Result type for consistent error handling."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Category of a failed result, mapped to an HTTP status by the server."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]


_STATUS_CODES = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
}


@dataclass(frozen=True)
class Result(Generic[T]):
    """A Result type for consistent error handling.

    Use Result.ok(value) for success, Result.err(message, kind) for errors.

    Example:
        def update_player(player_id: int, ...) -> Result[dict]:
            player = repo.get_by_id(player_id)
            if player is None:
                return Result.err("Player not found", ErrorKind.NOT_FOUND)
            return Result.ok(player.to_dict())

        result = service.update_player(7, ...)
        if result.is_err:
            return error_response(result)
        player = result.unwrap()
    """

    _value: T | None = None
    _error: str | None = None
    _kind: ErrorKind | None = None

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        """Create a successful result with a value."""
        return cls(_value=value)

    @classmethod
    def err(cls, error: str, kind: ErrorKind = ErrorKind.VALIDATION) -> "Result[T]":
        """Create an error result with a message and category."""
        return cls(_error=error, _kind=kind)

    @property
    def is_ok(self) -> bool:
        """Check if this result is successful."""
        return self._error is None

    @property
    def is_err(self) -> bool:
        """Check if this result is an error."""
        return self._error is not None

    @property
    def error(self) -> str | None:
        """Get the error message, or None if successful."""
        return self._error

    @property
    def kind(self) -> ErrorKind | None:
        """Get the error category, or None if successful."""
        return self._kind

    def unwrap(self) -> T:
        """Get the value, or raise ValueError if this is an error.

        Raises:
            ValueError: If this result is an error.
        """
        if self._error is not None:
            raise ValueError(self._error)
        return self._value  # type: ignore
