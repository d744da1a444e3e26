"""Shared building blocks."""

from tierboard.core.result import ErrorKind, Result

__all__ = ["ErrorKind", "Result"]
