"""Tierboard - admin backend for a combat tier leaderboard."""

__version__ = "0.1.0"
