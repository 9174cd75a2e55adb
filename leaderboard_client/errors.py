"""
Errors raised by the storage adapters and the controller.
"""

from __future__ import annotations


class LeaderboardError(Exception):
    """Base class for errors surfaced to the user as notifications."""


class ValidationError(LeaderboardError):
    """Rejected input: empty or duplicate name, or a negative resulting score."""


class TransportError(LeaderboardError):
    """The remote backend failed to answer or answered with a non-success status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(TransportError):
    """The remote backend does not know the requested participant."""


class StorageError(LeaderboardError):
    """The local key-value store could not be written."""
