"""Error types raised by the data access layer."""

from __future__ import annotations


class DataAccessError(RuntimeError):
    """A store-level failure surfaced with a static, user-safe message.

    The underlying driver error is chained as ``__cause__`` and logged where
    it is caught; only :attr:`message` is meant for end users.
    """

    def __init__(self, message: str, *, operation: str) -> None:
        super().__init__(message)
        self.message = message
        self.operation = operation


class NotFoundError(DataAccessError):
    """Raised when a single-entity lookup matches no rows."""


__all__ = ["DataAccessError", "NotFoundError"]
