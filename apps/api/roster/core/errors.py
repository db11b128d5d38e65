from __future__ import annotations

"""Domain errors raised by the roster service and rendered by the app."""


class RosterError(Exception):
    """Base error carrying the HTTP status and client-facing message."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(RosterError):
    """A required field is missing or a value is out of range."""

    status_code = 400


class AuthError(RosterError):
    """Credentials did not match a registered user."""

    status_code = 401


class NotFoundError(RosterError):
    status_code = 404


class ConflictError(RosterError):
    """A username or class name is already taken."""

    status_code = 409


class PersistenceError(RosterError):
    """The store could not be read or written (strict persistence only)."""

    status_code = 500
