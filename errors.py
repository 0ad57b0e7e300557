"""Error types raised by Pennywise services.

Every error carries a human-readable message. Callers distinguish the kind
by class, never by parsing the message.
"""

from typing import Optional


class PennywiseError(Exception):
    """Base class for all application errors."""


class ValidationError(PennywiseError):
    """A payload failed schema validation before reaching the store.

    Attributes:
        field: Name of the offending field, or None for whole-payload errors.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class NotFound(PennywiseError):
    """The referenced record does not exist."""


class NotAuthorized(PennywiseError):
    """The record belongs to a different user."""


class Conflict(PennywiseError):
    """A uniqueness rule would be violated (duplicate name or budget)."""


class NotAuthenticated(PennywiseError):
    """No verified user id was supplied with the request."""


class StoreUnavailable(PennywiseError):
    """The database could not be opened or queried."""
