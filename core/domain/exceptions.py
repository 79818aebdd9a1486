"""Domain-level exceptions.

Every failure the core can report is a subclass of DomainError so the API
layer can translate them uniformly into ``{"success": false, "message": ...}``
responses.
"""


class DomainError(Exception):
    """Base class for all domain errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DomainError, ValueError):
    """Client input was rejected before touching storage."""


class NotFoundError(DomainError):
    """A referenced product, order or order item does not exist."""


class PersistenceError(DomainError):
    """The backing store failed to read or write."""


class GatewayError(DomainError):
    """The external payment gateway rejected the request or could not be reached."""
