"""
Base exception classes for the Partshop backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps each base class to one HTTP status code.
"""

from typing import Optional, Any


class PartshopError(Exception):
    """
    Base exception for all Partshop errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for logging and debugging."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(PartshopError):
    """Resource not found."""

    pass


class ValidationError(PartshopError):
    """Input validation failed."""

    pass


class ConflictError(PartshopError):
    """Resource already exists in the requested state."""

    pass


class AuthenticationError(PartshopError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(PartshopError):
    """Authorization failed (insufficient permissions)."""

    pass
