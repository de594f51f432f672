"""
Authentication module exceptions.

These exceptions are raised by the auth module and caught by the API
error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import PartshopError, AuthenticationError, AuthorizationError


class InvalidTokenError(AuthenticationError):
    """Raised when a bearer token is invalid or malformed."""

    def __init__(self, message: str = "Token not valid"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a bearer token has expired."""

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no bearer token is provided."""

    def __init__(self, message: str = "Token not found"):
        super().__init__(message, code="MISSING_TOKEN")


class InvalidCredentialsError(PartshopError):
    """
    Login rejected.

    Both subclasses map to the same status code so the response status does
    not reveal whether an email is registered.
    """

    pass


class UnknownEmailError(InvalidCredentialsError):
    """Raised when no user is registered with the given email."""

    def __init__(self):
        super().__init__("User not found", code="USER_NOT_FOUND")


class WrongPasswordError(InvalidCredentialsError):
    """Raised when the password does not match the stored hash."""

    def __init__(self):
        super().__init__("Not the same password", code="INVALID_PASSWORD")


class AccessDeniedError(AuthorizationError):
    """Raised when an authenticated user is not allowed to perform an action."""

    def __init__(self, message: str, action: str, user_id: int):
        super().__init__(
            message,
            code="ACCESS_DENIED",
            details={"action": action, "user_id": user_id},
        )
