"""
Users module.

Handles registration and account management.

Public API:
- IUserService: Interface for user operations
- User, UserCreate, UserUpdate: Public models
- User exceptions: UserNotFoundError, UserAlreadyExistsError
"""

from .interfaces import IUserService
from .models import User, UserCreate, UserUpdate, UserRecord
from .exceptions import UserNotFoundError, UserAlreadyExistsError

__all__ = [
    # Interface
    "IUserService",
    # Models
    "User",
    "UserCreate",
    "UserUpdate",
    "UserRecord",
    # Exceptions
    "UserNotFoundError",
    "UserAlreadyExistsError",
]
