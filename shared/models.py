"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Role(str, Enum):
    """Account role carried in the user row and in bearer credentials."""

    USER = "user"
    ADMIN = "admin"


class CamelModel(BaseModel):
    """
    Base for API payloads.

    Fields are snake_case in Python and camelCase on the wire. Both spellings
    are accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    Populated from verified credential claims and made available to route
    handlers via dependency injection.
    """

    id: int = Field(..., description="User ID")
    role: Role = Field(default=Role.USER, description="User role")

    model_config = {"frozen": True}

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


def to_payload(data: Any) -> Any:
    """Convert models (or lists of models) to JSON-ready camelCase data."""
    if data is None:
        return {}
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json", by_alias=True)
    if isinstance(data, list):
        return [to_payload(item) for item in data]
    return data


class ApiResponse(BaseModel):
    """
    Response envelope shared by every endpoint.

    Failures carry a human-readable message and, for validation and
    authentication failures, an empty data object.
    """

    success: bool
    message: str
    data: Any = Field(default_factory=dict)

    @classmethod
    def ok(cls, message: str, data: Any = None) -> "ApiResponse":
        return cls(success=True, message=message, data=to_payload(data))

    @classmethod
    def fail(cls, message: str, data: Any = None) -> "ApiResponse":
        return cls(success=False, message=message, data=to_payload(data))
