"""
Users module data models.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from shared.models import CamelModel, Role


def _clean_email(value: str) -> str:
    value = value.strip()
    if "@" not in value:
        raise ValueError("email must contain '@'")
    return value


def _clean_name(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("name must not be empty")
    return value


class UserRecord(BaseModel):
    """
    User row as stored in the database.

    Carries the password hash, so it must never be returned to clients.
    Use to_public() at the API boundary.
    """

    id: int
    email: str
    password_hash: str
    name: str
    role: Role = Role.USER
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_public(self) -> "User":
        return User(
            id=self.id,
            email=self.email,
            name=self.name,
            role=self.role,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class User(CamelModel):
    """User data returned to clients (no password)."""

    id: int
    email: str
    name: str
    role: Role
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserCreate(CamelModel):
    """Registration payload."""

    model_config = ConfigDict(extra="forbid")

    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=100)
    role: Optional[Role] = None

    @field_validator("email")
    @classmethod
    def clean_email(cls, v: str) -> str:
        return _clean_email(v)

    @field_validator("name")
    @classmethod
    def clean_name(cls, v: str) -> str:
        return _clean_name(v)


class UserUpdate(CamelModel):
    """Partial account update. Only provided fields are written."""

    model_config = ConfigDict(extra="forbid")

    email: Optional[str] = Field(None, min_length=3, max_length=255)
    password: Optional[str] = Field(None, min_length=1)
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    role: Optional[Role] = None

    @field_validator("email")
    @classmethod
    def clean_email(cls, v: Optional[str]) -> Optional[str]:
        return _clean_email(v) if v is not None else v

    @field_validator("name")
    @classmethod
    def clean_name(cls, v: Optional[str]) -> Optional[str]:
        return _clean_name(v) if v is not None else v
