"""
Authentication module data models.
"""

from typing import Optional
from pydantic import BaseModel, Field

from shared.config import Settings
from shared.models import Role


class TokenConfig(BaseModel):
    """
    Signing configuration for bearer credentials.

    Built once at startup and handed to AuthService; never mutated.
    """

    secret: str = Field(..., min_length=1)
    algorithm: str = "HS256"
    expire_minutes: int = Field(default=60, ge=1)

    model_config = {"frozen": True}

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenConfig":
        return cls(
            secret=settings.token_secret,
            algorithm=settings.token_algorithm,
            expire_minutes=settings.token_expire_minutes,
        )


class TokenPayload(BaseModel):
    """Decoded credential claims."""

    sub: str = Field(..., description="Subject (user ID)")
    role: Role = Field(..., description="User role")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")


class LoginRequest(BaseModel):
    """Body of POST /login."""

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class TokenCheckRequest(BaseModel):
    """Body of POST /check. A missing token is reported by the route, not by validation."""

    token: Optional[str] = None
