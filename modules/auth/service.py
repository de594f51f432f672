"""
Authentication service implementation.

Issues HS256 bearer credentials on login and validates them on every
protected request. No session state is kept server-side.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from shared.models import AuthenticatedUser
from modules.users.models import UserRecord
from modules.users.repository import UserRepository

from .interfaces import IAuthService
from .models import TokenConfig, TokenPayload
from .passwords import dummy_verify, verify_password
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    UnknownEmailError,
    WrongPasswordError,
)

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Args:
        config: Immutable signing configuration
        users: Repository used to look up accounts on login
    """

    def __init__(self, config: TokenConfig, users: UserRepository):
        self._config = config
        self._users = users

    async def login(self, email: str, password: str) -> str:
        """Check the password against the stored bcrypt hash and issue a token."""
        user = self._users.get_by_email(email.strip())
        if user is None:
            # Keep response time comparable to the wrong-password path.
            dummy_verify()
            logger.warning("Login rejected: unknown email")
            raise UnknownEmailError()

        if not verify_password(password, user.password_hash):
            logger.warning(f"Login rejected: wrong password for user {user.id}")
            raise WrongPasswordError()

        logger.info(f"User {user.id} logged in")
        return self.issue_token(user)

    def issue_token(self, user: UserRecord) -> str:
        """Sign {sub, role, iat, exp} with the configured secret."""
        now = datetime.now(timezone.utc)
        expire = now + timedelta(minutes=self._config.expire_minutes)

        payload = {
            "sub": str(user.id),
            "role": user.role.value,
            "iat": int(now.timestamp()),
            "exp": int(expire.timestamp()),
        }
        return jwt.encode(payload, self._config.secret, algorithm=self._config.algorithm)

    async def validate_token(self, token: Optional[str]) -> AuthenticatedUser:
        """
        Verify signature and expiry and extract identity.

        Expiry is checked by PyJWT before any claim is trusted, so an expired
        token is rejected even when its signature is valid.
        """
        if not token:
            raise MissingTokenError()

        try:
            claims = jwt.decode(
                token,
                self._config.secret,
                algorithms=[self._config.algorithm],
                options={"require": ["sub", "exp", "iat"]},
            )
            payload = TokenPayload(**claims)
            user_id = int(payload.sub)

        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            logger.debug(f"Rejected token: {e}")
            raise InvalidTokenError()
        except (PydanticValidationError, ValueError):
            raise InvalidTokenError()

        return AuthenticatedUser(id=user_id, role=payload.role)
