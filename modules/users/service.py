"""
Users service implementation.

Registration, lookup and account management. Authorization decisions are
delegated to AccessPolicy.
"""

import logging
from typing import Any

from modules.auth.passwords import hash_password
from modules.auth.policies import AccessPolicy
from shared.models import AuthenticatedUser, Role

from .interfaces import IUserService
from .models import User, UserCreate, UserUpdate
from .repository import UserRepository
from .exceptions import UserAlreadyExistsError, UserNotFoundError

logger = logging.getLogger(__name__)


class UserService(IUserService):
    """
    User service backed by UserRepository.

    Implements IUserService protocol.
    """

    def __init__(
        self,
        repository: UserRepository,
        policy: AccessPolicy,
        allow_role_on_registration: bool = False,
    ):
        self._repo = repository
        self._policy = policy
        self._allow_role_on_registration = allow_role_on_registration

    async def register(self, request: UserCreate) -> User:
        """Create a user; the email constraint is the final arbiter of duplicates."""
        if self._repo.get_by_email(request.email) is not None:
            raise UserAlreadyExistsError(request.email)

        role = Role.USER
        if request.role is not None and self._allow_role_on_registration:
            role = request.role

        record = self._repo.create({
            "email": request.email,
            "password_hash": hash_password(request.password),
            "name": request.name,
            "role": role.value,
        })
        logger.info(f"Registered user {record.id} with role {record.role.value}")
        return record.to_public()

    async def list_users(self) -> list[User]:
        return [record.to_public() for record in self._repo.list_all()]

    async def get_user(self, user_id: int) -> User:
        record = self._repo.get_by_id(user_id)
        if record is None:
            raise UserNotFoundError(user_id)
        return record.to_public()

    async def update_user(
        self,
        actor: AuthenticatedUser,
        user_id: int,
        request: UserUpdate,
    ) -> User:
        """Apply a partial update after the self-or-admin check."""
        existing = self._repo.get_by_id(user_id)
        if existing is None:
            raise UserNotFoundError(user_id)

        self._policy.ensure_can_update_user(actor, user_id)

        changes = request.model_dump(exclude_unset=True)
        data: dict[str, Any] = {}

        if changes.get("role") is not None and changes["role"] != existing.role:
            self._policy.ensure_can_change_role(actor)
            data["role"] = Role(changes["role"]).value

        if changes.get("email") is not None and changes["email"] != existing.email:
            if self._repo.get_by_email(changes["email"]) is not None:
                raise UserAlreadyExistsError(changes["email"])
            data["email"] = changes["email"]

        if changes.get("name") is not None:
            data["name"] = changes["name"]

        if changes.get("password") is not None:
            data["password_hash"] = hash_password(changes["password"])

        if not data:
            return existing.to_public()

        updated = self._repo.update(user_id, data)
        if updated is None:
            raise UserNotFoundError(user_id)
        return updated.to_public()

    async def delete_user(self, actor: AuthenticatedUser, user_id: int) -> None:
        if self._repo.get_by_id(user_id) is None:
            raise UserNotFoundError(user_id)

        self._policy.ensure_can_delete_user(actor, user_id)

        if not self._repo.delete(user_id):
            raise UserNotFoundError(user_id)
        logger.info(f"User {actor.id} deleted user {user_id}")
