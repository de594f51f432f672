"""
User repository for database access.

Encapsulates all Supabase queries and data mapping for the users table.
"""

import logging
from datetime import datetime, timezone
from typing import Optional, Any

from postgrest.exceptions import APIError

from shared.repository import BaseRepository, is_unique_violation
from shared.models import Role
from .models import UserRecord
from .exceptions import UserAlreadyExistsError

logger = logging.getLogger(__name__)

TABLE = "users"


class UserRepository(BaseRepository[UserRecord]):
    """
    Repository for user data access.

    Email uniqueness is enforced by the users_email_key constraint; a
    violation is reported as UserAlreadyExistsError.

    Note: This repository does NOT perform authorization checks.
    """

    def create(self, data: dict[str, Any]) -> UserRecord:
        """
        Insert a user row.

        Args:
            data: Column values (email, password_hash, name, role).

        Returns:
            Created UserRecord with generated ID and timestamps.
        """
        try:
            result = self._db.table(TABLE).insert(data).execute()
        except APIError as e:
            if is_unique_violation(e):
                logger.info("Email uniqueness constraint rejected registration")
                raise UserAlreadyExistsError(data.get("email", "")) from e
            raise
        return self._map_to_user(result.data[0])

    def get_by_id(self, user_id: int) -> Optional[UserRecord]:
        result = self._db.table(TABLE).select("*").eq("id", user_id).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        """Exact, case-sensitive email lookup."""
        result = self._db.table(TABLE).select("*").eq("email", email).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def list_all(self) -> list[UserRecord]:
        result = self._db.table(TABLE).select("*").order("id").execute()
        return [self._map_to_user(row) for row in result.data]

    def update(self, user_id: int, data: dict[str, Any]) -> Optional[UserRecord]:
        """
        Update columns of a user row.

        Returns:
            The updated record, or None if no row matched.
        """
        data = {**data, "updated_at": datetime.now(timezone.utc).isoformat()}
        try:
            result = self._db.table(TABLE).update(data).eq("id", user_id).execute()
        except APIError as e:
            if is_unique_violation(e):
                raise UserAlreadyExistsError(data.get("email", "")) from e
            raise
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def delete(self, user_id: int) -> bool:
        """
        Delete a user row.

        Returns:
            True if a row was deleted.

        Note: Favorites are deleted via CASCADE.
        """
        result = self._db.table(TABLE).delete().eq("id", user_id).execute()
        return bool(result.data)

    def _map_to_user(self, data: dict[str, Any]) -> UserRecord:
        """Map database row to UserRecord model."""
        return UserRecord(
            id=int(data["id"]),
            email=data["email"],
            password_hash=data["password_hash"],
            name=data["name"],
            role=Role(data.get("role") or Role.USER.value),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )
