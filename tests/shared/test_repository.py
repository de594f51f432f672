"""Tests for shared/repository.py."""

from unittest.mock import MagicMock

from postgrest.exceptions import APIError

from shared.repository import BaseRepository, is_foreign_key_violation, is_unique_violation


class TestBaseRepository:
    def test_stores_client(self):
        """Repository should keep the injected client."""
        mock_db = MagicMock()
        repo = BaseRepository(mock_db)
        assert repo._db is mock_db


class TestIsUniqueViolation:
    def test_unique_violation(self):
        error = APIError({"code": "23505", "message": "duplicate key value"})
        assert is_unique_violation(error) is True

    def test_other_error(self):
        error = APIError({"code": "23503", "message": "foreign key violation"})
        assert is_unique_violation(error) is False

    def test_missing_code(self):
        error = APIError({"message": "unknown"})
        assert is_unique_violation(error) is False


class TestIsForeignKeyViolation:
    def test_foreign_key_violation(self):
        error = APIError({"code": "23503", "message": "violates foreign key constraint"})
        assert is_foreign_key_violation(error) is True
        assert is_unique_violation(error) is False

    def test_unique_violation_is_not_foreign_key(self):
        error = APIError({"code": "23505", "message": "duplicate key value"})
        assert is_foreign_key_violation(error) is False
