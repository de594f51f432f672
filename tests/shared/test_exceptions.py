"""Tests for shared/exceptions.py."""

import pytest

from shared.exceptions import (
    PartshopError,
    NotFoundError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    AuthorizationError,
)


class TestPartshopError:
    def test_message_and_default_code(self):
        """Code should default to the class name."""
        error = PartshopError("Something broke")
        assert error.message == "Something broke"
        assert error.code == "PartshopError"
        assert error.details == {}
        assert str(error) == "Something broke"

    def test_custom_code_and_details(self):
        error = PartshopError("Bad", code="BAD", details={"field": "x"})
        assert error.code == "BAD"
        assert error.details == {"field": "x"}

    def test_to_dict(self):
        """to_dict should expose code, message and details."""
        error = NotFoundError("Missing", code="MISSING", details={"id": 3})
        assert error.to_dict() == {
            "error": "MISSING",
            "message": "Missing",
            "details": {"id": 3},
        }


class TestHierarchy:
    @pytest.mark.parametrize(
        "error_class",
        [NotFoundError, ValidationError, ConflictError, AuthenticationError, AuthorizationError],
    )
    def test_subclasses_inherit_base(self, error_class):
        """All error categories should be catchable as PartshopError."""
        with pytest.raises(PartshopError):
            raise error_class("boom")
