"""Tests for password hashing."""

from modules.auth.passwords import dummy_verify, hash_password, verify_password


class TestPasswords:
    def test_hash_is_bcrypt(self):
        hashed = hash_password("hunter2")
        assert hashed.startswith("$2")
        assert hashed != "hunter2"

    def test_hash_is_salted(self):
        """Two hashes of the same password differ."""
        assert hash_password("hunter2") != hash_password("hunter2")

    def test_verify(self):
        hashed = hash_password("hunter2")
        assert verify_password("hunter2", hashed) is True
        assert verify_password("hunter3", hashed) is False

    def test_verify_malformed_hash(self):
        assert verify_password("hunter2", "plaintext") is False

    def test_dummy_verify_does_not_raise(self):
        dummy_verify()
