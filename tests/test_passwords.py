"""Unit tests for PasswordHasher."""

import base64
import hashlib

import pytest

from common.auth import HashingFailure, PasswordHasher


class TestHash:
    def test_hash_is_not_plaintext(self, hasher):
        hashed = hasher.hash("secret123")
        assert hashed != "secret123"
        assert hashed.startswith("$2")

    def test_same_password_gets_fresh_salt(self, hasher):
        assert hasher.hash("secret123") != hasher.hash("secret123")

    def test_default_cost_factor_is_ten(self):
        hashed = PasswordHasher().hash("secret123")
        assert hashed.split("$")[2] == "10"


class TestVerify:
    def test_accepts_matching_password(self, hasher):
        assert hasher.verify("secret123", hasher.hash("secret123")) is True

    def test_rejects_other_password(self, hasher):
        assert hasher.verify("wrong", hasher.hash("secret123")) is False

    def test_long_passwords_use_every_byte(self, hasher):
        base = "x" * 80
        hashed = hasher.hash(base + "a")
        assert hasher.verify(base + "a", hashed) is True
        assert hasher.verify(base + "b", hashed) is False

    def test_rejects_the_unsalted_digest_of_the_password(self, hasher):
        digest = base64.b64encode(hashlib.sha256(b"secret123").digest()).decode()
        assert hasher.verify(digest, hasher.hash("secret123")) is False

    def test_malformed_hash_raises_hashing_failure(self, hasher):
        with pytest.raises(HashingFailure):
            hasher.verify("secret123", "not-a-bcrypt-hash")
