"""
bcrypt password hashing.

Plaintexts are pre-hashed with SHA-256 before bcrypt so passwords longer
than bcrypt's 72-byte limit still contribute every byte.

Example:
    hasher = PasswordHasher(rounds=10)
    hashed = hasher.hash("secret123")
    hasher.verify("secret123", hashed)  # True
"""

import base64
import hashlib

import bcrypt as bcrypt_lib

from common.auth.exceptions import HashingFailure


class PasswordHasher:
    """Salted one-way password hashing with a fixed cost factor."""

    def __init__(self, rounds: int = 10):
        self.rounds = rounds

    def _prehash_password(self, password: str) -> bytes:
        sha256_hash = hashlib.sha256(password.encode("utf-8")).digest()
        return base64.b64encode(sha256_hash)

    def hash(self, password: str) -> str:
        """Hash a password with a fresh salt."""
        try:
            salt = bcrypt_lib.gensalt(rounds=self.rounds)
            return bcrypt_lib.hashpw(self._prehash_password(password), salt).decode("utf-8")
        except (ValueError, TypeError) as e:
            raise HashingFailure(f"Could not hash password: {e}") from e

    def verify(self, password: str, hashed: str) -> bool:
        """
        Verify a password against its hash.

        Raises:
            HashingFailure: If ``hashed`` is not a usable bcrypt hash
        """
        try:
            return bcrypt_lib.checkpw(self._prehash_password(password), hashed.encode("utf-8"))
        except (ValueError, TypeError, AttributeError) as e:
            raise HashingFailure(f"Could not verify password: {e}") from e
