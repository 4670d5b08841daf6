"""bcrypt password hasher with SHA-256 pre-hash.

bcrypt truncates inputs at 72 bytes; pre-hashing with SHA-256 yields a
fixed-length input so long secrets are not silently truncated.
"""

import base64
import hashlib

import bcrypt

from shared.config.config import config
from shared.interfaces.password_hasher import PasswordHasher


def _prehash(plaintext: str) -> bytes:
    """SHA-256 pre-hash to avoid bcrypt's 72-byte truncation."""
    return base64.b64encode(hashlib.sha256(plaintext.encode("utf-8")).digest())


class BcryptPasswordHasher(PasswordHasher):
    """bcrypt hasher. Every call to hash() uses a fresh salt."""

    def __init__(self, rounds: int | None = None) -> None:
        self.rounds = rounds if rounds is not None else config.BCRYPT_ROUNDS

    def hash(self, plaintext: str) -> str:
        """Return bcrypt hash of plaintext."""
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_prehash(plaintext), salt).decode("utf-8")

    def verify(self, plaintext: str, hashed: str) -> bool:
        """Return True if plaintext matches hashed."""
        try:
            return bool(bcrypt.checkpw(_prehash(plaintext), hashed.encode("utf-8")))
        except (ValueError, TypeError):
            return False
