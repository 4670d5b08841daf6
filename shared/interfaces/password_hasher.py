"""Abstract one-way password hasher interface."""

from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """One-way hashing of plaintext secrets."""

    @abstractmethod
    def hash(self, plaintext: str) -> str:
        """Return the hashed form of plaintext. Irreversible."""
        pass

    @abstractmethod
    def verify(self, plaintext: str, hashed: str) -> bool:
        """Return True if plaintext matches hashed."""
        pass
