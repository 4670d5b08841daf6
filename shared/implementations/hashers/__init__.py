"""Password hasher implementations."""

from shared.implementations.hashers.bcrypt_hasher import BcryptPasswordHasher

__all__ = ["BcryptPasswordHasher"]
