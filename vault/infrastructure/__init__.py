"""Vault infrastructure layer."""

from vault.infrastructure.cache import PasswordCache

__all__ = [
    "PasswordCache",
]
