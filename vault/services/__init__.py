"""Vault business logic services."""

from vault.services.password_generator import build_alphabet, generate_password, validate_generation_params
from vault.services.password_service import PasswordService

__all__ = [
    "build_alphabet",
    "generate_password",
    "validate_generation_params",
    "PasswordService",
]
