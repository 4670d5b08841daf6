"""Domain models and entities."""

from shared.domain.models import PasswordRecord, Tag, PasswordCreatePayload, PasswordResponse, TagResponse
from shared.domain.exceptions import VaultError, PasswordNotFoundError
from shared.domain.consts import (
    Complexity,
    CharacterSet,
    RepositoryBackend,
    ErrorMessages,
    HealthStatus,
)

__all__ = [
    "PasswordRecord",
    "Tag",
    "PasswordCreatePayload",
    "PasswordResponse",
    "TagResponse",
    "VaultError",
    "PasswordNotFoundError",
    "Complexity",
    "CharacterSet",
    "RepositoryBackend",
    "ErrorMessages",
    "HealthStatus",
]
