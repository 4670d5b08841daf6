"""Constants to avoid string typos and magic numbers."""

import string
from enum import Enum, IntEnum


class Complexity(IntEnum):
    """Complexity tiers. Each tier includes the character classes of the tiers below it."""
    DIGITS = 1
    ALPHANUMERIC = 2
    SYMBOLS = 3


class CharacterSet:
    """Character classes used to build generation alphabets."""
    DIGITS = string.digits  # 10 symbols
    LETTERS = string.ascii_lowercase + string.ascii_uppercase  # 52 symbols
    DEFAULT_SYMBOLS = "!@#$%^&*()_-+=<>?/{}[]|"


class RepositoryBackend(str, Enum):
    """Persistence backend names."""
    SQLALCHEMY = "sqlalchemy"
    MEMORY = "memory"


class ErrorMessages:
    """User-facing error messages."""
    INVALID_LENGTH = "Password length must be between {min_length} and {max_length} characters."
    INVALID_COMPLEXITY = "Complexity level must be between {min_level} and {max_level}."
    PASSWORD_NOT_FOUND = "Password {password_id} not found"
    INTERNAL_ERROR = "Internal server error"


class HealthStatus:
    """Health endpoint values."""
    OK = "ok"
