"""Configuration loaded from environment variables."""

import os


def _get_env_int(key: str, default: str) -> int:
    """Get integer environment variable with validation."""
    try:
        return int(os.getenv(key, default))
    except ValueError:
        raise ValueError(f"Invalid integer value for {key}")


def _get_env_bool(key: str, default: str) -> bool:
    """Get boolean environment variable ("1", "true", "yes" are truthy)."""
    return os.getenv(key, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Centralized configuration from environment variables."""

    # Persistence
    REPOSITORY_BACKEND: str = os.getenv("REPOSITORY_BACKEND", "sqlalchemy")  # sqlalchemy | memory
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///passwords.db")
    SQL_ECHO: bool = _get_env_bool("SQL_ECHO", "false")

    # Hashing: bcrypt cost factor (log2 of rounds)
    BCRYPT_ROUNDS: int = _get_env_int("BCRYPT_ROUNDS", "12")

    # Generation
    PASSWORD_MIN_LENGTH: int = _get_env_int("PASSWORD_MIN_LENGTH", "4")
    PASSWORD_MAX_LENGTH: int = _get_env_int("PASSWORD_MAX_LENGTH", "30")
    # Symbols appended to the alphabet at the highest complexity level
    PASSWORD_SYMBOLS: str = os.getenv("PASSWORD_SYMBOLS", "!@#$%^&*()_-+=<>?/{}[]|")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


config = Config()
