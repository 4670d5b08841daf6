"""Alphabet construction and secure random password generation."""

import secrets
from typing import Optional
from shared.config.config import config
from shared.domain.consts import CharacterSet, Complexity, ErrorMessages


def build_alphabet(complexity: int, symbols: Optional[str] = None) -> str:
    """
    Build the character set for a complexity tier.

    Tiers are cumulative:
    - 1: digits
    - 2: digits + letters
    - 3: digits + letters + symbols

    Args:
        complexity: Tier in {1, 2, 3}
        symbols: Symbol set for tier 3 (defaults to config.PASSWORD_SYMBOLS)

    Returns:
        Alphabet string

    Raises:
        ValueError: If complexity is not a known tier
    """
    try:
        level = Complexity(complexity)
    except ValueError:
        raise ValueError(f"Unknown complexity level: {complexity}")

    alphabet = CharacterSet.DIGITS
    if level >= Complexity.ALPHANUMERIC:
        alphabet += CharacterSet.LETTERS
    if level >= Complexity.SYMBOLS:
        alphabet += symbols if symbols is not None else config.PASSWORD_SYMBOLS
    return alphabet


def generate_password(length: int, alphabet: str) -> str:
    """
    Generate a password of exactly `length` characters.

    Each character is drawn independently and uniformly from alphabet
    using the OS CSPRNG (secrets module).

    Raises:
        ValueError: If length < 1 or alphabet is empty
    """
    if length < 1:
        raise ValueError(f"Password length must be positive, got {length}")
    if not alphabet:
        raise ValueError("Alphabet must not be empty")
    return "".join(secrets.choice(alphabet) for _ in range(length))


def validate_generation_params(length: int, complexity: int) -> None:
    """
    Validate generation parameters against configured limits.

    Raises:
        ValueError: With a user-facing message if either value is out of range
    """
    if length < config.PASSWORD_MIN_LENGTH or length > config.PASSWORD_MAX_LENGTH:
        raise ValueError(
            ErrorMessages.INVALID_LENGTH.format(
                min_length=config.PASSWORD_MIN_LENGTH,
                max_length=config.PASSWORD_MAX_LENGTH,
            )
        )
    if complexity < min(Complexity) or complexity > max(Complexity):
        raise ValueError(
            ErrorMessages.INVALID_COMPLEXITY.format(
                min_level=int(min(Complexity)),
                max_level=int(max(Complexity)),
            )
        )
