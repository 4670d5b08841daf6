"""Pytest configuration and fixtures."""

import pytest
from shared.implementations.hashers import BcryptPasswordHasher
from shared.implementations.repositories import InMemoryPasswordRepository
from vault.infrastructure.cache import PasswordCache
from vault.services.password_service import PasswordService

# Minimum bcrypt cost keeps hashing fast in tests
TEST_BCRYPT_ROUNDS = 4


@pytest.fixture
def hasher():
    """Create a fast bcrypt hasher."""
    return BcryptPasswordHasher(rounds=TEST_BCRYPT_ROUNDS)


@pytest.fixture
def repository():
    """Create an empty in-memory repository."""
    return InMemoryPasswordRepository()


@pytest.fixture
def cache():
    """Create an empty cache."""
    return PasswordCache()


@pytest.fixture
def service(repository, cache, hasher):
    """Create a PasswordService over the in-memory repository."""
    return PasswordService(repository=repository, cache=cache, hasher=hasher)
