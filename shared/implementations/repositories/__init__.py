"""Password repository implementations.

This package contains concrete persistence backends.
"""

from shared.implementations.repositories.in_memory import InMemoryPasswordRepository
from shared.implementations.repositories.sqlalchemy_repository import SqlAlchemyPasswordRepository

__all__ = ["InMemoryPasswordRepository", "SqlAlchemyPasswordRepository"]
