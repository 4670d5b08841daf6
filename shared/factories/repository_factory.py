"""Factory for creating password repository instances."""

from typing import Optional
from shared.config.config import config
from shared.domain.consts import RepositoryBackend
from shared.interfaces.password_repository import PasswordRepository
from shared.implementations.repositories import InMemoryPasswordRepository, SqlAlchemyPasswordRepository


REPOSITORIES: dict[str, type[PasswordRepository]] = {
    RepositoryBackend.SQLALCHEMY: SqlAlchemyPasswordRepository,
    RepositoryBackend.MEMORY: InMemoryPasswordRepository,
}


def create_repository(
    backend: Optional[str] = None,
    database_url: Optional[str] = None,
) -> PasswordRepository:
    """Factory for creating password repositories.

    Defaults to config.REPOSITORY_BACKEND. database_url only applies to
    the SQLAlchemy backend.

    Returns:
        PasswordRepository instance

    Raises:
        ValueError: If backend is unknown
    """
    backend = backend if backend is not None else config.REPOSITORY_BACKEND
    try:
        repository_cls = REPOSITORIES[backend]
    except KeyError:
        raise ValueError(f"Unknown repository backend: {backend}")
    if repository_cls is SqlAlchemyPasswordRepository:
        return SqlAlchemyPasswordRepository(database_url=database_url)
    return repository_cls()
