"""Relational password repository backed by SQLAlchemy."""

import logging
from datetime import timezone
from typing import Iterable, List, Optional, Set

from sqlalchemy import Engine, create_engine, select
from sqlalchemy.orm import Session, selectinload, sessionmaker
from sqlalchemy.pool import StaticPool

from shared.config.config import config
from shared.domain.exceptions import PasswordNotFoundError
from shared.domain.models import PasswordRecord, Tag
from shared.implementations.repositories.sqlalchemy_models import Base, PasswordRow, TagRow
from shared.interfaces.password_repository import PasswordRepository

logger = logging.getLogger(__name__)


def _is_sqlite_memory(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:")


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create an engine for database_url.

    In-memory SQLite shares a single connection across threads so that every
    session sees the same database.
    """
    if _is_sqlite_memory(database_url):
        return create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    if database_url.startswith("sqlite"):
        return create_engine(database_url, echo=echo, connect_args={"check_same_thread": False})
    return create_engine(database_url, echo=echo, pool_pre_ping=True)


def _to_record(row: PasswordRow) -> PasswordRecord:
    """Map an ORM row to a detached domain record. Must run inside the session."""
    created_at = row.created_at
    if created_at.tzinfo is None:
        # SQLite drops the offset; values are always written in UTC
        created_at = created_at.replace(tzinfo=timezone.utc)
    return PasswordRecord(
        id=row.id,
        password=row.password,
        owner=row.owner,
        created_at=created_at,
        tags=frozenset(Tag(name=tag.name, id=tag.id) for tag in row.tags),
    )


class SqlAlchemyPasswordRepository(PasswordRepository):
    """
    Repository over a relational database.

    Each call runs in its own session and transaction; the database provides
    consistency between concurrent callers. Tables are created on startup if
    missing.
    """

    def __init__(
        self,
        database_url: Optional[str] = None,
        echo: Optional[bool] = None,
        engine: Optional[Engine] = None,
    ) -> None:
        if engine is None:
            engine = build_engine(
                database_url or config.DATABASE_URL,
                echo=config.SQL_ECHO if echo is None else echo,
            )
        self.engine = engine
        Base.metadata.create_all(self.engine)
        self._session_factory = sessionmaker(self.engine, expire_on_commit=False)
        logger.info(f"SQLAlchemy repository ready (dialect={self.engine.dialect.name})")

    def _resolve_tags(self, session: Session, tags: Iterable[Tag]) -> Set[TagRow]:
        """Load tag rows by name, creating the ones that do not exist yet."""
        names = {tag.name for tag in tags}
        if not names:
            return set()
        existing = {
            row.name: row
            for row in session.scalars(select(TagRow).where(TagRow.name.in_(names)))
        }
        for name in names - existing.keys():
            row = TagRow(name=name)
            session.add(row)
            existing[name] = row
        return set(existing.values())

    def save(self, record: PasswordRecord) -> PasswordRecord:
        with self._session_factory.begin() as session:
            if record.id is None:
                row = PasswordRow(
                    password=record.password,
                    owner=record.owner,
                    created_at=record.created_at,
                )
                session.add(row)
            else:
                row = session.get(PasswordRow, record.id)
                if row is None:
                    raise PasswordNotFoundError(record.id)
                row.password = record.password
                row.owner = record.owner
            row.tags = self._resolve_tags(session, record.tags)
            session.flush()
            return _to_record(row)

    def find_all(self) -> List[PasswordRecord]:
        stmt = select(PasswordRow).options(selectinload(PasswordRow.tags)).order_by(PasswordRow.id)
        with self._session_factory() as session:
            return [_to_record(row) for row in session.scalars(stmt)]

    def find_by_id(self, password_id: int) -> Optional[PasswordRecord]:
        with self._session_factory() as session:
            row = session.get(PasswordRow, password_id, options=[selectinload(PasswordRow.tags)])
            return _to_record(row) if row is not None else None

    def delete_by_id(self, password_id: int) -> None:
        with self._session_factory.begin() as session:
            row = session.get(PasswordRow, password_id)
            if row is None:
                logger.debug(f"Delete ignored: password {password_id} not stored")
                return
            session.delete(row)

    def find_by_tag_name(self, tag_name: str) -> List[PasswordRecord]:
        stmt = (
            select(PasswordRow)
            .join(PasswordRow.tags)
            .where(TagRow.name == tag_name)
            .options(selectinload(PasswordRow.tags))
            .order_by(PasswordRow.id)
        )
        with self._session_factory() as session:
            return [_to_record(row) for row in session.scalars(stmt).unique()]
