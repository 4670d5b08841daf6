"""Process-local password repository."""

import itertools
import logging
import threading
from dataclasses import replace
from typing import Dict, FrozenSet, Iterable, List, Optional
from shared.domain.exceptions import PasswordNotFoundError
from shared.domain.models import PasswordRecord, Tag
from shared.interfaces.password_repository import PasswordRepository

logger = logging.getLogger(__name__)


class InMemoryPasswordRepository(PasswordRepository):
    """
    Dict-backed repository for tests and single-process use.

    Records are copied on the way in and out, so callers never share
    state with the store. Thread-safe using a lock for all operations.
    Data lives for the lifetime of the process.
    """

    def __init__(self) -> None:
        self._records: Dict[int, PasswordRecord] = {}
        self._tag_ids: Dict[str, int] = {}
        self._record_ids = itertools.count(1)
        self._next_tag_id = itertools.count(1)
        self._lock = threading.Lock()

    def _resolve_tags(self, tags: Iterable[Tag]) -> FrozenSet[Tag]:
        """Attach stored ids to tags, registering new names. Caller holds the lock."""
        resolved = set()
        for tag in tags:
            if tag.name not in self._tag_ids:
                self._tag_ids[tag.name] = next(self._next_tag_id)
            resolved.add(Tag(name=tag.name, id=self._tag_ids[tag.name]))
        return frozenset(resolved)

    def save(self, record: PasswordRecord) -> PasswordRecord:
        with self._lock:
            tags = self._resolve_tags(record.tags)
            if record.id is None:
                stored = replace(record, id=next(self._record_ids), tags=tags)
                logger.debug(f"Inserted password {stored.id}")
            else:
                existing = self._records.get(record.id)
                if existing is None:
                    raise PasswordNotFoundError(record.id)
                stored = replace(record, created_at=existing.created_at, tags=tags)
                logger.debug(f"Updated password {stored.id}")
            self._records[stored.id] = stored
            return replace(stored)

    def find_all(self) -> List[PasswordRecord]:
        with self._lock:
            return [replace(self._records[key]) for key in sorted(self._records)]

    def find_by_id(self, password_id: int) -> Optional[PasswordRecord]:
        with self._lock:
            record = self._records.get(password_id)
            return replace(record) if record is not None else None

    def delete_by_id(self, password_id: int) -> None:
        with self._lock:
            if self._records.pop(password_id, None) is None:
                logger.debug(f"Delete ignored: password {password_id} not stored")

    def find_by_tag_name(self, tag_name: str) -> List[PasswordRecord]:
        with self._lock:
            return [
                replace(self._records[key])
                for key in sorted(self._records)
                if any(tag.name == tag_name for tag in self._records[key].tags)
            ]
