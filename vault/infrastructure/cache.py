"""Cache for generated passwords and password lookups."""

import logging
import threading
from dataclasses import replace
from typing import Dict, List, Optional, Tuple
from shared.domain.models import PasswordRecord

logger = logging.getLogger(__name__)


def _copy_list(records: List[PasswordRecord]) -> List[PasswordRecord]:
    return [replace(record) for record in records]


class PasswordCache:
    """
    In-memory cache with four independent partitions:

    - generated passwords, keyed by (length, complexity)
    - all records (a single snapshot)
    - records by id
    - records by tag name

    The last three mirror database state and are cleared together by
    clear_database_cache() after every write. Generated passwords do not
    depend on stored data and survive database writes.

    Thread-safe: one lock guards the generated partition and another guards
    the three database partitions, so an invalidation is never observed half
    done. Each invalidation bumps `generation`; a database put tagged with an
    older generation is dropped, which keeps a read that fetched before a
    write from caching pre-write data after that write's invalidation.

    Snapshots are copied on put and on get. No expiry or eviction.
    """

    def __init__(self) -> None:
        self._generated: Dict[Tuple[int, int], str] = {}
        self._all: Optional[List[PasswordRecord]] = None
        self._by_id: Dict[int, PasswordRecord] = {}
        self._by_tag: Dict[str, List[PasswordRecord]] = {}
        self._generation: int = 0
        self._generated_lock = threading.Lock()
        self._db_lock = threading.Lock()

    @property
    def generation(self) -> int:
        """Invalidation counter for the database partitions."""
        with self._db_lock:
            return self._generation

    def _is_stale(self, generation: Optional[int]) -> bool:
        """Caller holds _db_lock."""
        return generation is not None and generation != self._generation

    # Generated passwords

    def get_generated_password(self, length: int, complexity: int) -> Optional[str]:
        """Get previously generated password for these parameters if cached."""
        with self._generated_lock:
            return self._generated.get((length, complexity))

    def put_generated_password(self, length: int, complexity: int, password: str) -> None:
        """Store generated password for these parameters."""
        with self._generated_lock:
            self._generated[(length, complexity)] = password

    def clear_generated_passwords(self) -> None:
        """Remove all generated passwords."""
        with self._generated_lock:
            self._generated.clear()

    # All records

    def get_all_passwords(self) -> Optional[List[PasswordRecord]]:
        """Get the all-records snapshot if cached."""
        with self._db_lock:
            return _copy_list(self._all) if self._all is not None else None

    def put_all_passwords(self, records: List[PasswordRecord], generation: Optional[int] = None) -> bool:
        """Store the all-records snapshot. Returns False if dropped as stale."""
        with self._db_lock:
            if self._is_stale(generation):
                return False
            self._all = _copy_list(records)
            return True

    # By id

    def get_password_by_id(self, password_id: int) -> Optional[PasswordRecord]:
        """Get record snapshot for id if cached."""
        with self._db_lock:
            record = self._by_id.get(password_id)
            return replace(record) if record is not None else None

    def put_password_by_id(
        self, password_id: int, record: PasswordRecord, generation: Optional[int] = None
    ) -> bool:
        """Store record snapshot for id. Returns False if dropped as stale."""
        with self._db_lock:
            if self._is_stale(generation):
                return False
            self._by_id[password_id] = replace(record)
            return True

    # By tag

    def get_passwords_by_tag(self, tag_name: str) -> Optional[List[PasswordRecord]]:
        """Get records for tag if cached. An empty list is a valid cached value."""
        with self._db_lock:
            records = self._by_tag.get(tag_name)
            return _copy_list(records) if records is not None else None

    def put_passwords_by_tag(
        self, tag_name: str, records: List[PasswordRecord], generation: Optional[int] = None
    ) -> bool:
        """Store records for tag. Returns False if dropped as stale."""
        with self._db_lock:
            if self._is_stale(generation):
                return False
            self._by_tag[tag_name] = _copy_list(records)
            return True

    # Invalidation

    def clear_database_cache(self) -> None:
        """Clear the all-records, by-id and by-tag partitions in one step."""
        with self._db_lock:
            self._all = None
            self._by_id.clear()
            self._by_tag.clear()
            self._generation += 1
            generation = self._generation
        logger.debug(f"Database cache cleared (generation={generation})")

    def clear(self) -> None:
        """Remove all cached entries from every partition."""
        self.clear_generated_passwords()
        self.clear_database_cache()
