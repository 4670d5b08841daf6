"""Password service: cache-first reads and hash-then-persist writes."""

import logging
from dataclasses import replace
from typing import Iterable, List, Optional, Tuple
from shared.domain.models import PasswordRecord, Tag
from shared.interfaces.password_hasher import PasswordHasher
from shared.interfaces.password_repository import PasswordRepository
from vault.infrastructure.cache import PasswordCache
from vault.services.password_generator import build_alphabet, generate_password

logger = logging.getLogger(__name__)


class PasswordService:
    """
    Orchestrates generation, caching and persistence of passwords.

    Reads check the matching cache partition first and fall back to the
    generator or repository on a miss, populating the cache on the way out.
    Writes hash the plaintext, persist through the repository, then clear
    the database partitions of the cache.

    Repository and hasher errors propagate unchanged; nothing is retried.
    When a write fails the cache is left as it was.

    Thread-safety: holds no mutable state of its own; the cache and
    repository handle concurrent access.
    """

    def __init__(
        self,
        repository: PasswordRepository,
        cache: PasswordCache,
        hasher: PasswordHasher,
    ) -> None:
        self.repository = repository
        self.cache = cache
        self.hasher = hasher

    def generate_password(self, length: int, complexity: int) -> str:
        """
        Generate a password, reusing the cached one for identical parameters.

        Parameters are expected to be validated by the caller.
        """
        cached = self.cache.get_generated_password(length, complexity)
        if cached is not None:
            logger.debug(f"Generated-password cache hit (length={length}, complexity={complexity})")
            return cached

        password = generate_password(length, build_alphabet(complexity))
        self.cache.put_generated_password(length, complexity, password)
        logger.debug(f"Generated new password (length={length}, complexity={complexity})")
        return password

    def generate_for_owner(
        self,
        length: int,
        complexity: int,
        owner: str,
        tags: Iterable[str] = (),
    ) -> Tuple[str, PasswordRecord]:
        """
        Generate a password and store it for owner.

        Returns:
            Tuple of (plaintext password, persisted record holding the hash)
        """
        password = self.generate_password(length, complexity)
        record = PasswordRecord(
            password=password,
            owner=owner,
            tags=frozenset(Tag(name=name) for name in tags),
        )
        return password, self.create(record)

    def _hash_and_save(self, record: PasswordRecord) -> PasswordRecord:
        hashed = replace(record, password=self.hasher.hash(record.password))
        saved = self.repository.save(hashed)
        self.cache.clear_database_cache()
        return saved

    def create(self, record: PasswordRecord) -> PasswordRecord:
        """Hash and persist a new record. The input record is not modified."""
        saved = self._hash_and_save(record)
        logger.info(f"Created password {saved.id} for owner {saved.owner!r}")
        return saved

    def update(self, record: PasswordRecord) -> PasswordRecord:
        """
        Re-hash and persist an existing record.

        Raises:
            ValueError: If the record has no id
            PasswordNotFoundError: If the repository does not hold the id
        """
        if record.id is None:
            raise ValueError("Cannot update a password without an id")
        saved = self._hash_and_save(record)
        logger.info(f"Updated password {saved.id}")
        return saved

    def delete(self, password_id: int) -> None:
        """Delete by id. The cache is cleared even if the id was not stored."""
        self.repository.delete_by_id(password_id)
        self.cache.clear_database_cache()
        logger.info(f"Deleted password {password_id}")

    def find_all(self) -> List[PasswordRecord]:
        """Return all records."""
        cached = self.cache.get_all_passwords()
        if cached is not None:
            logger.debug("All-passwords cache hit")
            return cached

        generation = self.cache.generation
        records = self.repository.find_all()
        self.cache.put_all_passwords(records, generation=generation)
        return records

    def find_by_id(self, password_id: int) -> Optional[PasswordRecord]:
        """Return the record with this id, or None if absent. Absence is not cached."""
        cached = self.cache.get_password_by_id(password_id)
        if cached is not None:
            logger.debug(f"Password-by-id cache hit (id={password_id})")
            return cached

        generation = self.cache.generation
        record = self.repository.find_by_id(password_id)
        if record is not None:
            self.cache.put_password_by_id(password_id, record, generation=generation)
        return record

    def find_passwords_by_tag_name(self, tag_name: str) -> List[PasswordRecord]:
        """Return records tagged with tag_name."""
        cached = self.cache.get_passwords_by_tag(tag_name)
        if cached is not None:
            logger.debug(f"Passwords-by-tag cache hit (tag={tag_name!r})")
            return cached

        generation = self.cache.generation
        records = self.repository.find_by_tag_name(tag_name)
        self.cache.put_passwords_by_tag(tag_name, records, generation=generation)
        return records
