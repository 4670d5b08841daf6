"""Abstract password repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional
from shared.domain.models import PasswordRecord


class PasswordRepository(ABC):
    """Abstract persistence interface for password records.

    All repositories must implement:
    - save: Insert a new record or update an existing one
    - find_all: Return every stored record
    - find_by_id: Return a single record, or None
    - delete_by_id: Remove a record
    - find_by_tag_name: Return records carrying a tag
    """

    @abstractmethod
    def save(self, record: PasswordRecord) -> PasswordRecord:
        """Persist a record.

        A record without an id is inserted and returned with its assigned id.
        A record with an id replaces the stored password, owner and tags; the
        stored creation timestamp is kept.

        Returns:
            The persisted record

        Raises:
            PasswordNotFoundError: If the record has an id that is not stored
        """
        pass

    @abstractmethod
    def find_all(self) -> List[PasswordRecord]:
        """Return all records ordered by id."""
        pass

    @abstractmethod
    def find_by_id(self, password_id: int) -> Optional[PasswordRecord]:
        """Return the record with this id, or None if absent."""
        pass

    @abstractmethod
    def delete_by_id(self, password_id: int) -> None:
        """Delete the record with this id. Unknown ids are ignored."""
        pass

    @abstractmethod
    def find_by_tag_name(self, tag_name: str) -> List[PasswordRecord]:
        """Return records tagged with tag_name, ordered by id."""
        pass
