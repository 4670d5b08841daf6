"""Tests for PasswordService functionality."""

import re
import pytest
from unittest.mock import MagicMock, patch
from shared.domain.exceptions import PasswordNotFoundError
from shared.domain.models import PasswordRecord, Tag
from vault.infrastructure.cache import PasswordCache
from vault.services.password_service import PasswordService


def make_record(owner: str = "alice", password: str = "hunter2", tags=(), password_id=None) -> PasswordRecord:
    return PasswordRecord(
        id=password_id,
        password=password,
        owner=owner,
        tags=frozenset(Tag(name=name) for name in tags),
    )


class TestGeneratePassword:
    """Tests for cache-first generation."""

    def test_digits_only(self, service):
        """Test that (8, 1) yields eight digits."""
        assert re.fullmatch(r"[0-9]{8}", service.generate_password(8, 1))

    def test_second_call_returns_cached_value(self, service, cache):
        """Test that identical parameters return the same string."""
        first = service.generate_password(12, 3)

        assert cache.get_generated_password(12, 3) == first
        assert service.generate_password(12, 3) == first

    def test_cache_hit_skips_generator(self, service, cache):
        """Test that a cached value is returned without generating."""
        cache.put_generated_password(6, 2, "abc123")

        with patch("vault.services.password_service.generate_password") as generate:
            assert service.generate_password(6, 2) == "abc123"
        generate.assert_not_called()

    def test_different_params_generate_separately(self, service):
        """Test that each (length, complexity) has its own entry."""
        assert len(service.generate_password(5, 1)) == 5
        assert len(service.generate_password(9, 1)) == 9

    def test_generated_cache_survives_writes(self, service):
        """Test that database writes do not clear generated passwords."""
        first = service.generate_password(10, 2)
        service.create(make_record())

        assert service.generate_password(10, 2) == first


class TestGenerateForOwner:
    """Tests for generate-and-store."""

    def test_stores_hash_and_returns_plaintext(self, service, hasher):
        """Test that the record holds the hash of the returned plaintext."""
        password, record = service.generate_for_owner(10, 3, "alice", tags=["email"])

        assert len(password) == 10
        assert record.id is not None
        assert record.owner == "alice"
        assert record.password != password
        assert hasher.verify(password, record.password)
        assert record.tag_names == ["email"]


class TestCreate:
    """Tests for create."""

    def test_create_hashes_plaintext(self, service, repository, hasher):
        """Test that the persisted secret is not the plaintext."""
        saved = service.create(make_record(owner="alice", password="hunter2"))

        assert saved.id is not None
        assert saved.password != "hunter2"
        assert repository.find_by_id(saved.id).password != "hunter2"
        assert hasher.verify("hunter2", saved.password)

    def test_create_does_not_modify_input(self, service):
        """Test that the caller's record keeps its plaintext and has no id."""
        record = make_record(password="hunter2")
        service.create(record)

        assert record.password == "hunter2"
        assert record.id is None

    def test_create_invalidates_find_all(self, service):
        """Test that find_all reflects a create made after it was cached."""
        before = service.find_all()
        service.create(make_record(owner="bob"))
        after = service.find_all()

        assert before == []
        assert [r.owner for r in after] == ["bob"]

    def test_create_invalidates_tag_lookup(self, service):
        """Test that tag lookups reflect a newly tagged record."""
        assert service.find_passwords_by_tag_name("work") == []
        service.create(make_record(tags=["work"]))

        assert len(service.find_passwords_by_tag_name("work")) == 1


class TestUpdate:
    """Tests for update."""

    def test_update_rehashes(self, service, hasher):
        """Test that update stores the hash of the new secret."""
        saved = service.create(make_record(password="old-secret"))
        updated = service.update(make_record(password="new-secret", password_id=saved.id))

        assert updated.id == saved.id
        assert updated.password != "new-secret"
        assert hasher.verify("new-secret", updated.password)
        assert not hasher.verify("old-secret", updated.password)

    def test_update_invalidates_find_by_id(self, service):
        """Test that a cached by-id snapshot is replaced after update."""
        saved = service.create(make_record(owner="alice"))
        assert service.find_by_id(saved.id).owner == "alice"

        service.update(make_record(owner="carol", password_id=saved.id))

        assert service.find_by_id(saved.id).owner == "carol"

    def test_update_keeps_created_at(self, service):
        """Test that the creation timestamp survives an update."""
        saved = service.create(make_record())
        updated = service.update(make_record(password="x", password_id=saved.id))

        assert updated.created_at == saved.created_at

    def test_update_without_id_raises_value_error(self, service):
        """Test that an update needs an id."""
        with pytest.raises(ValueError, match="without an id"):
            service.update(make_record())

    def test_update_unknown_id_propagates(self, service, cache):
        """Test that the repository's not-found error reaches the caller and the cache is untouched."""
        cache.put_all_passwords([])
        generation = cache.generation

        with pytest.raises(PasswordNotFoundError):
            service.update(make_record(password_id=999))

        assert cache.generation == generation
        assert cache.get_all_passwords() == []


class TestDelete:
    """Tests for delete."""

    def test_delete_invalidates_reads(self, service):
        """Test that deleted records disappear from every read path."""
        saved = service.create(make_record(tags=["work"]))
        assert len(service.find_all()) == 1
        assert service.find_by_id(saved.id) is not None
        assert len(service.find_passwords_by_tag_name("work")) == 1

        service.delete(saved.id)

        assert service.find_all() == []
        assert service.find_by_id(saved.id) is None
        assert service.find_passwords_by_tag_name("work") == []

    def test_delete_unknown_id_still_invalidates(self, service, cache):
        """Test that deleting a missing id clears the database partitions."""
        cache.put_all_passwords([])
        cache.put_passwords_by_tag("work", [])

        service.delete(12345)

        assert cache.get_all_passwords() is None
        assert cache.get_passwords_by_tag("work") is None


class TestReads:
    """Tests for cache-first reads."""

    @pytest.fixture
    def mock_repository(self):
        """Create a repository mock."""
        return MagicMock()

    @pytest.fixture
    def mock_service(self, mock_repository, hasher):
        """Create a service over the repository mock."""
        return PasswordService(repository=mock_repository, cache=PasswordCache(), hasher=hasher)

    def test_find_all_queries_repository_once(self, mock_service, mock_repository):
        """Test that a second find_all is served from cache."""
        mock_repository.find_all.return_value = [make_record(password_id=1)]

        mock_service.find_all()
        result = mock_service.find_all()

        assert [r.id for r in result] == [1]
        mock_repository.find_all.assert_called_once()

    def test_find_by_id_caches_hits(self, mock_service, mock_repository):
        """Test that a found record is cached."""
        mock_repository.find_by_id.return_value = make_record(password_id=1)

        mock_service.find_by_id(1)
        mock_service.find_by_id(1)

        mock_repository.find_by_id.assert_called_once_with(1)

    def test_find_by_id_does_not_cache_absence(self, mock_service, mock_repository):
        """Test that a missing record is looked up again each time."""
        mock_repository.find_by_id.return_value = None

        assert mock_service.find_by_id(1) is None
        assert mock_service.find_by_id(1) is None

        assert mock_repository.find_by_id.call_count == 2

    def test_find_by_tag_caches_empty_results(self, mock_service, mock_repository):
        """Test that an empty tag result is cached."""
        mock_repository.find_by_tag_name.return_value = []

        mock_service.find_passwords_by_tag_name("none")
        mock_service.find_passwords_by_tag_name("none")

        mock_repository.find_by_tag_name.assert_called_once_with("none")

    def test_repository_failure_propagates(self, mock_service, mock_repository):
        """Test that storage errors are not suppressed or retried."""
        mock_repository.find_all.side_effect = RuntimeError("database down")

        with pytest.raises(RuntimeError, match="database down"):
            mock_service.find_all()
        mock_repository.find_all.assert_called_once()

    def test_failed_save_does_not_invalidate(self, mock_service, mock_repository):
        """Test that a failed write leaves the cache as it was."""
        mock_repository.find_all.return_value = []
        mock_service.find_all()
        mock_repository.save.side_effect = RuntimeError("constraint violation")

        with pytest.raises(RuntimeError, match="constraint violation"):
            mock_service.create(make_record())

        assert mock_service.cache.get_all_passwords() == []

    def test_write_during_read_is_not_cached_stale(self, mock_service, mock_repository):
        """Test that a fetch overtaken by a write does not repopulate the cache."""
        def find_all_with_concurrent_write():
            # A write completes while this read is fetching
            mock_service.cache.clear_database_cache()
            return [make_record(password_id=1)]

        mock_repository.find_all.side_effect = find_all_with_concurrent_write

        assert [r.id for r in mock_service.find_all()] == [1]
        assert mock_service.cache.get_all_passwords() is None
