"""Domain models for password records, tags, and API payloads."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import FrozenSet, List, Optional
from pydantic import BaseModel, Field, field_validator, ConfigDict


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Tag:
    """A label attached to password records. Identity is the tag name."""
    name: str
    id: Optional[int] = field(default=None, compare=False)


@dataclass
class PasswordRecord:
    """A stored password with ownership and tag metadata."""
    password: str  # hashed once persisted
    owner: str
    id: Optional[int] = None
    created_at: datetime = field(default_factory=_utc_now)
    tags: FrozenSet[Tag] = field(default_factory=frozenset)

    @property
    def tag_names(self) -> List[str]:
        """Sorted tag names."""
        return sorted(tag.name for tag in self.tags)


class PasswordCreatePayload(BaseModel):
    """Payload for create and update requests."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "password": "hunter2",
                "owner": "alice",
                "tags": ["email", "work"],
            }
        }
    )

    password: str = Field(..., min_length=1, description="Plaintext password (hashed before storage)")
    owner: str = Field(..., description="Owner of the password")
    tags: List[str] = Field(default_factory=list, description="Tag names")

    @field_validator("tags")
    @classmethod
    def normalize_tags(cls, tags: List[str]) -> List[str]:
        """Strip tag names and drop blanks and duplicates, keeping order."""
        seen: list[str] = []
        for name in tags:
            name = name.strip()
            if name and name not in seen:
                seen.append(name)
        return seen

    def to_record(self, password_id: Optional[int] = None) -> PasswordRecord:
        """Build a domain record from this payload."""
        return PasswordRecord(
            id=password_id,
            password=self.password,
            owner=self.owner,
            tags=frozenset(Tag(name=name) for name in self.tags),
        )


class TagResponse(BaseModel):
    """Tag as returned by the API."""
    id: Optional[int] = Field(None, description="Tag identifier")
    name: str = Field(..., description="Tag name")


class PasswordResponse(BaseModel):
    """Password record as returned by the API. The password field holds the hash."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "password": "$2b$12$...",
                "owner": "alice",
                "created_at": "2024-01-01T12:00:00Z",
                "tags": [{"id": 1, "name": "email"}],
            }
        }
    )

    id: Optional[int] = Field(None, description="Password identifier")
    password: str = Field(..., description="Hashed password")
    owner: str = Field(..., description="Owner of the password")
    created_at: datetime = Field(..., description="Creation timestamp")
    tags: List[TagResponse] = Field(default_factory=list, description="Tags attached to the password")

    @classmethod
    def from_record(cls, record: PasswordRecord) -> "PasswordResponse":
        """Build a response from a domain record."""
        return cls(
            id=record.id,
            password=record.password,
            owner=record.owner,
            created_at=record.created_at,
            tags=[
                TagResponse(id=tag.id, name=tag.name)
                for tag in sorted(record.tags, key=lambda t: t.name)
            ],
        )
