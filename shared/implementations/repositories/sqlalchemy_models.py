"""SQLAlchemy ORM models. Tables: passwords, tags, password_tag."""

from datetime import datetime
from typing import List, Set

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Table
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    pass


password_tag = Table(
    "password_tag",
    Base.metadata,
    Column("password_id", ForeignKey("passwords.id", ondelete="CASCADE"), primary_key=True),
    Column("tag_id", ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
)


class PasswordRow(Base):
    """Stored password. The password column always holds the hash."""

    __tablename__ = "passwords"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    owner: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    tags: Mapped[Set["TagRow"]] = relationship(secondary=password_tag, back_populates="passwords")


class TagRow(Base):
    """Tag. Unique by name."""

    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    passwords: Mapped[List[PasswordRow]] = relationship(secondary=password_tag, back_populates="tags")
