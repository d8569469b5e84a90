"""Declarative base and shared column mixins."""

from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Root of the ORM model registry."""


class IdMixin:
    """Store-assigned integer primary key."""

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
