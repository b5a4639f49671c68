"""Declarative base and shared column mixins for ORM models."""

from sqlalchemy import Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Identifiers are stored in signed 32-bit integer columns
MAX_RESOURCE_ID = 2**31 - 1


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""


class IntegerIdMixin:
    """Integer surrogate primary key, unique across the whole table."""

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
