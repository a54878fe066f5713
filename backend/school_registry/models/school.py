"""School model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from school_registry.core.extensions import db

from .base import PKMixin, ReprMixin, TimestampMixin

if TYPE_CHECKING:
    from .teacher import Teacher


class School(PKMixin, ReprMixin, TimestampMixin, db.Model):
    """
    An educational institution that employs teachers.

    Only ``name`` is mandatory; contact fields are free-form strings.
    """

    __tablename__ = "schools"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str | None] = mapped_column(String(500), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)

    teachers: Mapped[list[Teacher]] = relationship(
        "Teacher",
        back_populates="school",
        lazy="selectin",
    )

    __table_args__ = (
        Index("ix_schools_name", "name"),
        # Identifiers are never reused until the sequence is reset.
        {"sqlite_autoincrement": True},
    )
