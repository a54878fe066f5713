"""Teacher model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Index, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from school_registry.core.extensions import db

from .base import PKMixin, ReprMixin, TimestampMixin

if TYPE_CHECKING:
    from .school import School


class Teacher(PKMixin, ReprMixin, TimestampMixin, db.Model):
    """
    A person teaching a subject, optionally affiliated with one school.

    ``email`` is unique across all teachers and stored lower-cased.
    """

    __tablename__ = "teachers"

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    subject: Mapped[str | None] = mapped_column(String(100), nullable=True)
    school_id: Mapped[int | None] = mapped_column(ForeignKey("schools.id"), nullable=True)

    school: Mapped[School | None] = relationship(
        "School",
        back_populates="teachers",
        lazy="selectin",
    )

    __table_args__ = (
        UniqueConstraint("email", name="uq_teachers_email"),
        Index("ix_teachers_school_id", "school_id"),
        {"sqlite_autoincrement": True},
    )

    @validates("email")
    def _normalize_email(self, _key: str, value: str) -> str:
        return value.strip().lower() if value else value
