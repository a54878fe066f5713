"""Teacher repository with school-scoped lookups."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy.orm import InstrumentedAttribute

from school_registry.models import Teacher
from school_registry.repositories.base import BaseRepository


class TeacherRepository(BaseRepository[Teacher]):
    """Persist :class:`Teacher` rows and query them by school."""

    model = Teacher

    def _sortable_fields(self) -> Mapping[str, InstrumentedAttribute[Any]]:
        return {
            "id": self.model.id,
            "first_name": self.model.first_name,
            "last_name": self.model.last_name,
            "email": self.model.email,
            "created_at": self.model.created_at,
        }

    def _filterable_fields(self) -> Mapping[str, InstrumentedAttribute[Any]]:
        return {
            "email": self.model.email,
            "subject": self.model.subject,
            "school_id": self.model.school_id,
        }

    def _updatable_fields(self) -> set[str]:
        return {"first_name", "last_name", "email", "phone", "subject", "school_id"}

    def list_by_school(self, school_id: int) -> list[Teacher]:
        """Return the teachers affiliated with ``school_id`` ordered by id."""
        return self.list(filters={"school_id": school_id})

    def email_taken(self, email: str, *, exclude_id: int | None = None) -> bool:
        """Return ``True`` when another teacher already uses ``email``."""
        existing = self.list(filters={"email": email.strip().lower()})
        return any(row.id != exclude_id for row in existing)
