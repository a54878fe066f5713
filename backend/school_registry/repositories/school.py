"""School repository."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy.orm import InstrumentedAttribute

from school_registry.models import School
from school_registry.repositories.base import BaseRepository


class SchoolRepository(BaseRepository[School]):
    """Persist :class:`School` rows."""

    model = School

    def _sortable_fields(self) -> Mapping[str, InstrumentedAttribute[Any]]:
        return {
            "id": self.model.id,
            "name": self.model.name,
            "created_at": self.model.created_at,
            "updated_at": self.model.updated_at,
        }

    def _filterable_fields(self) -> Mapping[str, InstrumentedAttribute[Any]]:
        return {"name": self.model.name, "email": self.model.email}

    def _updatable_fields(self) -> set[str]:
        return {"name", "address", "phone", "email"}
