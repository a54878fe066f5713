"""Repository package exposing persistence-layer access for all domain models."""

from __future__ import annotations

from school_registry.repositories.base import (
    BaseRepository,
    Page,
    Pagination,
    apply_sorting,
    paginate_select,
)
from school_registry.repositories.school import SchoolRepository
from school_registry.repositories.teacher import TeacherRepository

__all__ = [
    "BaseRepository",
    "Page",
    "Pagination",
    "apply_sorting",
    "paginate_select",
    "SchoolRepository",
    "TeacherRepository",
]
