"""Convenience exports for application schemas."""

from __future__ import annotations

from .common import PaginationQuerySchema, build_meta
from .school import SchoolCreateSchema, SchoolSchema, SchoolUpdateSchema
from .teacher import TeacherCreateSchema, TeacherSchema, TeacherUpdateSchema

__all__ = [
    "PaginationQuerySchema",
    "build_meta",
    "SchoolSchema",
    "SchoolCreateSchema",
    "SchoolUpdateSchema",
    "TeacherSchema",
    "TeacherCreateSchema",
    "TeacherUpdateSchema",
]
