"""
TeacherService
==============

CRUD use-cases for the ``Teacher`` aggregate, plus the per-school listing.

Notes
-----
- ``email`` is unique; collisions surface as :class:`ConflictError` whether
  detected up-front or by the database constraint.
- A ``school_id`` must point at an existing school
  (:class:`InvalidReferenceError`).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy.exc import IntegrityError

from school_registry.models import Teacher
from school_registry.repositories.base import Page, Pagination
from school_registry.services._shared.base import BaseService
from school_registry.services._shared.errors import (
    ConflictError,
    InvalidReferenceError,
    NotFoundError,
    violates,
)
from school_registry.uow.sqlalchemy_uow import SQLAlchemyUnitOfWork

logger = logging.getLogger(__name__)


class TeacherService(BaseService):
    """Application service for teachers."""

    def list(self, pagination: Pagination) -> Page[Teacher]:
        with self.rw_uow() as uow:
            return uow.teachers.paginate(pagination)

    def list_by_school(self, school_id: int) -> list[Teacher]:
        """Return teachers of ``school_id``; an unknown school yields ``[]``."""
        with self.rw_uow() as uow:
            return uow.teachers.list_by_school(school_id)

    def get(self, teacher_id: int) -> Teacher:
        """
        Return one teacher.

        :raises NotFoundError: If the teacher does not exist.
        """
        with self.rw_uow() as uow:
            teacher = uow.teachers.get(teacher_id)
            if teacher is None:
                raise NotFoundError("Teacher", teacher_id)
            return teacher

    def create(self, data: Mapping[str, Any]) -> Teacher:
        """
        Create a teacher.

        :raises ConflictError: If the email is already used.
        :raises InvalidReferenceError: If ``school_id`` matches no school.
        """
        try:
            with self.rw_uow() as uow:
                self._check_school(uow, data.get("school_id"))
                if uow.teachers.email_taken(data["email"]):
                    raise ConflictError("Teacher", "email already in use")
                teacher = uow.teachers.add(Teacher(**data))
        except IntegrityError as exc:
            raise self._integrity_conflict(exc) from exc
        logger.info("teacher.created id=%s school_id=%s", teacher.id, teacher.school_id)
        return teacher

    def update(self, teacher_id: int, data: Mapping[str, Any]) -> Teacher:
        """
        Apply a partial update; omitted fields are kept.

        :raises NotFoundError: If the teacher does not exist.
        :raises ConflictError: If the new email is already used.
        :raises InvalidReferenceError: If ``school_id`` matches no school.
        """
        try:
            with self.rw_uow() as uow:
                teacher = uow.teachers.get(teacher_id)
                if teacher is None:
                    raise NotFoundError("Teacher", teacher_id)
                self._check_school(uow, data.get("school_id"))
                email = data.get("email")
                if email and uow.teachers.email_taken(email, exclude_id=teacher_id):
                    raise ConflictError("Teacher", "email already in use")
                uow.teachers.update(teacher, **data)
        except IntegrityError as exc:
            raise self._integrity_conflict(exc) from exc
        return teacher

    def delete(self, teacher_id: int) -> None:
        """
        Delete a teacher.

        :raises NotFoundError: If the teacher does not exist.
        """
        with self.rw_uow() as uow:
            teacher = uow.teachers.get(teacher_id)
            if teacher is None:
                raise NotFoundError("Teacher", teacher_id)
            uow.teachers.delete(teacher)
        logger.info("teacher.deleted id=%s", teacher_id)

    # ------------------------------------------------------------------ #

    @staticmethod
    def _check_school(uow: SQLAlchemyUnitOfWork, school_id: int | None) -> None:
        if school_id is not None and uow.schools.get(school_id) is None:
            raise InvalidReferenceError("school_id", school_id)

    @staticmethod
    def _integrity_conflict(exc: IntegrityError) -> Exception:
        # Two concurrent creates can both pass the up-front email check.
        if violates(exc, "uq_teachers_email") or violates(exc, "teachers.email"):
            return ConflictError("Teacher", "email already in use")
        return exc
