"""
SchoolService
=============

CRUD use-cases for the ``School`` aggregate. Read and write operations run
inside a read-write unit of work; domain errors come from ``_shared.errors``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from school_registry.models import School
from school_registry.repositories.base import Page, Pagination
from school_registry.services._shared.base import BaseService
from school_registry.services._shared.errors import ConflictError, NotFoundError

logger = logging.getLogger(__name__)


class SchoolService(BaseService):
    """Application service for schools."""

    def list(self, pagination: Pagination) -> Page[School]:
        with self.rw_uow() as uow:
            return uow.schools.paginate(pagination)

    def get(self, school_id: int) -> School:
        """
        Return one school.

        :raises NotFoundError: If the school does not exist.
        """
        with self.rw_uow() as uow:
            school = uow.schools.get(school_id)
            if school is None:
                raise NotFoundError("School", school_id)
            return school

    def create(self, data: Mapping[str, Any]) -> School:
        with self.rw_uow() as uow:
            school = uow.schools.add(School(**data))
        logger.info("school.created id=%s", school.id)
        return school

    def update(self, school_id: int, data: Mapping[str, Any]) -> School:
        """
        Apply a partial update; omitted fields are kept.

        :raises NotFoundError: If the school does not exist.
        """
        with self.rw_uow() as uow:
            school = uow.schools.get(school_id)
            if school is None:
                raise NotFoundError("School", school_id)
            uow.schools.update(school, **data)
        return school

    def delete(self, school_id: int) -> None:
        """
        Delete a school that no teacher references.

        :raises NotFoundError: If the school does not exist.
        :raises ConflictError: If teachers are still affiliated with it.
        """
        with self.rw_uow() as uow:
            school = uow.schools.get(school_id)
            if school is None:
                raise NotFoundError("School", school_id)
            if uow.teachers.exists(school_id=school_id):
                raise ConflictError("School", "teachers are still affiliated with this school")
            uow.schools.delete(school)
        logger.info("school.deleted id=%s", school_id)
