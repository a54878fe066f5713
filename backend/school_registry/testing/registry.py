"""
Factory registry: one lazily built factory per entity kind.

:class:`FactoryType` is the closed set of kinds and :data:`FACTORY_REGISTRY`
maps each one to its factory class. A :class:`FactoryRegistry` memoizes the
instances it builds and cleans every registered table, children first.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum

from sqlalchemy.schema import sort_tables

from school_registry.core.database import Database
from school_registry.testing.cleanup import run_cleanup_chain
from school_registry.testing.errors import UnknownFactoryType
from school_registry.testing.factories import EntityFactory, SchoolFactory, TeacherFactory

logger = logging.getLogger(__name__)


class FactoryType(str, Enum):
    SCHOOL = "school"
    TEACHER = "teacher"


FACTORY_REGISTRY: Mapping[FactoryType, type[EntityFactory]] = {
    FactoryType.SCHOOL: SchoolFactory,
    FactoryType.TEACHER: TeacherFactory,
}


class FactoryRegistry:
    """
    Access point for the entity factories bound to one database handle.

    :param db: Handle every factory writes through.
    :param factories: Dispatch table; defaults to :data:`FACTORY_REGISTRY`.
    """

    def __init__(
        self,
        db: Database,
        factories: Mapping[FactoryType, type[EntityFactory]] | None = None,
    ) -> None:
        self.db = db
        self._classes = dict(FACTORY_REGISTRY if factories is None else factories)
        self._instances: dict[FactoryType, EntityFactory] = {}

    def get(self, factory_type: FactoryType | str) -> EntityFactory:
        """
        Return the factory for ``factory_type``, building it on first use.

        :raises UnknownFactoryType: When the tag is not registered.
        """
        try:
            key = FactoryType(factory_type)
        except ValueError:
            raise UnknownFactoryType(factory_type) from None
        if key not in self._instances:
            factory_class = self._classes.get(key)
            if factory_class is None:
                raise UnknownFactoryType(factory_type)
            self._instances[key] = factory_class(self.db)
        return self._instances[key]

    def get_multiple(self, *factory_types: FactoryType | str) -> dict[FactoryType, EntityFactory]:
        """Batch form of :meth:`get`, keyed by :class:`FactoryType`."""
        result: dict[FactoryType, EntityFactory] = {}
        for factory_type in factory_types:
            built = self.get(factory_type)
            result[FactoryType(factory_type)] = built
        return result

    def dependency_order(self) -> list[FactoryType]:
        """
        Registered kinds ordered so referencing tables come before the
        tables they reference (reverse topological order of foreign keys).
        """
        by_table = {cls.model.__table__: kind for kind, cls in self._classes.items()}
        parents_first = sort_tables(by_table)
        return [by_table[table] for table in reversed(parents_first)]

    def tables(self) -> list[str]:
        """Table names in :meth:`dependency_order`."""
        return [self._classes[kind].model.__tablename__ for kind in self.dependency_order()]

    def cleanup(self) -> None:
        """
        Empty every registered table and restart identifiers. Never raises.

        Tries one bulk truncate across all tables first, then falls back to
        each factory's own cleanup in dependency order.
        """
        tables = self.tables()
        logger.debug("registry.cleanup", extra={"tables": tables})
        run_cleanup_chain(
            "registry",
            [
                ("bulk_truncate", lambda: self.db.truncate(*tables, cascade=True)),
                ("per_entity", self._cleanup_each),
            ],
        )

    def _cleanup_each(self) -> None:
        for kind in self.dependency_order():
            self.get(kind).cleanup()
