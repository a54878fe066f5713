"""
Entity factories: persist fixture rows and clean their tables.

Default attributes come from factory_boy ``DictFactory`` declarations fed by
:mod:`school_registry.testing.data_generator`; the ``index`` parameter marks
a row's position inside a :meth:`EntityFactory.create_many` batch so rows
stay distinguishable. Each factory writes through a
:class:`~school_registry.core.database.Database` handle, one transaction per
call.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Generic, TypeVar

import factory
from sqlalchemy import inspect
from sqlalchemy.orm import Session

from school_registry.core.database import Database
from school_registry.models import School, Teacher
from school_registry.testing import data_generator as gen
from school_registry.testing.cleanup import run_cleanup_chain

logger = logging.getLogger(__name__)

M = TypeVar("M")

SUBJECTS = ("Mathematics", "Physics", "Chemistry", "Biology", "History", "Literature")


def _suffix(index: int | None) -> str:
    return "" if index is None else f"_{index}"


class SchoolAttributes(factory.DictFactory):
    """Default column values for a :class:`School`."""

    class Params:
        index = None

    name = factory.LazyAttribute(lambda o: gen.name("Test School") + _suffix(o.index))
    address = factory.LazyFunction(gen.address)
    phone = factory.LazyFunction(gen.phone)
    email = factory.LazyAttribute(lambda o: gen.email(f"school{_suffix(o.index)}"))


class TeacherAttributes(factory.DictFactory):
    """Default column values for a :class:`Teacher`; no school by default."""

    class Params:
        index = None
        # Makes the unique email and the first name share one counter value.
        uid = factory.LazyFunction(gen.next_unique_id)

    first_name = factory.LazyAttribute(lambda o: f"Teacher{o.uid}{_suffix(o.index)}")
    last_name = "Doe"
    email = factory.LazyAttribute(lambda o: gen.email(f"teacher{o.uid}{_suffix(o.index)}_"))
    phone = factory.LazyFunction(gen.phone)
    subject = factory.LazyFunction(lambda: gen.random_choice(SUBJECTS))
    school_id = None


class EntityFactory(Generic[M]):
    """
    Create rows of one model and erase its table.

    Subclasses set ``model`` and ``attributes``; ``cascade_cleanup`` makes
    :meth:`cleanup` also empty tables that reference this one.
    """

    model: ClassVar[type]
    attributes: ClassVar[type[factory.DictFactory]]
    cascade_cleanup: ClassVar[bool] = False

    def __init__(self, db: Database) -> None:
        self.db = db

    @property
    def table(self) -> str:
        return self.model.__tablename__

    def payload(self, index: int | None = None, **overrides: Any) -> dict[str, Any]:
        """Defaults for one row merged with ``overrides`` (overrides win)."""
        return self.attributes.build(index=index, **overrides)

    def create(self, **overrides: Any) -> M:
        """
        Insert one row in its own transaction.

        :returns: The committed row with identifier and timestamps loaded.
        """
        row = self.model(**self.payload(**overrides))
        with self.db.transaction() as session:
            session.add(row)
            session.flush()
            self._load(session, row)
        logger.debug("factory.create id=%s", row.id, extra={"factory_type": self.table})
        return row

    def create_many(self, count: int, **overrides: Any) -> list[M]:
        """
        Insert ``count`` rows in one transaction, in index order.

        ``overrides`` apply to every row of the batch.

        :raises ValueError: If ``count`` is negative.
        """
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        if count == 0:
            return []
        rows = [self.model(**self.payload(index=i, **overrides)) for i in range(count)]
        with self.db.transaction() as session:
            session.add_all(rows)
            session.flush()
            for row in rows:
                self._load(session, row)
        logger.debug("factory.create_many count=%s", count, extra={"factory_type": self.table})
        return rows

    def _load(self, session: Session, row: M) -> None:
        # Rows leave the session detached; relationships must be populated now.
        session.refresh(row)
        for relationship in inspect(self.model).relationships:
            getattr(row, relationship.key)

    def cleanup(self) -> None:
        """Empty the table and restart its identifiers at 1. Never raises."""
        run_cleanup_chain(
            self.table,
            [
                ("truncate", lambda: self.db.truncate(self.table, cascade=self.cascade_cleanup)),
                ("delete_and_reset", self._delete_and_reset),
            ],
        )

    def _delete_and_reset(self) -> None:
        self.db.delete_all(self.table)
        self.db.reset_sequence(self.table)


class SchoolFactory(EntityFactory[School]):
    model = School
    attributes = SchoolAttributes
    # Teachers reference schools.
    cascade_cleanup = True


class TeacherFactory(EntityFactory[Teacher]):
    """
    Teachers, optionally affiliated with a school.

    Pass ``school=<persisted School>`` to link the teacher; its ``id`` becomes
    ``school_id`` and takes precedence over an explicit ``school_id``.
    """

    model = Teacher
    attributes = TeacherAttributes

    def payload(self, index: int | None = None, **overrides: Any) -> dict[str, Any]:
        school = overrides.pop("school", None)
        data = super().payload(index=index, **overrides)
        if school is not None:
            if not isinstance(school, School):
                raise TypeError(
                    f"school override must be a School, got {type(school).__name__}; "
                    "pass a raw identifier as school_id="
                )
            if school.id is None:
                raise ValueError("school override must be a persisted School")
            data["school_id"] = school.id
        return data
