"""Database handle exposed to the rest of the application and to tests.

The Flask-SQLAlchemy extension (:data:`school_registry.core.extensions.db`)
owns the engine per application. :class:`Database` wraps that engine with the
administrative primitives the test harness needs: scoped transactions, raw
statement execution and per-table erase-and-reset. It is registered in the
dependency container under :data:`DATABASE` by :func:`init_app`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any, Final

from flask import Flask
from sqlalchemy import Engine, text
from sqlalchemy.engine import Connection
from sqlalchemy.orm import Session

from school_registry.core import container as container_module
from school_registry.core import extensions
from school_registry.core.container import Provider

logger = logging.getLogger(__name__)

#: Container token for the database capability.
DATABASE: Final[str] = "DATABASE_CONNECTION"


class Database:
    """Engine-bound handle offering transactions and table maintenance.

    :param engine: Engine the handle operates on.
    :param metadata: Metadata used by ``create_all``.
    """

    def __init__(self, engine: Engine, metadata=None) -> None:
        self.engine = engine
        self.metadata = metadata if metadata is not None else extensions.metadata

    @classmethod
    def from_app(cls, app: Flask) -> Database:
        """Build a handle around the engine Flask-SQLAlchemy created for ``app``."""
        with app.app_context():
            return cls(extensions.db.engine, extensions.db.metadata)

    @property
    def dialect(self) -> str:
        return self.engine.dialect.name

    # ------------------------------------------------------------------ #
    # Transactions & statements
    # ------------------------------------------------------------------ #

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """Yield a session whose writes commit together or not at all.

        Objects stay loaded after commit (``expire_on_commit=False``) so callers
        can read generated identifiers and timestamps outside the scope.
        """
        with Session(self.engine, expire_on_commit=False) as session:
            with session.begin():
                yield session

    def execute(self, statement: str, params: Mapping[str, Any] | None = None) -> int:
        """Execute a raw SQL ``statement`` in its own transaction.

        :returns: Number of rows affected, as reported by the driver.
        """
        with self.engine.begin() as conn:
            return conn.execute(text(statement), dict(params or {})).rowcount

    # ------------------------------------------------------------------ #
    # Table maintenance
    # ------------------------------------------------------------------ #

    def _quote(self, name: str) -> str:
        return self.engine.dialect.identifier_preparer.quote(name)

    def truncate(self, *tables: str, cascade: bool = False) -> None:
        """Erase every row of ``tables`` and restart their identity sequences.

        PostgreSQL runs a single ``TRUNCATE ... RESTART IDENTITY``. SQLite has
        no ``TRUNCATE``; the same effect is produced by deleting rows and
        clearing ``sqlite_sequence`` inside one transaction. ``cascade`` also
        empties tables referencing the given ones.
        """
        if not tables:
            return
        names = list(tables)
        if self.dialect == "postgresql":
            clause = " CASCADE" if cascade else ""
            joined = ", ".join(self._quote(name) for name in names)
            self.execute(f"TRUNCATE TABLE {joined} RESTART IDENTITY{clause}")
            return
        if self.dialect != "sqlite":
            raise NotImplementedError(f"truncate is not supported on dialect '{self.dialect}'")

        if cascade:
            names = self._with_dependents(names)
        with self.engine.begin() as conn:
            for name in names:
                conn.execute(text(f"DELETE FROM {self._quote(name)}"))
            self._reset_sqlite_sequences(conn, names)

    def delete_all(self, table: str) -> int:
        """Delete every row of ``table`` without touching its sequence."""
        with self.engine.begin() as conn:
            result = conn.execute(text(f"DELETE FROM {self._quote(table)}"))
            return result.rowcount

    def reset_sequence(self, table: str, column: str = "id") -> None:
        """Restart the identifier sequence of ``table`` so new rows get id 1."""
        if self.dialect == "postgresql":
            self.execute(
                "SELECT setval(pg_get_serial_sequence(:table, :column), 1, false)",
                {"table": table, "column": column},
            )
        elif self.dialect == "sqlite":
            with self.engine.begin() as conn:
                self._reset_sqlite_sequences(conn, [table])
        else:
            raise NotImplementedError(f"reset_sequence is not supported on dialect '{self.dialect}'")

    def _reset_sqlite_sequences(self, conn: Connection, names: list[str]) -> None:
        # ``sqlite_sequence`` only exists once an AUTOINCREMENT table was created.
        exists = conn.execute(
            text("SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = 'sqlite_sequence'")
        ).first()
        if exists is None:
            return
        for name in names:
            conn.execute(text("DELETE FROM sqlite_sequence WHERE name = :name"), {"name": name})

    def _with_dependents(self, names: list[str]) -> list[str]:
        """Extend ``names`` with every table referencing them, children first."""
        wanted = set(names)
        changed = True
        while changed:
            changed = False
            for table in self.metadata.sorted_tables:
                if table.name in wanted:
                    continue
                if any(fk.column.table.name in wanted for fk in table.foreign_keys):
                    wanted.add(table.name)
                    changed = True
        ordered = [t.name for t in reversed(self.metadata.sorted_tables) if t.name in wanted]
        return ordered + [name for name in names if name not in ordered]

    # ------------------------------------------------------------------ #
    # Schema & lifecycle
    # ------------------------------------------------------------------ #

    def create_all(self) -> None:
        self.metadata.create_all(self.engine)

    def ping(self) -> bool:
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True

    def dispose(self) -> None:
        """Close pooled connections held by the engine."""
        self.engine.dispose()


def init_app(app: Flask) -> None:
    """Wire the database into ``app`` and publish the :data:`DATABASE` capability.

    Binds Flask-SQLAlchemy and Flask-Migrate, registers a :class:`Database`
    provider in the application's container and, when ``DB_CREATE_ALL`` is
    enabled, creates any missing tables.
    """
    extensions.init_app(app)

    container = container_module.get_container(app)
    container.register(DATABASE, Provider.factory(lambda: Database.from_app(app)))

    if app.config.get("DB_CREATE_ALL"):
        with app.app_context():
            extensions.db.create_all()
        logger.debug("database.create_all")
