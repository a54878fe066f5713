"""Pytest fixtures built on :class:`~school_registry.testing.AppTestBuilder`.

Every test that asks for ``ctx`` gets its own fully composed application
backed by a private in-memory SQLite database (unless ``TEST_DATABASE_URL``
or ``TEST_DB_*`` point elsewhere). The context is torn down afterwards,
which empties the tables and restarts their identifiers.
"""

from __future__ import annotations

from collections.abc import Generator

import pytest
from sqlalchemy import func, select

from school_registry.testing import AppTestBuilder, AppTestContext, FactoryType


@pytest.fixture()
def builder() -> Generator[AppTestBuilder, None, None]:
    """Provide a fresh builder; its latest context is torn down afterwards."""
    b = AppTestBuilder()
    yield b
    b.teardown()


@pytest.fixture()
def ctx(builder: AppTestBuilder) -> AppTestContext:
    """Fully composed application context."""
    return builder.build()


@pytest.fixture()
def client(ctx: AppTestContext):
    return ctx.client


@pytest.fixture()
def api(ctx: AppTestContext) -> str:
    """Versioned API prefix, e.g. ``/api/v1``."""
    return ctx.api_prefix


@pytest.fixture()
def schools(ctx: AppTestContext):
    return ctx.get_factory(FactoryType.SCHOOL)


@pytest.fixture()
def teachers(ctx: AppTestContext):
    return ctx.get_factory(FactoryType.TEACHER)


@pytest.fixture()
def count_rows(ctx: AppTestContext):
    """Return a callable counting the committed rows of a model."""

    def _count(model) -> int:
        with ctx.db.transaction() as session:
            return session.scalar(select(func.count()).select_from(model))

    return _count


@pytest.fixture(scope="session")
def faker():
    """Provide a :class:`faker.Faker` instance seeded for deterministic tests."""
    from faker import Faker

    fk = Faker()
    Faker.seed(1337)
    return fk
