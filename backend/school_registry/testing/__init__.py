"""End-to-end test harness: data generator, entity factories, registry and builder."""

from __future__ import annotations

from school_registry.testing.builder import AppTestBuilder, AppTestContext, LiveServer
from school_registry.testing.errors import (
    CleanupFailure,
    FactoriesUnavailable,
    HarnessError,
    InvalidRange,
    UnknownFactoryType,
)
from school_registry.testing.factories import (
    EntityFactory,
    SchoolAttributes,
    SchoolFactory,
    TeacherAttributes,
    TeacherFactory,
)
from school_registry.testing.registry import FACTORY_REGISTRY, FactoryRegistry, FactoryType

__all__ = [
    "AppTestBuilder",
    "AppTestContext",
    "LiveServer",
    "CleanupFailure",
    "FactoriesUnavailable",
    "HarnessError",
    "InvalidRange",
    "UnknownFactoryType",
    "EntityFactory",
    "SchoolAttributes",
    "SchoolFactory",
    "TeacherAttributes",
    "TeacherFactory",
    "FACTORY_REGISTRY",
    "FactoryRegistry",
    "FactoryType",
]
