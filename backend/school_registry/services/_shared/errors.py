"""
Domain-level exceptions used within the service layer.

These exceptions never depend on Flask or HTTP. The translation to RFC 7807
responses happens in :mod:`school_registry.core.errors` through
:func:`school_registry.services._shared.base.translate_service_error`.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError


def violates(exc: IntegrityError, constraint_name: str) -> bool:
    """Return ``True`` when ``exc`` mentions ``constraint_name``.

    PostgreSQL reports the constraint name; SQLite reports the column list,
    so callers may pass either.
    """
    message = str(exc.orig).lower() if exc.orig else ""
    return constraint_name.lower() in message


class ServiceError(Exception):
    """Base class for all service-level errors."""


@dataclass(slots=True)
class NotFoundError(ServiceError):
    """
    Raised when an entity is not found in the repository.

    :param entity: Entity name (e.g., "School").
    :param key: Identifier or search key.
    """

    entity: str
    key: str | int

    def __str__(self) -> str:
        return f"{self.entity} with ID {self.key} not found"


@dataclass(slots=True)
class ConflictError(ServiceError):
    """
    Raised when a unique constraint or business rule conflict occurs.

    :param entity: Entity name (e.g., "Teacher").
    :param detail: Short human-readable explanation.
    """

    entity: str
    detail: str

    def __str__(self) -> str:
        return f"Conflict on {self.entity}: {self.detail}"


@dataclass(slots=True)
class InvalidReferenceError(ServiceError):
    """Raised when a payload points at a related entity that does not exist."""

    field: str
    value: int

    def __str__(self) -> str:
        return f"{self.field} references a missing record: {self.value}"
