from __future__ import annotations

from school_registry.core import errors as api_errors
from school_registry.services._shared.errors import (
    ConflictError,
    InvalidReferenceError,
    NotFoundError,
    ServiceError,
)
from school_registry.uow.sqlalchemy_uow import SQLAlchemyUnitOfWork


def translate_service_error(exc: ServiceError) -> api_errors.APIError:
    """
    Map a domain error to its HTTP counterpart.

    :param exc: Error raised within a service.
    :returns: API error ready to be rendered as problem+json.
    """
    if isinstance(exc, NotFoundError):
        return api_errors.NotFound(str(exc))
    if isinstance(exc, ConflictError):
        return api_errors.Conflict(str(exc))
    if isinstance(exc, InvalidReferenceError):
        return api_errors.UnprocessableEntity(str(exc))
    # Any other ServiceError subclass → 400 Bad Request
    return api_errors.APIError(message=str(exc), status_code=400, code="bad_request")


class BaseService:
    """
    Base class for application services.

    Responsibilities
    ----------------
    * Provide the read-write unit of work.
    * Keep services thin, orchestration-only, no web leakage.

    Services never touch the global session directly; they go through a
    unit of work.
    """

    def rw_uow(self) -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork()
