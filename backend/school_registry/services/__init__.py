"""Service layer public API and container registration."""

from __future__ import annotations

from flask import Flask

from school_registry.core.container import get_container

from ._shared.base import BaseService, translate_service_error
from .school_service import SchoolService
from .teacher_service import TeacherService


def init_app(app: Flask) -> None:
    """Register the application services in ``app``'s container."""
    container = get_container(app)
    container.register(SchoolService)
    container.register(TeacherService)


__all__ = [
    "BaseService",
    "SchoolService",
    "TeacherService",
    "init_app",
    "translate_service_error",
]
