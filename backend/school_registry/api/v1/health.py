"""Health check endpoint."""

from __future__ import annotations

from flask import Blueprint, current_app
from sqlalchemy.exc import SQLAlchemyError

from school_registry.api.deps import json_response, timing
from school_registry.core.container import get_container
from school_registry.core.database import DATABASE

bp = Blueprint("health", __name__)


@bp.get("/health")
@timing
def healthcheck():
    """Return application and database health information."""

    database = get_container().resolve_optional(DATABASE)
    if database is None:
        db_status = "absent"
    else:
        try:
            database.ping()
            db_status = "ok"
        except SQLAlchemyError:
            current_app.logger.exception("healthcheck.db_error")
            db_status = "fail"
    payload = {
        "status": "ok",
        "db": db_status,
        "version": current_app.config.get("APP_VERSION", "dev"),
    }
    return json_response(payload)
