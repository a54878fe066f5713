"""API blueprint package aggregating versioned endpoints."""

from __future__ import annotations

from collections.abc import Iterable

from flask import Blueprint, Flask


def register_blueprint_group(
    app: Flask,
    *,
    base_prefix: str,
    entries: Iterable[tuple[Blueprint, str]],
) -> None:
    """Register related blueprints beneath a common prefix.

    Parameters
    ----------
    app:
        Application instance receiving the blueprints.
    base_prefix:
        Prefix applied to all entries, typically ``"/api/v1"``.
    entries:
        Iterable of ``(blueprint, relative_prefix)`` pairs. An empty relative
        prefix mounts the blueprint at the version root.
    """

    for bp, rel_prefix in entries:
        full_prefix = "/".join(
            segment for segment in [base_prefix.rstrip("/"), rel_prefix.strip("/")] if segment
        )
        full_prefix = "/" + full_prefix if not full_prefix.startswith("/") else full_prefix
        app.register_blueprint(bp, url_prefix=full_prefix)


def versioned_prefix(app: Flask) -> str:
    """Return the mount point of the current API version (``/api/v1``)."""
    from school_registry.api.v1 import API_VERSION

    return f"{app.config.get('API_BASE_PREFIX', '/api')}/{API_VERSION}"


def init_app(app: Flask) -> None:
    """Register the available API versions on the Flask app."""

    from school_registry.api.v1 import REGISTRY as V1_REGISTRY

    register_blueprint_group(app, base_prefix=versioned_prefix(app), entries=V1_REGISTRY)


__all__ = ["init_app", "register_blueprint_group", "versioned_prefix"]
