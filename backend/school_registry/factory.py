"""Application factory wiring Flask extensions and blueprints."""

from __future__ import annotations

from flask import Flask

from school_registry.core import container
from school_registry.core.config import BaseConfig, get_config, validate_config
from school_registry.core.logger import configure_logging


def create_bare_app(config: str | type[BaseConfig] | object | None = None) -> Flask:
    """Build a Flask app holding only configuration, logging and the container.

    The remaining wiring (database, services, blueprints, error handlers) is
    left to the caller; :func:`create_app` performs all of it.

    :raises ConfigError: When the selected configuration is invalid.
    """

    app = Flask(__name__)
    app.config.from_object(get_config() if config is None else config)
    validate_config(app.config)
    configure_logging(app.config.get("LOG_LEVEL", "INFO"))
    container.init_app(app)
    return app


def create_app(config: str | type[BaseConfig] | object | None = None) -> Flask:
    """Build and configure the complete Flask application."""

    app = create_bare_app(config)

    # Proxy headers if running behind a reverse proxy
    from school_registry.core import proxy

    proxy.init_app(app)

    from school_registry.core import database

    database.init_app(app)

    from school_registry.core import logger

    logger.init_app(app)

    from school_registry.core import cors

    cors.init_app(app)

    from school_registry import services

    services.init_app(app)

    from school_registry import api

    api.init_app(app)

    from school_registry.core import errors

    errors.init_app(app)

    return app
