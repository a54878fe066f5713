"""WSGI entry point: ``gunicorn -c gunicorn.conf.py`` or ``flask --app wsgi run``."""

from __future__ import annotations

import logging
import sys

from school_registry import create_app
from school_registry.core.config import ConfigError

try:
    app = create_app()
except ConfigError as exc:
    logging.basicConfig(level=logging.ERROR)
    logging.getLogger("school_registry.wsgi").error("startup.invalid_config %s", exc)
    sys.exit(1)
