"""Application settings with environment-based simple classes."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any, Final

from dotenv import load_dotenv
from marshmallow import Schema, ValidationError, fields, validate

# Public selector env var (keep neutral name to avoid collisions)
ENV_VAR: Final[str] = "APP_ENV"  # 'development' | 'testing' | 'production'


# Load .env in development (no-op when missing)
load_dotenv()


def env_bool(name: str, default: bool = False) -> bool:
    """Parse a boolean flag from an environment variable.

    Parameters
    ----------
    name: str
        Environment variable to inspect.
    default: bool, optional
        Value returned when the variable is unset. Defaults to ``False``.

    Returns
    -------
    bool
        ``True`` if the value resembles ``{"1", "true", "yes", "y", "on"}``
        ignoring case; otherwise ``False`` or ``default`` when missing.
    """
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "y", "on"}


def database_uri(prefix: str = "", default: str | None = None) -> str | None:
    """Return a database URI from ``DATABASE_URL`` or discrete ``DB_*`` parts.

    ``prefix`` selects an alternate variable family (``"TEST_"`` reads
    ``TEST_DATABASE_URL`` and ``TEST_DB_*`` first, then the plain names).
    """
    url = os.getenv(f"{prefix}DATABASE_URL")
    if url:
        return url

    def part(name: str, fallback: str | None = None) -> str | None:
        return os.getenv(f"{prefix}{name}") or os.getenv(name) or fallback

    user = part("DB_USER")
    password = part("DB_PASSWORD")
    name = part("DB_NAME")
    if not (user and password and name):
        return default
    if prefix and not os.getenv(f"{prefix}DB_NAME"):
        name = f"{name}_test"
    host = part("DB_HOST", "localhost")
    port = part("DB_PORT", "5432")
    return f"postgresql+psycopg://{user}:{password}@{host}:{port}/{name}"


class BaseConfig:
    """Base configuration shared across environments.

    Attributes
    ----------
    API_BASE_PREFIX: str
        Root path for registering API blueprints.
    SECRET_KEY: str
        Flask secret used for session signing.
    SQLALCHEMY_DATABASE_URI: str | None
        Database connection string consumed by SQLAlchemy. Built from
        ``DATABASE_URL`` or the ``DB_HOST``/``DB_PORT``/``DB_USER``/
        ``DB_PASSWORD``/``DB_NAME`` family.
    SQLALCHEMY_ECHO: bool
        When ``True`` SQLAlchemy logs SQL statements for debugging.
    DB_CREATE_ALL: bool
        Create missing tables when the database is wired (tests, local runs).
    REQUIRE_DATABASE_SETTINGS: bool
        Refuse to start without an explicit database configuration.
    LOG_LEVEL: str
        Root logging verbosity (``INFO`` by default).
    CORS_ORIGINS: str
        Comma-separated list of allowed origins for CORS.
    """

    API_BASE_PREFIX = "/api"

    SECRET_KEY = os.getenv("SECRET_KEY", "CHANGE_ME")

    # DB
    SQLALCHEMY_DATABASE_URI = database_uri() or "sqlite:///./dev.db"
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ECHO = env_bool("SQLALCHEMY_ECHO", False)
    DB_CREATE_ALL = env_bool("DB_CREATE_ALL", False)
    REQUIRE_DATABASE_SETTINGS = False

    # Flask & JSON
    JSON_SORT_KEYS = False
    PROPAGATE_EXCEPTIONS = False

    # Logging & CORS
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:5173")

    # Flask built-ins
    DEBUG = False
    TESTING = False


class DevelopmentConfig(BaseConfig):
    """Configuration tailored for local development."""

    DEBUG = env_bool("FLASK_DEBUG", True)
    DB_CREATE_ALL = env_bool("DB_CREATE_ALL", True)
    CORS_MAX_AGE = 600  # 10 minutes


class TestingConfig(BaseConfig):
    """Configuration for automated test runs.

    Notes
    -----
    - Forces ``TESTING`` mode and disables debug logs.
    - Uses an in-memory SQLite database unless ``TEST_DATABASE_URL`` or the
      ``TEST_DB_*`` variables are set.
    - Creates the schema on startup so each built application is usable.
    """

    TESTING = True
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = database_uri("TEST_", default="sqlite:///:memory:")
    DB_CREATE_ALL = True
    PROPAGATE_EXCEPTIONS = True
    USE_PROXYFIX = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")


class ProductionConfig(BaseConfig):
    """Configuration defaults for production deployments."""

    DEBUG = False
    SQLALCHEMY_ECHO = False
    SQLALCHEMY_DATABASE_URI = database_uri()
    PROPAGATE_EXCEPTIONS = False
    REQUIRE_DATABASE_SETTINGS = True


# Map names -> classes (simple, explicit)
CONFIG_MAP: Mapping[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def get_config() -> type[BaseConfig]:
    """Return the configuration class inferred from ``APP_ENV``.

    Falls back to :class:`DevelopmentConfig` when ``APP_ENV`` is unset or
    unknown.
    """
    name = os.getenv(ENV_VAR, "development").strip().lower()
    return CONFIG_MAP.get(name, DevelopmentConfig)


class ConfigError(RuntimeError):
    """Raised when the loaded configuration cannot run the application."""

    def __init__(self, errors: Mapping[str, Any]) -> None:
        self.errors = dict(errors)
        summary = "; ".join(f"{key}: {value}" for key, value in sorted(self.errors.items()))
        super().__init__(f"Invalid configuration: {summary}")


class SettingsSchema(Schema):
    """Validate the subset of settings the application relies on at startup."""

    SQLALCHEMY_DATABASE_URI = fields.String(
        required=True,
        allow_none=False,
        validate=validate.Length(min=1),
        error_messages={
            "required": "database settings are required (DATABASE_URL or DB_USER/DB_PASSWORD/DB_NAME)",
            "null": "database settings are required (DATABASE_URL or DB_USER/DB_PASSWORD/DB_NAME)",
        },
    )
    API_BASE_PREFIX = fields.String(validate=validate.Regexp(r"^(/[\w.-]+)*$"))
    LOG_LEVEL = fields.String(
        validate=validate.OneOf(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    )


def validate_config(config: Mapping[str, Any]) -> None:
    """Validate ``config`` eagerly, raising :class:`ConfigError` on problems.

    Only enforces the database settings when ``REQUIRE_DATABASE_SETTINGS`` is
    set; other environments fall back to SQLite defaults.
    """
    data = {
        "API_BASE_PREFIX": config.get("API_BASE_PREFIX", ""),
        "LOG_LEVEL": str(config.get("LOG_LEVEL", "INFO")).upper(),
    }
    uri = config.get("SQLALCHEMY_DATABASE_URI")
    if uri is not None or config.get("REQUIRE_DATABASE_SETTINGS"):
        data["SQLALCHEMY_DATABASE_URI"] = uri
    partial = not config.get("REQUIRE_DATABASE_SETTINGS")
    try:
        SettingsSchema().load(data, partial=partial)
    except ValidationError as exc:
        raise ConfigError(exc.normalized_messages()) from exc
