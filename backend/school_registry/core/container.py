"""
Dependency container for the application's composition root.

Services are registered under a *token* (usually the service class itself, or
a string such as :data:`school_registry.core.database.DATABASE`) together with
a :class:`Provider` describing how the instance is produced. Instances are
singletons per container; one container lives on each Flask application in
``app.extensions["container"]``.

Providers can be overridden before the application starts serving, which is
how tests substitute mocks for real services.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from flask import Flask, current_app

logger = logging.getLogger(__name__)

EXTENSION_KEY = "container"


class ProviderKind(str, Enum):
    """How a :class:`Provider` produces its instance."""

    VALUE = "value"
    CLASS = "class"
    FACTORY = "factory"


@dataclass(frozen=True, slots=True)
class Provider:
    """
    Tagged description of how to produce a dependency.

    :param kind: Which of the three provider shapes is active.
    :param target: The value itself, the class to construct or the factory
        callable, depending on ``kind``.
    :param inject: Tokens resolved from the container and passed positionally
        to the class or factory.
    """

    kind: ProviderKind
    target: Any
    inject: tuple[Any, ...] = ()

    @classmethod
    def value(cls, obj: Any) -> Provider:
        return cls(ProviderKind.VALUE, obj)

    @classmethod
    def use_class(cls, klass: type, inject: Iterable[Any] = ()) -> Provider:
        if not isinstance(klass, type):
            raise TypeError(f"use_class expects a class, got {klass!r}")
        return cls(ProviderKind.CLASS, klass, tuple(inject))

    @classmethod
    def factory(cls, fn: Callable[..., Any], inject: Iterable[Any] = ()) -> Provider:
        if not callable(fn):
            raise TypeError(f"factory expects a callable, got {fn!r}")
        return cls(ProviderKind.FACTORY, fn, tuple(inject))


class DependencyNotRegistered(LookupError):
    """Raised when resolving a token that has no provider."""


class CircularDependencyError(RuntimeError):
    """Raised when providers depend on each other in a cycle."""


def token_name(token: Any) -> str:
    """Return a readable label for ``token`` (class name or ``str``)."""
    return getattr(token, "__qualname__", None) or str(token)


class Container:
    """
    Token → provider registry with lazily created singleton instances.

    Features:
    - Three provider shapes (value, class, factory) behind one dispatch.
    - Explicit dependency injection via ``Provider.inject`` tokens.
    - Circular dependency detection.
    - Overrides that replace the provider and evict any cached instance.
    """

    def __init__(self) -> None:
        self._providers: dict[Any, Provider] = {}
        self._instances: dict[Any, Any] = {}
        self._resolving: list[Any] = []

    # ------------------------------------------------------------------ #
    # Registration
    # ------------------------------------------------------------------ #

    def register(self, token: Any, provider: Provider | None = None) -> Container:
        """Register ``provider`` for ``token`` (defaults to constructing ``token``)."""
        if provider is None:
            provider = Provider.use_class(token)
        self._providers[token] = provider
        self._instances.pop(token, None)
        logger.debug("container.register token=%s kind=%s", token_name(token), provider.kind.value)
        return self

    def override(self, token: Any, provider: Provider) -> Container:
        """Replace the provider for ``token``; later overrides win."""
        if token not in self._providers:
            logger.debug("container.override registering new token=%s", token_name(token))
        self._providers[token] = provider
        self._instances.pop(token, None)
        return self

    def has(self, token: Any) -> bool:
        return token in self._providers

    def tokens(self) -> list[Any]:
        return list(self._providers)

    # ------------------------------------------------------------------ #
    # Resolution
    # ------------------------------------------------------------------ #

    def resolve(self, token: Any) -> Any:
        """Return the singleton for ``token``, creating it on first use.

        :raises DependencyNotRegistered: When no provider exists.
        :raises CircularDependencyError: When ``token`` is already being built.
        """
        if token in self._instances:
            return self._instances[token]
        provider = self._providers.get(token)
        if provider is None:
            raise DependencyNotRegistered(f"Dependency '{token_name(token)}' is not registered")
        if token in self._resolving:
            chain = " -> ".join(token_name(t) for t in [*self._resolving, token])
            raise CircularDependencyError(f"Circular dependency detected: {chain}")

        self._resolving.append(token)
        try:
            instance = self._build(provider)
        finally:
            self._resolving.pop()
        self._instances[token] = instance
        return instance

    def resolve_optional(self, token: Any) -> Any | None:
        """Return the instance for ``token`` or ``None`` when it is not wired."""
        if token not in self._providers:
            return None
        return self.resolve(token)

    def instantiate_all(self) -> None:
        """Eagerly build every registered provider, surfacing wiring errors early."""
        for token in list(self._providers):
            self.resolve(token)

    def _build(self, provider: Provider) -> Any:
        if provider.kind is ProviderKind.VALUE:
            return provider.target
        args = [self.resolve(dep) for dep in provider.inject]
        # CLASS and FACTORY only differ in intent; both are called with the
        # resolved dependencies.
        return provider.target(*args)


def init_app(app: Flask) -> Container:
    """Attach a fresh :class:`Container` to ``app``."""
    container = Container()
    app.extensions[EXTENSION_KEY] = container
    return container


def get_container(app: Flask | None = None) -> Container:
    """Return the container bound to ``app`` (or the current application)."""
    target = app if app is not None else current_app
    try:
        return target.extensions[EXTENSION_KEY]
    except KeyError as exc:
        raise RuntimeError("Dependency container is not initialized. Call init_app() first.") from exc
