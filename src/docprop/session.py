"""Validation session: type handlers plus session-scoped services.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .handlers.registry import HandlerRegistry

if TYPE_CHECKING:
    from .handlers.base import TypeHandler
    from .settings import ValidationSettings

logger = logging.getLogger(__name__)


class Session:
    """Gives pipeline stages access to handlers and shared services.

    Args:
        registry: Handler registry. An empty registry is used when omitted.
        services: Named services available to handlers and validators
            (database handles, lookup tables, the current user...)
    """

    def __init__(
        self,
        registry: HandlerRegistry | None = None,
        services: dict[str, Any] | None = None,
    ):
        self.registry = registry if registry is not None else HandlerRegistry()
        self.services: dict[str, Any] = dict(services or {})

    @classmethod
    def from_settings(cls, settings: ValidationSettings, services: dict[str, Any] | None = None) -> Session:
        """Create a session configured by validation settings.

        Also applies ``settings.log_level`` to the ``docprop`` logger.
        """
        settings.configure_logging()
        if settings.builtin_handlers:
            registry = HandlerRegistry.with_builtins()
        else:
            registry = HandlerRegistry()
        logger.debug(f"Created session with handlers: {registry.list_keys()}")
        return cls(registry, services)

    def get_handler(self, type_name: str) -> TypeHandler | None:
        """Return the handler of a type, or None when the type is unknown."""
        return self.registry.get_optional(type_name)

    def get_service(self, name: str, default: Any = None) -> Any:
        return self.services.get(name, default)
