"""Registry of type handlers keyed by schema type name.

Example:
    ```python
    from docprop.handlers import HandlerRegistry

    registry = HandlerRegistry.with_builtins()
    registry.register("email", EmailHandler())
    handler = registry.get("email")
    ```
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from docprop.exceptions import NotFoundError, OperationError

if TYPE_CHECKING:
    from .base import TypeHandler

logger = logging.getLogger(__name__)


class HandlerRegistry:
    """Thread-safe registry of type handlers.

    Args:
        name: Registry name for logging
    """

    def __init__(self, name: str = "handlers"):
        self._name = name
        self._items: dict[str, TypeHandler] = {}
        self._lock = threading.RLock()

    @classmethod
    def with_builtins(cls, name: str = "handlers") -> HandlerRegistry:
        """Create a registry holding the built-in handlers."""
        from .builtin import BUILTIN_HANDLERS

        registry = cls(name)
        for type_name, handler_cls in BUILTIN_HANDLERS.items():
            registry.register(type_name, handler_cls())
        return registry

    @property
    def name(self) -> str:
        return self._name

    def register(self, type_name: str, handler: TypeHandler, allow_overwrite: bool = False) -> None:
        """Register a handler for a type name.

        Args:
            type_name: Schema type name
            handler: Handler validating values of that type
            allow_overwrite: Whether to replace an existing handler

        Raises:
            OperationError: If a handler exists and allow_overwrite is False
        """
        with self._lock:
            if type_name in self._items:
                if not allow_overwrite:
                    raise OperationError(
                        f"Handler '{type_name}' already registered in {self._name}",
                        context={"type_name": type_name, "registry": self._name},
                    )
                logger.warning(
                    f"Handler '{type_name}' is already registered in {self._name}. "
                    f"Overwriting with {type(handler).__name__}"
                )
            self._items[type_name] = handler
            logger.debug(f"Registered handler: {type_name} -> {type(handler).__name__}")

    def unregister(self, type_name: str) -> TypeHandler:
        """Unregister and return a handler.

        Raises:
            NotFoundError: If no handler is registered for the type
        """
        with self._lock:
            if type_name not in self._items:
                raise NotFoundError(
                    f"Handler not found: {type_name}",
                    context={"type_name": type_name, "registry": self._name},
                )
            return self._items.pop(type_name)

    def get(self, type_name: str) -> TypeHandler:
        """Get the handler of a type.

        Raises:
            NotFoundError: If no handler is registered for the type
        """
        with self._lock:
            if type_name not in self._items:
                raise NotFoundError(
                    f"Handler not found: {type_name}",
                    context={
                        "type_name": type_name,
                        "registry": self._name,
                        "available_keys": list(self._items.keys()),
                    },
                )
            return self._items[type_name]

    def get_optional(self, type_name: str) -> TypeHandler | None:
        """Get the handler of a type, or None if not registered."""
        with self._lock:
            return self._items.get(type_name)

    def has(self, type_name: str) -> bool:
        with self._lock:
            return type_name in self._items

    def list_keys(self) -> list[str]:
        with self._lock:
            return list(self._items.keys())

    def count(self) -> int:
        with self._lock:
            return len(self._items)

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    def __contains__(self, type_name: object) -> bool:
        with self._lock:
            return type_name in self._items

    def __len__(self) -> int:
        return self.count()

    def __repr__(self) -> str:
        return f"HandlerRegistry(name={self._name!r}, types={self.list_keys()})"
