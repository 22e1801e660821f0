"""Exception hierarchy for docprop.

Data-validation failures are not exceptions: the pipeline returns them as
``PropertyError`` values inside a ``PropertyResult``. Exceptions are used for
two things only:

- ``PropertyValidationError`` lets a type handler or converter reject a value
  from deep inside its own code. The pipeline catches it and turns it into a
  failure result carrying the same ``PropertyError``.
- ``ConfigurationError`` and its subclasses signal a broken setup (for
  example a schema naming a type that has no registered handler). These are
  never caught by the pipeline.

Example:
    ```python
    from docprop.exceptions import DocpropError, HandlerNotFoundError

    try:
        result = await pipeline.validate(context)
    except HandlerNotFoundError as e:
        logger.error(f"Schema/registry mismatch: {e}")
        logger.error(f"Known types: {e.available}")
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from docprop.errors import PropertyError


class DocpropError(Exception):
    """Base exception for all docprop errors.

    Attributes:
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context
        details: Alternative to context (takes precedence if both are given)
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.context = details or context or {}
        self.details = self.context


class ValidationError(DocpropError):
    """Raised when data fails validation."""

    pass


class ConfigurationError(DocpropError):
    """Raised when configuration is invalid or inconsistent.

    Configuration errors describe a broken schema, registry or settings file,
    never a bad value in a document.
    """

    pass


class NotFoundError(DocpropError):
    """Raised when a requested item is not found."""

    pass


class OperationError(DocpropError):
    """Raised when an operation cannot be carried out."""

    pass


class PropertyValidationError(ValidationError):
    """Carries a ``PropertyError`` out of a handler or converter.

    Raise this from a type handler or converter to reject the value. The
    pipeline reports ``error`` unchanged.
    """

    def __init__(self, error: PropertyError):
        self.error = error
        super().__init__(
            f"Property '{error.property}': {error.message}",
            context={"property": error.property, "code": error.code},
        )


class HandlerNotFoundError(ConfigurationError):
    """Raised when no type handler is registered for a schema type."""

    def __init__(self, type_name: str, available: list[str] | None = None):
        self.type_name = type_name
        self.available = available or []
        super().__init__(
            f"Handler not found for type '{type_name}'",
            context={"type_name": type_name, "available": self.available},
        )


class SettingsError(ConfigurationError):
    """Raised when validation settings cannot be loaded."""

    pass


__all__ = [
    "DocpropError",
    "ValidationError",
    "ConfigurationError",
    "NotFoundError",
    "OperationError",
    "PropertyValidationError",
    "HandlerNotFoundError",
    "SettingsError",
]
