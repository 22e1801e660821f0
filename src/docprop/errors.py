"""Structured property errors and the constructors that build them.

Errors are plain immutable values. Handlers and custom validators build them
through ``ErrorHelper`` (available as ``context.error``), which binds the
property name once so call sites only pick the classification:

```python
def check_adult(context):
    if context.value < 18:
        return context.error.min_value
    return None
```
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Canonical error classifications."""

    NOT_NULL = "NOT_NULL"
    INVALID_VALUE = "INVALID_VALUE"
    MAX_SIZE = "MAX_SIZE"
    MIN_SIZE = "MIN_SIZE"
    MAX_VALUE = "MAX_VALUE"
    MIN_VALUE = "MIN_VALUE"
    CUSTOM = "CUSTOM"


_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.NOT_NULL: "Value must be provided",
    ErrorCode.INVALID_VALUE: "Invalid value",
    ErrorCode.MAX_SIZE: "Value is longer than the maximum size",
    ErrorCode.MIN_SIZE: "Value is shorter than the minimum size",
    ErrorCode.MAX_VALUE: "Value is greater than the maximum value",
    ErrorCode.MIN_VALUE: "Value is less than the minimum value",
}


@dataclass(frozen=True)
class PropertyError:
    """Error raised against a single property.

    Attributes:
        property: Name or path of the offending property
        code: Error classification code
        message: Human-readable message
    """

    property: str
    code: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary."""
        return {"property": self.property, "code": self.code, "message": self.message}


def create_error(property: str, message: str | None = None, code: str | None = None) -> PropertyError:
    """Create an error for a property.

    Args:
        property: Property name or path
        message: Optional message. Falls back to the code when omitted.
        code: Optional code. Falls back to ``CUSTOM`` when omitted.

    Returns:
        New PropertyError
    """
    code_value = code.value if isinstance(code, ErrorCode) else code
    if message is None:
        message = code_value or _MESSAGES[ErrorCode.INVALID_VALUE]
    return PropertyError(
        property=property,
        code=code_value or ErrorCode.CUSTOM.value,
        message=message,
    )


def _classified(property: str, code: ErrorCode) -> PropertyError:
    return PropertyError(property=property, code=code.value, message=_MESSAGES[code])


def not_null(property: str) -> PropertyError:
    return _classified(property, ErrorCode.NOT_NULL)


def invalid_value(property: str) -> PropertyError:
    return _classified(property, ErrorCode.INVALID_VALUE)


def max_size(property: str) -> PropertyError:
    return _classified(property, ErrorCode.MAX_SIZE)


def min_size(property: str) -> PropertyError:
    return _classified(property, ErrorCode.MIN_SIZE)


def max_value(property: str) -> PropertyError:
    return _classified(property, ErrorCode.MAX_VALUE)


def min_value(property: str) -> PropertyError:
    return _classified(property, ErrorCode.MIN_VALUE)


@dataclass(frozen=True)
class ErrorHelper:
    """Error constructors bound to one property."""

    property: str

    def as_error(self, message: str | None = None, code: str | None = None) -> PropertyError:
        """Create an error with a custom message and code."""
        return create_error(self.property, message, code)

    def as_code(self, code: str) -> PropertyError:
        """Create an error identified by its code only."""
        return create_error(self.property, None, code)

    @property
    def not_null(self) -> PropertyError:
        return not_null(self.property)

    @property
    def invalid_value(self) -> PropertyError:
        return invalid_value(self.property)

    @property
    def max_size(self) -> PropertyError:
        return max_size(self.property)

    @property
    def min_size(self) -> PropertyError:
        return min_size(self.property)

    @property
    def max_value(self) -> PropertyError:
        return max_value(self.property)

    @property
    def min_value(self) -> PropertyError:
        return min_value(self.property)
