"""Outcome of a property validation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .errors import PropertyError
from .exceptions import PropertyValidationError


class _NotAValue:
    """Marker for "validated, and there is no value"."""

    _instance: _NotAValue | None = None

    def __new__(cls) -> _NotAValue:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_A_VALUE"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _NotAValue:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _NotAValue:
        return self

    def __reduce__(self) -> str:
        return "NOT_A_VALUE"


NOT_A_VALUE = _NotAValue()


@dataclass
class PropertyResult:
    """Result of validating one property.

    A successful result holds the final value, which is ``NOT_A_VALUE`` when
    the property was absent and never declared. A failed result holds the
    ``PropertyError`` produced by the failing stage.
    """

    valid: bool
    value: Any = None
    error: PropertyError | None = None

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check validity."""
        return self.valid

    @property
    def is_absent(self) -> bool:
        """True when validation succeeded without producing a value."""
        return self.valid and self.value is NOT_A_VALUE

    def unwrap(self) -> Any:
        """Return the value, raising ``PropertyValidationError`` on failure."""
        if not self.valid:
            assert self.error is not None
            raise PropertyValidationError(self.error)
        return self.value

    @classmethod
    def success(cls, value: Any) -> PropertyResult:
        return cls(valid=True, value=value)

    @classmethod
    def failure(cls, error: PropertyError, value: Any = None) -> PropertyResult:
        """Create a failed result.

        Args:
            error: Error that caused the failure
            value: The value that failed validation

        Returns:
            Failed PropertyResult
        """
        return cls(valid=False, value=value, error=error)
