"""Type handler contract and a base class for handlers with bounds.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, NoReturn, Protocol, runtime_checkable

from docprop.exceptions import PropertyValidationError
from docprop.resolver import resolve
from docprop.utils import is_empty

if TYPE_CHECKING:
    from collections.abc import Awaitable

    from docprop.context import PropertyContext
    from docprop.errors import PropertyError


@runtime_checkable
class TypeHandler(Protocol):
    """Validates and coerces values of one data type.

    ``validate`` returns the (possibly coerced) value, either directly or as
    an awaitable. To reject the value it raises ``PropertyValidationError``.
    """

    def validate(self, context: PropertyContext) -> Any | Awaitable[Any]:
        ...


class BaseTypeHandler(ABC):
    """Handler skeleton: coerce, then check the schema bounds.

    Empty values pass through untouched so that optional, explicitly empty
    properties reach the later stages as they are. Subclasses implement
    ``coerce`` and switch on the bound checks that make sense for their type.
    """

    #: Check ``min_size``/``max_size`` against ``len(value)``
    sized: bool = False
    #: Check ``min_value``/``max_value`` against the value itself
    ordered: bool = False

    def validate(self, context: PropertyContext) -> Any:
        value = context.value
        if is_empty(value):
            return value

        value = self.coerce(value, context)
        if self.sized:
            self._check_size(value, context)
        if self.ordered:
            self._check_range(value, context)
        return value

    @abstractmethod
    def coerce(self, value: Any, context: PropertyContext) -> Any:
        """Convert a non-empty value to this handler's representation.

        Args:
            value: Value to coerce
            context: Context of the property under validation

        Returns:
            Coerced value

        Raises:
            PropertyValidationError: If the value cannot be represented
        """
        pass

    def reject(self, error: PropertyError) -> NoReturn:
        """Abort validation with the given error."""
        raise PropertyValidationError(error)

    def coerce_bound(self, bound: Any, context: PropertyContext) -> Any:
        """Convert a resolved bound so it compares with coerced values."""
        return bound

    def _check_size(self, value: Any, context: PropertyContext) -> None:
        schema = context.schema
        size = len(value)

        max_size = resolve(schema.max_size, context)
        if max_size is not None and size > max_size:
            self.reject(context.error.max_size)

        min_size = resolve(schema.min_size, context)
        if min_size is not None and size < min_size:
            self.reject(context.error.min_size)

    def _check_range(self, value: Any, context: PropertyContext) -> None:
        schema = context.schema

        max_value = resolve(schema.max_value, context)
        if max_value is not None and value > self.coerce_bound(max_value, context):
            self.reject(context.error.max_value)

        min_value = resolve(schema.min_value, context)
        if min_value is not None and value < self.coerce_bound(min_value, context):
            self.reject(context.error.min_value)
