"""Property validation pipeline.

Validates one property at a time through a fixed sequence of stages:

1. default value resolution
2. not-null check
3. undeclared short-circuit (returns ``NOT_A_VALUE``)
4. type handler lookup
5. "before" converters
6. type handler validation
7. options membership
8. custom validators
9. "after" converters

Each stage reads ``context.value`` and replaces it with its output. Data
errors end the run with a failed ``PropertyResult``; a schema type without a
registered handler raises ``HandlerNotFoundError`` instead.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from .chains import ConverterChain, ValidatorChain
from .exceptions import ConfigurationError, HandlerNotFoundError, PropertyValidationError
from .resolver import resolve
from .result import NOT_A_VALUE, PropertyResult
from .utils import is_empty

if TYPE_CHECKING:
    from .context import PropertyContext
    from .handlers.base import TypeHandler

logger = logging.getLogger(__name__)


async def _settle(result: Any) -> Any:
    if inspect.isawaitable(result):
        return await result
    return result


class PropertyPipeline:
    """Runs the validation stages for a property context.

    The pipeline holds no per-property state, so one instance can validate
    any number of contexts, concurrently included.

    Args:
        validators: Builds the custom validator chain of a context
        before: Builds the converter chain run before type validation
        after: Builds the converter chain run after all checks
    """

    def __init__(
        self,
        validators: Callable[[PropertyContext], ValidatorChain] = ValidatorChain.for_context,
        before: Callable[[PropertyContext], ConverterChain] = ConverterChain.before,
        after: Callable[[PropertyContext], ConverterChain] = ConverterChain.after,
    ):
        self._validators = validators
        self._before = before
        self._after = after

    async def validate(self, context: PropertyContext) -> PropertyResult:
        """Validate the property described by the context.

        Args:
            context: Context of the property; its ``value`` is updated in place

        Returns:
            Success with the final value (``NOT_A_VALUE`` when the property
            is absent and undeclared), or failure with the first error

        Raises:
            HandlerNotFoundError: If no handler is registered for the type
        """
        context.value = self._default_value(context)

        if self._violates_not_null(context):
            logger.debug(f"Property '{context.property}' is empty but required")
            return PropertyResult.failure(context.error.not_null, context.value)

        if is_empty(context.value) and context.property_not_declared:
            logger.debug(f"Property '{context.property}' not declared, skipping")
            return PropertyResult.success(NOT_A_VALUE)

        handler = self._get_handler(context)

        try:
            context.value = await _settle(self._before(context).run(context))
            context.value = await _settle(handler.validate(context))

            if not self._in_options(context):
                return PropertyResult.failure(context.error.invalid_value, context.value)

            error = self._validators(context).run(context)
            if error is not None:
                return PropertyResult.failure(error, context.value)

            context.value = await _settle(self._after(context).run(context))
        except PropertyValidationError as e:
            logger.debug(f"Property '{context.property}' rejected: {e.error.code}")
            return PropertyResult.failure(e.error, context.value)

        return PropertyResult.success(context.value)

    async def validate_or_raise(self, context: PropertyContext) -> Any:
        """Validate and return the final value.

        Raises:
            PropertyValidationError: If the property fails validation
            HandlerNotFoundError: If no handler is registered for the type
        """
        result = await self.validate(context)
        return result.unwrap()

    def _default_value(self, context: PropertyContext) -> Any:
        if not is_empty(context.value):
            return context.value

        default = context.schema.default_value
        if default is not None:
            return resolve(default, context)

        return context.value

    def _violates_not_null(self, context: PropertyContext) -> bool:
        return resolve(context.schema.not_null, context) is True and is_empty(context.value)

    def _get_handler(self, context: PropertyContext) -> TypeHandler:
        type_name = context.schema.type
        session = context.session
        if session is None:
            raise ConfigurationError(
                f"No session to look up handler for type '{type_name}'",
                context={"property": context.property, "type_name": type_name},
            )

        handler = session.get_handler(type_name)
        if handler is None:
            registry = getattr(session, "registry", None)
            available = registry.list_keys() if registry is not None else []
            logger.error(f"Handler not found for type '{type_name}' (property '{context.property}')")
            raise HandlerNotFoundError(type_name, available)
        return handler

    def _in_options(self, context: PropertyContext) -> bool:
        if context.schema.options is None:
            return True

        options = resolve(context.schema.options, context)
        if options is None:
            return True
        value = context.value
        # bool is an int subclass; True must not match 1
        return any(
            option == value and isinstance(option, bool) == isinstance(value, bool)
            for option in options
        )


async def validate_property(context: PropertyContext) -> PropertyResult:
    """Validate a context with a default pipeline."""
    return await PropertyPipeline().validate(context)
