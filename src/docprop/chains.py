"""Custom validator and converter chains.

Both chains are built from the callables listed on a property schema.

Validators are synchronous business rules::

    def no_admins(context):
        if context.value == "admin":
            return context.error.as_error("Reserved name", "RESERVED")
        return None

Converters transform the value and may be coroutines::

    async def lookup_id(context):
        users = context.session.get_service("users")
        return await users.find_id(context.value)
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import TYPE_CHECKING, Any, Union

from .errors import PropertyError
from .exceptions import OperationError

if TYPE_CHECKING:
    from .context import PropertyContext

logger = logging.getLogger(__name__)

Validator = Callable[["PropertyContext"], Union[PropertyError, bool, None]]
Converter = Callable[["PropertyContext"], Union[Any, Awaitable[Any]]]


class ValidatorChain:
    """Runs custom validators in order; the first failure wins.

    A validator passes by returning ``None`` or ``True``. It fails by
    returning a ``PropertyError``, which is reported verbatim, or ``False``,
    which is reported as the property's invalid-value error.
    """

    def __init__(self, validators: Iterable[Validator] = ()):
        self.validators = list(validators)

    @classmethod
    def for_context(cls, context: PropertyContext) -> ValidatorChain:
        return cls(context.schema.validators)

    def run(self, context: PropertyContext) -> PropertyError | None:
        """Run the chain against the context.

        Returns:
            The first error produced, or None if every validator passed

        Raises:
            OperationError: If a validator returns something else than an
                error, a boolean or None
        """
        for validator in self.validators:
            outcome = validator(context)
            if outcome is None or outcome is True:
                continue
            if outcome is False:
                return context.error.invalid_value
            if isinstance(outcome, PropertyError):
                logger.debug(f"Validator {_name(validator)} rejected '{context.property}': {outcome.code}")
                return outcome
            raise OperationError(
                f"Validator {_name(validator)} returned an unsupported result",
                context={"property": context.property, "result_type": type(outcome).__name__},
            )
        return None


class ConverterChain:
    """Runs converters in order, each seeing the previous output.

    With no converters the chain returns the current value unchanged.
    """

    def __init__(self, converters: Iterable[Converter] = ()):
        self.converters = list(converters)

    @classmethod
    def before(cls, context: PropertyContext) -> ConverterChain:
        return cls(context.schema.before)

    @classmethod
    def after(cls, context: PropertyContext) -> ConverterChain:
        return cls(context.schema.after)

    async def run(self, context: PropertyContext) -> Any:
        """Apply the converters and return the converted value."""
        for converter in self.converters:
            result = converter(context)
            if inspect.isawaitable(result):
                result = await result
            context.value = result
        return context.value


def _name(fn: Callable[..., Any]) -> str:
    return getattr(fn, "__name__", type(fn).__name__)
