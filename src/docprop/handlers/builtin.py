"""Built-in type handlers.

Coercion rules follow a predictable pattern: a value already of the target
type is kept, common textual forms are parsed, anything else is rejected
with an ``INVALID_VALUE`` error.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from datetime import date, datetime, timezone
from typing import TYPE_CHECKING, Any

from docprop.exceptions import ConfigurationError

from .base import BaseTypeHandler

if TYPE_CHECKING:
    from docprop.context import PropertyContext


DATETIME_FORMATS = [
    '%Y-%m-%d %H:%M:%S',
    '%Y-%m-%dT%H:%M:%S',
    '%Y-%m-%dT%H:%M:%SZ',
    '%Y-%m-%dT%H:%M:%S.%f',
    '%Y-%m-%dT%H:%M:%S.%fZ',
    '%Y/%m/%d %H:%M:%S',
    '%Y/%m/%d',
    '%Y-%m-%d',
]

TRUE_STRINGS = ('true', '1', 'yes', 'y', 'on')
FALSE_STRINGS = ('false', '0', 'no', 'n', 'off')


class StringHandler(BaseTypeHandler):
    """Text values. Numbers are converted to their string form."""

    sized = True

    def coerce(self, value: Any, context: PropertyContext) -> str:
        if isinstance(value, str):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        self.reject(context.error.invalid_value)


class NumberHandler(BaseTypeHandler):
    """Integer or float values. Numeric strings are parsed."""

    ordered = True

    def coerce(self, value: Any, context: PropertyContext) -> int | float:
        if isinstance(value, bool):
            self.reject(context.error.invalid_value)

        if isinstance(value, str):
            text = value.strip()
            try:
                value = int(text)
            except ValueError:
                try:
                    value = float(text)
                except ValueError:
                    self.reject(context.error.invalid_value)

        if not isinstance(value, (int, float)):
            self.reject(context.error.invalid_value)

        # NaN never satisfies a comparison, so it can't be bounded
        if isinstance(value, float) and math.isnan(value):
            self.reject(context.error.invalid_value)
        return value


class IntegerHandler(NumberHandler):
    """Whole numbers. Floats are accepted only without a fractional part."""

    def coerce(self, value: Any, context: PropertyContext) -> int:
        number = super().coerce(value, context)
        if isinstance(number, float):
            if math.isinf(number) or number != int(number):
                self.reject(context.error.invalid_value)
            return int(number)
        return number


class BooleanHandler(BaseTypeHandler):
    """True/False values, parsing the usual textual spellings."""

    def coerce(self, value: Any, context: PropertyContext) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            text = value.strip().lower()
            if text in TRUE_STRINGS:
                return True
            if text in FALSE_STRINGS:
                return False
        elif isinstance(value, int) and value in (0, 1):
            return bool(value)
        self.reject(context.error.invalid_value)


class DateHandler(BaseTypeHandler):
    """Dates and datetimes.

    Strings are parsed with a list of common formats and then as ISO 8601;
    numbers are taken as Unix timestamps. Datetimes with an offset are
    converted to naive UTC so they compare with naive ones. Bounds are
    converted the same way before comparison.
    """

    ordered = True

    def coerce(self, value: Any, context: PropertyContext) -> datetime:
        parsed = self.parse(value)
        if parsed is None:
            self.reject(context.error.invalid_value)
        return parsed

    def coerce_bound(self, bound: Any, context: PropertyContext) -> datetime:
        parsed = self.parse(bound)
        if parsed is None:
            raise ConfigurationError(
                f"Invalid date bound for property '{context.property}': {bound!r}",
                context={"property": context.property, "bound": bound},
            )
        return parsed

    @classmethod
    def parse(cls, value: Any) -> datetime | None:
        parsed = cls._parse(value)
        if parsed is not None and parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
        return parsed

    @staticmethod
    def _parse(value: Any) -> datetime | None:
        if isinstance(value, datetime):
            return value
        if isinstance(value, date):
            return datetime(value.year, value.month, value.day)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            try:
                return datetime.fromtimestamp(value)
            except (OverflowError, OSError, ValueError):
                return None
        if not isinstance(value, str):
            return None

        for fmt in DATETIME_FORMATS:
            try:
                return datetime.strptime(value, fmt)
            except ValueError:
                continue

        try:
            return datetime.fromisoformat(value.replace('Z', '+00:00'))
        except ValueError:
            return None


class ListHandler(BaseTypeHandler):
    """Ordered collections. Tuples become lists; JSON arrays are parsed."""

    sized = True

    def coerce(self, value: Any, context: PropertyContext) -> list:
        if isinstance(value, list):
            return value
        if isinstance(value, tuple):
            return list(value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
            except json.JSONDecodeError:
                parsed = None
            if isinstance(parsed, list):
                return parsed
        self.reject(context.error.invalid_value)


class DictHandler(BaseTypeHandler):
    """Mappings. JSON objects are parsed."""

    sized = True

    def coerce(self, value: Any, context: PropertyContext) -> dict:
        if isinstance(value, dict):
            return value
        if isinstance(value, Mapping):
            return dict(value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
            except json.JSONDecodeError:
                parsed = None
            if isinstance(parsed, dict):
                return parsed
        self.reject(context.error.invalid_value)


BUILTIN_HANDLERS: dict[str, type[BaseTypeHandler]] = {
    "string": StringHandler,
    "number": NumberHandler,
    "integer": IntegerHandler,
    "boolean": BooleanHandler,
    "date": DateHandler,
    "list": ListHandler,
    "dict": DictHandler,
}
