"""Property and document schema definitions.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field as dataclass_field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator

    from docprop.chains import Converter, Validator


@dataclass
class PropertySchema:
    """Schema for a single property.

    Every constraint attribute may hold a literal or a ``Computed``
    expression; the pipeline and handlers resolve them against the context.

    Attributes:
        type: Name of the type handler that validates the value
        not_null: Whether an empty value is rejected
        default_value: Value adopted when the input is empty
        options: Collection the final value must belong to
        max_size: Maximum length of strings and collections
        min_size: Minimum length of strings and collections
        max_value: Maximum value of numbers and dates
        min_value: Minimum value of numbers and dates
        validators: Custom business-rule validators, run after type validation
        before: Converters applied before type validation
        after: Converters applied once every check has passed
        description: Free-form description
    """

    type: str
    not_null: Any = False
    default_value: Any = None
    options: Any = None
    max_size: Any = None
    min_size: Any = None
    max_value: Any = None
    min_value: Any = None
    validators: list[Validator] = dataclass_field(default_factory=list)
    before: list[Converter] = dataclass_field(default_factory=list)
    after: list[Converter] = dataclass_field(default_factory=list)
    description: str | None = None

    def add_validator(self, validator: Validator) -> PropertySchema:
        """Append a custom validator (fluent API)."""
        self.validators.append(validator)
        return self

    def convert_before(self, converter: Converter) -> PropertySchema:
        """Append a converter run before type validation (fluent API)."""
        self.before.append(converter)
        return self

    def convert_after(self, converter: Converter) -> PropertySchema:
        """Append a converter run after all checks pass (fluent API)."""
        self.after.append(converter)
        return self


class DocumentSchema:
    """Schema for a whole document: an ordered set of property schemas.

    Provides a chainable interface in the same spirit as the property schema
    so document schemas can be assembled in code.
    """

    def __init__(self, name: str, strict: bool = False):
        """Initialize schema.

        Args:
            name: Schema name for identification
            strict: If True, properties missing from the schema are rejected
        """
        self.name = name
        self.strict = strict
        self.properties: dict[str, PropertySchema] = {}

    def property(self, name: str, schema: PropertySchema | None = None, **kwargs: Any) -> DocumentSchema:
        """Add a property definition (fluent API).

        Args:
            name: Property name
            schema: Property schema. Built from ``kwargs`` when omitted.
            **kwargs: PropertySchema attributes

        Returns:
            Self for chaining
        """
        if schema is None:
            schema = PropertySchema(**kwargs)
        self.properties[name] = schema
        return self

    def get(self, name: str) -> PropertySchema | None:
        return self.properties.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self.properties

    def __iter__(self) -> Iterator[str]:
        return iter(self.properties)

    def __len__(self) -> int:
        return len(self.properties)
