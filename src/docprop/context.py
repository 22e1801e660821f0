"""Per-property validation context.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .errors import ErrorHelper

if TYPE_CHECKING:
    from collections.abc import MutableMapping

    from .result import PropertyResult
    from .schema import DocumentSchema, PropertySchema
    from .session import Session


class PropertyContext:
    """State of one property validation.

    A context is built by the caller for a single property, handed to the
    pipeline, and dropped afterwards. Pipeline stages read ``value`` and
    replace it with their output; all other attributes stay fixed.

    Attributes:
        doc: Document being validated
        value: Value under validation, updated by each stage
        property: Name or path of the property
        schema: Schema of the property
        doc_schema: Schema of the whole document
        property_not_declared: True when the input never set the property
        session: Session giving access to handlers and services
        error: Error constructors bound to ``property``
    """

    def __init__(
        self,
        doc: MutableMapping[str, Any] | None,
        value: Any,
        property: str,
        schema: PropertySchema,
        doc_schema: DocumentSchema | None = None,
        property_not_declared: bool = False,
        session: Session | None = None,
    ):
        self.doc = doc
        self.value = value
        self.property = property
        self.schema = schema
        self.doc_schema = doc_schema
        self.property_not_declared = bool(property_not_declared)
        self.session = session
        self.error = ErrorHelper(property)

    async def validate(self) -> PropertyResult:
        """Validate this context with the default pipeline."""
        from .pipeline import PropertyPipeline

        return await PropertyPipeline().validate(self)

    def __repr__(self) -> str:
        return (
            f"PropertyContext(property={self.property!r}, type={self.schema.type!r}, "
            f"value={self.value!r}, not_declared={self.property_not_declared})"
        )
