"""Document-level validation built on the property pipeline.

Every property of the document schema gets its own ``PropertyContext`` and
is validated concurrently with the others. Data errors are collected; a
configuration error (such as an unknown type) aborts the whole validation.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .context import PropertyContext
from .errors import PropertyError, invalid_value
from .pipeline import PropertyPipeline
from .result import NOT_A_VALUE, PropertyResult
from .settings import ValidationSettings

if TYPE_CHECKING:
    from collections.abc import MutableMapping

    from .schema import DocumentSchema
    from .session import Session

logger = logging.getLogger(__name__)


@dataclass
class DocumentResult:
    """Outcome of validating a whole document.

    Attributes:
        valid: True when no property produced an error
        values: Final value of each property that has one
        errors: Property errors, in schema order
    """

    valid: bool
    values: dict[str, Any] = field(default_factory=dict)
    errors: list[PropertyError] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.valid

    def errors_for(self, property: str) -> list[PropertyError]:
        return [e for e in self.errors if e.property == property]

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "values": self.values,
            "errors": [e.to_dict() for e in self.errors],
        }


class DocumentValidator:
    """Validates documents against a document schema.

    Args:
        schema: Schema of the documents
        session: Session providing type handlers
        settings: Validation settings (defaults when omitted)
        pipeline: Pipeline used for each property
    """

    def __init__(
        self,
        schema: DocumentSchema,
        session: Session,
        settings: ValidationSettings | None = None,
        pipeline: PropertyPipeline | None = None,
    ):
        self.schema = schema
        self.session = session
        self.settings = settings or ValidationSettings()
        self.pipeline = pipeline or PropertyPipeline()

    async def validate(self, doc: MutableMapping[str, Any]) -> DocumentResult:
        """Validate every schema property of a document.

        Args:
            doc: Document to validate. Handlers and validators may read it.

        Returns:
            DocumentResult with final values and collected errors

        Raises:
            ConfigurationError: If the schema and handler registry disagree
        """
        semaphore = asyncio.Semaphore(self.settings.max_concurrency)
        names = list(self.schema.properties)

        async def _validate_one(name: str) -> PropertyResult:
            context = PropertyContext(
                doc=doc,
                value=doc.get(name),
                property=name,
                schema=self.schema.properties[name],
                doc_schema=self.schema,
                property_not_declared=name not in doc,
                session=self.session,
            )
            async with semaphore:
                return await self.pipeline.validate(context)

        tasks = [asyncio.ensure_future(_validate_one(name)) for name in names]
        try:
            results = await asyncio.gather(*tasks)
        except BaseException:
            # A configuration fault halts the whole document
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        values: dict[str, Any] = {}
        errors: list[PropertyError] = []
        for name, result in zip(names, results):
            if not result.valid:
                assert result.error is not None
                errors.append(result.error)
            elif result.value is not NOT_A_VALUE:
                values[name] = result.value

        if self.schema.strict or self.settings.strict_documents:
            for name in doc:
                if name not in self.schema:
                    errors.append(invalid_value(name))

        if errors:
            logger.debug(f"Document failed {self.schema.name}: {len(errors)} error(s)")
        return DocumentResult(valid=not errors, values=values, errors=errors)
