"""docprop - per-property validation pipeline for schema-driven documents.

Validates one property at a time: resolves defaults, enforces not-null,
runs the type handler, checks allowed options, applies custom validators and
before/after converters.

Example:
    ```python
    from docprop import HandlerRegistry, PropertyContext, PropertySchema, Session

    session = Session(HandlerRegistry.with_builtins())
    schema = PropertySchema(type="number", not_null=True, max_value=100)
    context = PropertyContext({"age": "42"}, "42", "age", schema, session=session)

    result = await context.validate()
    result.value
    # 42
    ```
"""

from .chains import ConverterChain, ValidatorChain
from .context import PropertyContext
from .document import DocumentResult, DocumentValidator
from .errors import ErrorCode, ErrorHelper, PropertyError, create_error
from .exceptions import (
    ConfigurationError,
    DocpropError,
    HandlerNotFoundError,
    NotFoundError,
    OperationError,
    PropertyValidationError,
    SettingsError,
    ValidationError,
)
from .handlers import BaseTypeHandler, HandlerRegistry, TypeHandler
from .pipeline import PropertyPipeline, validate_property
from .resolver import Computed, computed, field_ref, resolve
from .result import NOT_A_VALUE, PropertyResult
from .schema import DocumentSchema, PropertySchema
from .session import Session
from .settings import ValidationSettings
from .utils import is_empty

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Pipeline
    "PropertyPipeline",
    "PropertyContext",
    "PropertyResult",
    "NOT_A_VALUE",
    "validate_property",
    # Documents
    "DocumentSchema",
    "PropertySchema",
    "DocumentValidator",
    "DocumentResult",
    # Collaborators
    "Session",
    "TypeHandler",
    "BaseTypeHandler",
    "HandlerRegistry",
    "ValidatorChain",
    "ConverterChain",
    "Computed",
    "computed",
    "field_ref",
    "resolve",
    "is_empty",
    # Errors
    "PropertyError",
    "ErrorCode",
    "ErrorHelper",
    "create_error",
    "DocpropError",
    "ValidationError",
    "ConfigurationError",
    "NotFoundError",
    "OperationError",
    "PropertyValidationError",
    "HandlerNotFoundError",
    "SettingsError",
    # Settings
    "ValidationSettings",
]
