"""Resolution of schema expressions that may be literal or computed.

Schema attributes such as ``default_value``, ``not_null`` or ``options`` can
hold either a plain value or a ``Computed`` expression. Only ``Computed``
instances are evaluated; any other object, callables included, is returned
unchanged.

Example:
    ```python
    from docprop.resolver import Computed, field_ref

    schema = PropertySchema(
        type="string",
        not_null=Computed(lambda ctx: ctx.doc.get("kind") == "person"),
        default_value=field_ref("nickname"),
    )
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from docprop.context import PropertyContext


@dataclass(frozen=True)
class Computed:
    """Expression evaluated against the current property context."""

    fn: Callable[[PropertyContext], Any]
    name: str | None = None

    def __call__(self, context: PropertyContext) -> Any:
        return self.fn(context)

    def __repr__(self) -> str:
        return f"Computed({self.name or getattr(self.fn, '__name__', 'fn')})"


def computed(fn: Callable[[PropertyContext], Any]) -> Computed:
    """Decorator marking a function as a computed expression."""
    return Computed(fn, name=getattr(fn, "__name__", None))


def field_ref(name: str, default: Any = None) -> Computed:
    """Build an expression that reads a sibling field of the document.

    Args:
        name: Field name in the document
        default: Value used when the document has no such field

    Returns:
        Computed expression
    """
    def _read(context: PropertyContext) -> Any:
        doc = context.doc
        if doc is None:
            return default
        return doc.get(name, default)

    return Computed(_read, name=f"field_ref:{name}")


def resolve(expression: Any, context: PropertyContext) -> Any:
    """Produce the concrete value of an expression.

    Args:
        expression: Literal value or ``Computed`` expression
        context: Context the expression is evaluated against

    Returns:
        The literal itself, or the result of evaluating the expression
    """
    if isinstance(expression, Computed):
        return expression(context)
    return expression


def resolve_all(expressions: Mapping[str, Any], context: PropertyContext) -> dict[str, Any]:
    """Resolve every expression of a mapping, keeping the keys."""
    return {key: resolve(expr, context) for key, expr in expressions.items()}
