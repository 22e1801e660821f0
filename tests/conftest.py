"""Pytest configuration for docprop tests."""

import sys
from pathlib import Path

import pytest

# Add the package source to path for testing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from docprop import HandlerRegistry, PropertyContext, PropertySchema, Session  # noqa: E402


@pytest.fixture
def session():
    """Session with the built-in handlers registered."""
    return Session(HandlerRegistry.with_builtins())


@pytest.fixture
def make_context(session):
    """Build a property context with sensible defaults."""

    def _make(
        schema,
        value=None,
        property="field",
        doc=None,
        declared=True,
        ctx_session=None,
    ):
        if isinstance(schema, dict):
            schema = PropertySchema(**schema)
        if doc is None:
            doc = {property: value} if declared else {}
        return PropertyContext(
            doc=doc,
            value=value,
            property=property,
            schema=schema,
            property_not_declared=not declared,
            session=ctx_session or session,
        )

    return _make
