"""Type handlers and the registry that maps type names to them."""

from .base import BaseTypeHandler, TypeHandler
from .builtin import (
    BUILTIN_HANDLERS,
    BooleanHandler,
    DateHandler,
    DictHandler,
    IntegerHandler,
    ListHandler,
    NumberHandler,
    StringHandler,
)
from .registry import HandlerRegistry

__all__ = [
    "TypeHandler",
    "BaseTypeHandler",
    "HandlerRegistry",
    "BUILTIN_HANDLERS",
    "StringHandler",
    "NumberHandler",
    "IntegerHandler",
    "BooleanHandler",
    "DateHandler",
    "ListHandler",
    "DictHandler",
]
