"""
Value object factories.

Each factory turns one kind of type definition into the class description
of an immutable wrapper type.
"""

from __future__ import annotations

from .array_factory import ArrayCodeFactory
from .base import CodeFactory, ValueObjectCodeFactory, render_body
from .bcp47_factory import Bcp47CodeFactory
from .date_time_factory import DEFAULT_OUTPUT_FORMAT, DateTimeCodeFactory
from .enum_factory import EnumCodeFactory
from .exception_factory import EXCEPTION_NAMESPACE, ExceptionCodeFactory, exception_names
from .iterator_factory import IteratorCodeFactory
from .scalar_factories import BooleanCodeFactory, IntegerCodeFactory, NumberCodeFactory, StringCodeFactory
from .uuid_factory import UuidCodeFactory
from .value_object_factory import ValueObjectFactory

__all__ = [
    "CodeFactory",
    "ValueObjectCodeFactory",
    "ValueObjectFactory",
    "StringCodeFactory",
    "IntegerCodeFactory",
    "NumberCodeFactory",
    "BooleanCodeFactory",
    "DateTimeCodeFactory",
    "EnumCodeFactory",
    "UuidCodeFactory",
    "Bcp47CodeFactory",
    "IteratorCodeFactory",
    "ArrayCodeFactory",
    "ExceptionCodeFactory",
    "DEFAULT_OUTPUT_FORMAT",
    "EXCEPTION_NAMESPACE",
    "exception_names",
    "render_body",
]
