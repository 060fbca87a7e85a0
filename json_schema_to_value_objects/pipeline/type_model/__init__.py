"""
Type model module.

Contains the type definition variants and the parser for JSON Schema.
"""

from __future__ import annotations

from .nodes import (
    FORMAT_BCP_47,
    FORMAT_DATETIME,
    FORMAT_ISO_8601,
    FORMAT_UUID,
    ArrayType,
    BooleanType,
    IntegerType,
    NumberType,
    ObjectType,
    ReferenceType,
    ScalarType,
    StringType,
    TypeDefinition,
    TypeKind,
    TypeSet,
)
from .parser import SchemaParser, parse_schema
from .reference_resolver import ReferenceResolver

__all__ = [
    "TypeDefinition",
    "TypeKind",
    "TypeSet",
    "ObjectType",
    "ArrayType",
    "ScalarType",
    "StringType",
    "IntegerType",
    "NumberType",
    "BooleanType",
    "ReferenceType",
    "FORMAT_DATETIME",
    "FORMAT_ISO_8601",
    "FORMAT_UUID",
    "FORMAT_BCP_47",
    "SchemaParser",
    "ReferenceResolver",
    "parse_schema",
]
