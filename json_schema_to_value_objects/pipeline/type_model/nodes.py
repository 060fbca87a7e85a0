"""
Type model node definitions for JSON Schema.

These nodes represent a parsed schema location as a closed set of type
variants (object, array, scalars, reference). A schema location is always
described by a TypeSet of alternatives.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar


class TypeKind(Enum):
    """Tag of a type definition variant."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    REFERENCE = "reference"


# String formats with a dedicated value object
FORMAT_DATETIME = "date-time"
FORMAT_ISO_8601 = "ISO 8601"
FORMAT_UUID = "uuid"
FORMAT_BCP_47 = "BCP 47"


@dataclass
class TypeDefinition:
    """Base class for all type definitions."""

    kind: ClassVar[TypeKind]

    name: str = ""
    is_required: bool = False
    is_nullable: bool = False

    # Non-standard schema keys (e.g. namespace/ns)
    custom: dict[str, Any] = field(default_factory=dict)

    # Original location in schema (for error messages)
    source_path: str = ""

    def custom_namespace(self) -> str:
        """Namespace segment requested by the schema via "namespace" or "ns"."""
        return self.custom.get("namespace") or self.custom.get("ns") or ""


@dataclass
class ScalarType(TypeDefinition):
    """Base class for single value types."""


@dataclass
class StringType(ScalarType):
    kind: ClassVar[TypeKind] = TypeKind.STRING

    format: str | None = None
    enum: list[str] | None = None


@dataclass
class IntegerType(ScalarType):
    kind: ClassVar[TypeKind] = TypeKind.INTEGER


@dataclass
class NumberType(ScalarType):
    kind: ClassVar[TypeKind] = TypeKind.NUMBER


@dataclass
class BooleanType(ScalarType):
    kind: ClassVar[TypeKind] = TypeKind.BOOLEAN


@dataclass
class ObjectType(TypeDefinition):
    """An object with ordered properties."""

    kind: ClassVar[TypeKind] = TypeKind.OBJECT

    properties: dict[str, TypeSet] = field(default_factory=dict)


@dataclass
class ArrayType(TypeDefinition):
    """An array; `items` holds one type set per item schema."""

    kind: ClassVar[TypeKind] = TypeKind.ARRAY

    items: list[TypeSet] = field(default_factory=list)


@dataclass
class ReferenceType(TypeDefinition):
    """A $ref pointing at another type definition, resolved lazily."""

    kind: ClassVar[TypeKind] = TypeKind.REFERENCE

    ref: str = ""
    resolver: Callable[[str], TypeSet | None] | None = field(default=None, repr=False, compare=False)

    _resolved: TypeSet | None = field(default=None, init=False, repr=False, compare=False)

    def resolved_type(self) -> TypeSet | None:
        """Resolve the reference, caching the result."""
        if self._resolved is None and self.resolver is not None:
            self._resolved = self.resolver(self.ref)
        return self._resolved

    def set_resolved_type(self, type_set: TypeSet) -> None:
        self._resolved = type_set

    def extract_name_from_reference(self) -> str:
        """Last segment of the pointer, e.g. "#/definitions/address" -> "address"."""
        return self.ref.rstrip("/").split("/")[-1].split("#")[-1].removesuffix(".json")


class TypeSet:
    """Ordered, non-empty collection of alternative type definitions."""

    def __init__(self, *types: TypeDefinition):
        self._types = list(types)

    def first(self) -> TypeDefinition | None:
        return self._types[0] if self._types else None

    def __len__(self) -> int:
        return len(self._types)

    def __iter__(self) -> Iterator[TypeDefinition]:
        return iter(self._types)

    def __getitem__(self, index: int) -> TypeDefinition:
        return self._types[index]

    def __repr__(self) -> str:
        return f"TypeSet({', '.join(repr(t) for t in self._types)})"
