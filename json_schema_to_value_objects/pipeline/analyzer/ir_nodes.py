"""
IR (Intermediate Representation) node definitions.

A ClassDescription is the output unit of the class graph builder and the
value object factories: names, properties, methods, constants and imports of
one generated class. The AST backend renders these descriptions to source.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# Methods whose presence marks a class as a value object
VALUE_OBJECT_MARKER_METHODS = ("from_items", "to_string", "to_int", "to_float", "to_bool")


class ClassKind(Enum):
    """Classification of a generated class, set at creation time."""

    ENTITY = "entity"  # A class built from an object schema
    VALUE_OBJECT = "value_object"  # An immutable wrapper of a scalar or a homogeneous list
    EXCEPTION = "exception"  # A companion exception type


class Visibility(Enum):
    PUBLIC = "public"
    PRIVATE = "private"


@dataclass
class ParameterDef:
    """A method parameter."""

    name: str = ""
    type: str | None = None
    default: str | None = None  # Default value as a Python expression
    is_variadic: bool = False
    is_keyword_only: bool = False


@dataclass
class PropertyDef:
    """A property held by a class, stored in the private slot `_<name>`."""

    name: str = ""
    type: str = ""
    nullable: bool = False

    # Type of the elements for list properties (e.g. "Address" for list[Address])
    doc_hint: str | None = None

    @property
    def attribute(self) -> str:
        """Name of the private slot holding the value."""
        return f"_{self.name}"

    @property
    def type_hint(self) -> str:
        """Annotation of the property, including nullability."""
        if self.nullable and not self.type.endswith(" | None"):
            return f"{self.type} | None"
        return self.type


@dataclass
class MethodDef:
    """A method definition; the body is Python source without indentation."""

    name: str = ""
    parameters: list[ParameterDef] = field(default_factory=list)
    return_type: str | None = None
    body: str = "pass"
    is_static: bool = False
    is_class_method: bool = False
    visibility: Visibility = Visibility.PUBLIC
    docstring: str | None = None


@dataclass
class ConstantDef:
    """A class constant."""

    name: str = ""
    value: Any = None
    visibility: Visibility = Visibility.PUBLIC

    # When True, `value` is a Python expression (e.g. "(ACTIVE, INACTIVE)")
    is_expression: bool = False


@dataclass
class ClassDescription:
    """A class definition."""

    name: str = ""
    namespace: str = ""

    is_final: bool = False
    is_strict: bool = True
    is_typed: bool = True

    kind: ClassKind = ClassKind.ENTITY

    properties: dict[str, PropertyDef] = field(default_factory=dict)
    methods: dict[str, MethodDef] = field(default_factory=dict)
    constants: dict[str, ConstantDef] = field(default_factory=dict)

    # Fully qualified names to import, insertion ordered
    namespace_imports: dict[str, None] = field(default_factory=dict)

    # Fully qualified names of abstract base classes the class implements
    implemented_capabilities: list[str] = field(default_factory=list)

    # Concrete base class (e.g. "ValueError")
    extends: str | None = None

    docstring: str | None = None

    # Type definition the class was generated from, if any
    source_type: Any = field(default=None, repr=False, compare=False)

    @property
    def fqcn(self) -> str:
        """Fully qualified class name."""
        return f"{self.namespace}.{self.name}" if self.namespace else self.name

    @property
    def is_value_object(self) -> bool:
        return self.kind == ClassKind.VALUE_OBJECT

    def has_marker_method(self) -> bool:
        """Structural check for value objects built outside the factories."""
        return any(name in self.methods for name in VALUE_OBJECT_MARKER_METHODS)

    def add_property(self, *properties: PropertyDef) -> ClassDescription:
        for prop in properties:
            self.properties[prop.name] = prop
        return self

    def add_method(self, *methods: MethodDef) -> ClassDescription:
        for method in methods:
            self.methods[method.name] = method
        return self

    def has_method(self, name: str) -> bool:
        return name in self.methods

    def add_constant(self, *constants: ConstantDef) -> ClassDescription:
        for constant in constants:
            self.constants[constant.name] = constant
        return self

    def has_constant(self, name: str) -> bool:
        return name in self.constants

    def add_namespace_import(self, *imports: str) -> ClassDescription:
        for fqcn in imports:
            self.namespace_imports.setdefault(fqcn, None)
        return self

    def get_namespace_imports(self) -> list[str]:
        return list(self.namespace_imports)


class ClassDescriptionCollection:
    """All class descriptions of one generation run, keyed by fully qualified name.

    Adding a description whose fully qualified name is already present
    replaces it in place, so each class exists at most once per namespace.
    """

    def __init__(self, *descriptions: ClassDescription):
        self._items: dict[str, ClassDescription] = {}
        self.add(*descriptions)

    def add(self, *descriptions: ClassDescription) -> ClassDescriptionCollection:
        for description in descriptions:
            self._items[description.fqcn] = description
        return self

    def get(self, fqcn: str) -> ClassDescription | None:
        return self._items.get(fqcn)

    def contains(self, fqcn: str) -> bool:
        return fqcn in self._items

    def namespaces(self) -> list[str]:
        """Namespaces in order of first appearance."""
        return list(dict.fromkeys(d.namespace for d in self._items.values()))

    def __contains__(self, item: object) -> bool:
        if isinstance(item, ClassDescription):
            return item.fqcn in self._items
        return item in self._items

    def __iter__(self) -> Iterator[ClassDescription]:
        return iter(list(self._items.values()))

    def __len__(self) -> int:
        return len(self._items)
