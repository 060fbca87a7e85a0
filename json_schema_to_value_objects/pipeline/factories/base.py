"""
Base class for value object code factories.

Every factory produces a fixed template of properties and methods for an
immutable wrapper type. Method bodies are small Jinja2 templates rendered
to Python source.
"""

from __future__ import annotations

import dataclasses
import functools
import textwrap
from abc import ABC, abstractmethod
from typing import Any

import jinja2

from ..analyzer.ir_nodes import ClassDescription, ClassKind, MethodDef, ParameterDef, PropertyDef, Visibility
from ..naming import NameFilters

_jinja_env = jinja2.Environment(lstrip_blocks=True, trim_blocks=True, autoescape=False)


@functools.lru_cache(maxsize=None)
def _compile(template: str) -> jinja2.Template:
    return _jinja_env.from_string(textwrap.dedent(template).strip("\n"))


def render_body(template: str, **context: Any) -> str:
    """Render a method body template to Python source."""
    return _compile(template).render(**context)


def with_name(type_definition: Any, name: str) -> Any:
    """Copy of a type definition carrying `name`, or the definition itself if unchanged."""
    if type_definition.name == name:
        return type_definition
    return dataclasses.replace(type_definition, name=name)


class CodeFactory:
    """Shared helpers for factories that build class members."""

    def __init__(self, filters: NameFilters | None = None, typed: bool = True):
        """
        Initialize the factory.

        Args:
            filters: Naming filters applied to every generated name
            typed: Whether generated members carry type annotations
        """
        self.filters = filters or NameFilters()
        self.typed = typed

    def property_def(self, name: str, type_: str, nullable: bool = False, doc_hint: str | None = None) -> PropertyDef:
        return PropertyDef(name=self.filters.property_name(name), type=type_, nullable=nullable, doc_hint=doc_hint)

    def new_value_object(self, *properties: PropertyDef) -> ClassDescription:
        """Start an empty value object description."""
        description = ClassDescription(kind=ClassKind.VALUE_OBJECT, is_typed=self.typed)
        description.add_property(*properties)
        description.add_namespace_import("typing.Self")
        return description

    def method_named_constructor(self, method_name: str, argument_name: str, native_type: str, expression: str | None = None) -> MethodDef:
        """Class method `method_name(value) -> Self` that wraps its argument."""
        argument = self.filters.property_name(argument_name)
        return MethodDef(
            name=method_name,
            parameters=[ParameterDef(argument, native_type)],
            return_type="Self",
            body=render_body("return cls({{ expression }})", expression=expression or argument),
            is_class_method=True,
        )

    def method_magic_construct(self, argument_name: str, native_type: str) -> MethodDef:
        """Constructor assigning the single native value."""
        argument = self.filters.property_name(argument_name)
        return MethodDef(
            name="__init__",
            parameters=[ParameterDef(argument, native_type)],
            body=render_body("self._{{ argument }} = {{ argument }}", argument=argument),
            visibility=Visibility.PRIVATE,
        )

    def method_accessor(self, method_name: str, property_name: str, return_type: str, expression: str | None = None) -> MethodDef:
        """Method returning the native value (or an expression of it)."""
        attribute = "self._" + self.filters.property_name(property_name)
        return MethodDef(
            name=method_name,
            return_type=return_type,
            body=render_body("return {{ expression }}", expression=(expression or "{}").format(attribute)),
        )

    def method_equals(self, property_name: str, argument_name: str = "other") -> MethodDef:
        """Value equality against another instance of the same concrete type."""
        body = """
            if not isinstance({{ other }}, type(self)):
                return False

            return self._{{ name }} == {{ other }}._{{ name }}
        """
        return MethodDef(
            name="equals",
            parameters=[ParameterDef(argument_name, "object")],
            return_type="bool",
            body=render_body(body, name=self.filters.property_name(property_name), other=argument_name),
        )

    def method_magic_to_string(self, property_name: str, expression: str | None = None) -> MethodDef:
        attribute = "self._" + self.filters.property_name(property_name)
        return MethodDef(
            name="__str__",
            return_type="str",
            body=render_body("return {{ expression }}", expression=(expression or "{}").format(attribute)),
        )


class ValueObjectCodeFactory(CodeFactory, ABC):
    """Base class of the scalar value object factories."""

    # Name used when the type definition has none
    DEFAULT_NAME = "text"

    def class_description(self, type_definition: Any, name: str | None = None) -> ClassDescription:
        """
        Build the value object description for a type definition.

        Args:
            type_definition: The scalar or array type definition
            name: Name overriding the one of the type definition

        Returns:
            Value object description; its source_type carries the effective name
        """
        type_definition = with_name(type_definition, name or type_definition.name or self.DEFAULT_NAME)
        description = self.class_description_from_native(type_definition.name)
        description.source_type = type_definition
        return description

    @abstractmethod
    def class_description_from_native(self, name: str) -> ClassDescription:
        """Build the value object description for a property named `name`."""
