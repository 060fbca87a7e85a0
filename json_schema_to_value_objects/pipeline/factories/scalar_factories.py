"""
Factories for the plain scalar value objects: string, integer, number and boolean.
"""

from __future__ import annotations

from ..analyzer.ir_nodes import ClassDescription
from .base import ValueObjectCodeFactory


class StringCodeFactory(ValueObjectCodeFactory):
    DEFAULT_NAME = "text"

    def class_description_from_native(self, name: str) -> ClassDescription:
        return self.new_value_object(self.property_def(name, "str")).add_method(
            self.method_named_constructor("from_string", name, "str"),
            self.method_magic_construct(name, "str"),
            self.method_accessor("to_string", name, "str"),
            self.method_equals(name),
            self.method_magic_to_string(name),
        )


class IntegerCodeFactory(ValueObjectCodeFactory):
    DEFAULT_NAME = "number"

    def class_description_from_native(self, name: str) -> ClassDescription:
        return self.new_value_object(self.property_def(name, "int")).add_method(
            self.method_named_constructor("from_int", name, "int"),
            self.method_magic_construct(name, "int"),
            self.method_accessor("to_int", name, "int"),
            self.method_equals(name),
            self.method_magic_to_string(name, "str({})"),
        )


class NumberCodeFactory(ValueObjectCodeFactory):
    DEFAULT_NAME = "number"

    def class_description_from_native(self, name: str) -> ClassDescription:
        return self.new_value_object(self.property_def(name, "float")).add_method(
            self.method_named_constructor("from_float", name, "float"),
            self.method_magic_construct(name, "float"),
            self.method_accessor("to_float", name, "float"),
            self.method_equals(name),
            self.method_magic_to_string(name, "str({})"),
        )


class BooleanCodeFactory(ValueObjectCodeFactory):
    DEFAULT_NAME = "boolean"

    def class_description_from_native(self, name: str) -> ClassDescription:
        return self.new_value_object(self.property_def(name, "bool")).add_method(
            self.method_named_constructor("from_bool", name, "bool"),
            self.method_magic_construct(name, "bool"),
            self.method_accessor("to_bool", name, "bool"),
            self.method_equals(name),
            self.method_magic_to_string(name, '"TRUE" if {} else "FALSE"'),
        )
