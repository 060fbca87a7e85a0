"""
Factory for UUID value objects.
"""

from __future__ import annotations

from ..analyzer.ir_nodes import ClassDescription, MethodDef, ParameterDef, Visibility
from .base import ValueObjectCodeFactory, render_body


class UuidCodeFactory(ValueObjectCodeFactory):
    DEFAULT_NAME = "uuid"

    def class_description_from_native(self, name: str) -> ClassDescription:
        description = self.new_value_object(self.property_def(name, "UUID"))
        description.add_namespace_import("uuid.UUID")
        argument = self.filters.property_name(name)

        return description.add_method(
            self.method_named_constructor("from_string", name, "str", f"UUID({argument})"),
            MethodDef(
                name="__init__",
                parameters=[ParameterDef(argument, "UUID")],
                body=render_body("self._{{ argument }} = {{ argument }}", argument=argument),
                visibility=Visibility.PRIVATE,
            ),
            self.method_accessor("to_string", name, "str", "str({})"),
            self.method_accessor("to_uuid", name, "UUID"),
            self.method_equals(name),
            self.method_magic_to_string(name, "self.to_string()"),
        )
