"""
Factory for BCP 47 language tag value objects.

Tags are parsed with babel; the language and region subtags are kept
alongside the original tag.
"""

from __future__ import annotations

from ..analyzer.ir_nodes import ClassDescription, MethodDef, ParameterDef, Visibility
from .base import ValueObjectCodeFactory, render_body


class Bcp47CodeFactory(ValueObjectCodeFactory):
    DEFAULT_NAME = "bcp47"

    def class_description_from_native(self, name: str) -> ClassDescription:
        argument = self.filters.property_name(name)
        description = self.new_value_object(
            self.property_def(name, "str"),
            self.property_def("language", "str", nullable=True),
            self.property_def("region", "str", nullable=True),
        )
        # Imported locally: a "locale" property gives a class named Locale
        body = """
            from babel import Locale

            parsed = Locale.parse({{ argument }}, sep="-")
            self._{{ argument }} = {{ argument }}
            self._language = parsed.language
            self._region = parsed.territory
        """
        return description.add_method(
            self.method_named_constructor("from_string", name, "str"),
            MethodDef(
                name="__init__",
                parameters=[ParameterDef(argument, "str")],
                body=render_body(body, argument=argument),
                visibility=Visibility.PRIVATE,
            ),
            self.method_accessor("to_string", name, "str"),
            self.method_accessor("language", "language", "str | None"),
            self.method_accessor("region", "region", "str | None"),
            self.method_equals(name),
            self.method_magic_to_string(name),
        )
