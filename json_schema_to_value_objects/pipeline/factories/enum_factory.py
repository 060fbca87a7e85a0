"""
Factory for enum value objects.

An enum value object holds one string out of a closed set. Each allowed
value becomes a class constant and a named constructor; any other value is
rejected by the constructor with the companion exception, or with a plain
ValueError when exceptions are not generated.
"""

from __future__ import annotations

from ..analyzer.ir_nodes import ClassDescription, ConstantDef, MethodDef, ParameterDef, Visibility
from ..errors import UnsupportedTypeError
from ..naming import NameFilters
from ..type_model import StringType
from .base import ValueObjectCodeFactory, render_body, with_name
from .exception_factory import EXCEPTION_NAMESPACE, exception_names, invalid_value_message


class EnumCodeFactory(ValueObjectCodeFactory):
    DEFAULT_NAME = "text"

    def __init__(self, filters: NameFilters | None = None, typed: bool = True, generate_exceptions: bool = True):
        super().__init__(filters, typed)
        self.generate_exceptions = generate_exceptions

    def class_description(self, type_definition: StringType, name: str | None = None) -> ClassDescription:
        if type_definition.enum is None:
            raise UnsupportedTypeError("string", "without enum values")

        type_definition = with_name(type_definition, name or type_definition.name or self.DEFAULT_NAME)
        description = self.class_description_from_native(type_definition.name, type_definition.enum)
        description.source_type = type_definition
        return description

    def class_description_from_native(self, name: str, values: list[str] | None = None) -> ClassDescription:
        """
        Raises:
            UnsupportedTypeError: If a value gives an empty or already used constant or method name
        """
        values = values or []
        argument = self.filters.property_name(name)
        description = self.new_value_object(self.property_def(name, "str"))
        methods = [
            self._method_construct(name, argument),
            self.method_accessor("to_string", name, "str"),
            self.method_equals(name),
            self._method_is_one_of(argument),
            self.method_magic_to_string(name),
        ]
        method_names = {"from_string"} | {method.name for method in methods}

        constant_names = []
        for value in values:
            constant_name = self.filters.const_name(value)
            method_name = self.filters.const_value(value)
            if not constant_name or not method_name:
                raise UnsupportedTypeError("enum", f'value "{value}" of "{name}": it gives an empty name')
            if constant_name in constant_names or constant_name == "CHOICES":
                raise UnsupportedTypeError("enum", f'value "{value}" of "{name}": constant {constant_name} is already used')
            if method_name in method_names:
                raise UnsupportedTypeError("enum", f'value "{value}" of "{name}": method {method_name} is already used')
            constant_names.append(constant_name)
            method_names.add(method_name)
            description.add_constant(ConstantDef(constant_name, value))

        choices = "(" + ", ".join(constant_names) + ",)" if constant_names else "()"
        description.add_constant(ConstantDef("CHOICES", choices, is_expression=True))

        description.add_method(self.method_named_constructor("from_string", name, "str"))
        for value, constant_name in zip(values, constant_names):
            description.add_method(
                MethodDef(
                    name=self.filters.const_value(value),
                    return_type="Self",
                    body=render_body("return cls(cls.{{ constant }})", constant=constant_name),
                    is_class_method=True,
                )
            )

        return description.add_method(*methods)

    def _method_construct(self, name: str, argument: str) -> MethodDef:
        if self.generate_exceptions:
            exception_class, exception_method = exception_names(name, self.filters)
            # Imported on use: the exception module imports this class
            body = """
                if {{ argument }} not in self.CHOICES:
                    from .{{ namespace }} import {{ exception_class }}

                    raise {{ exception_class }}.{{ exception_method }}({{ argument }})

                self._{{ argument }} = {{ argument }}
            """
        else:
            exception_class = exception_method = None
            body = """
                if {{ argument }} not in self.CHOICES:
                    raise ValueError({{ message }} + ", ".join(self.CHOICES))

                self._{{ argument }} = {{ argument }}
            """
        return MethodDef(
            name="__init__",
            parameters=[ParameterDef(argument, "str")],
            body=render_body(
                body,
                argument=argument,
                namespace=EXCEPTION_NAMESPACE,
                exception_class=exception_class,
                exception_method=exception_method,
                message=invalid_value_message("{type(self).__name__}", argument),
            ),
            visibility=Visibility.PRIVATE,
        )

    def _method_is_one_of(self, argument: str) -> MethodDef:
        body = """
            for other in {{ argument }}:
                if self.equals(other):
                    return True

            return False
        """
        return MethodDef(
            name="is_one_of",
            parameters=[ParameterDef(argument, "Self", is_variadic=True)],
            return_type="bool",
            body=render_body(body, argument=argument),
        )
