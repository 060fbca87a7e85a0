"""
Factory for the exception types that accompany value objects.

Only enum value objects have a companion exception. It lives in the
"exception" sub-namespace of the value object and is raised by the value
object's constructor for values outside its allowed set.
"""

from __future__ import annotations

from typing import Any

from ...utils import join_namespace
from ..analyzer.ir_nodes import ClassDescription, ClassKind, MethodDef, ParameterDef
from ..errors import UnsupportedTypeError
from ..naming import NameFilters
from ..type_model import StringType
from .base import CodeFactory, render_body

EXCEPTION_NAMESPACE = "exception"


def exception_names(type_name: str, filters: NameFilters) -> tuple[str, str]:
    """Class name and factory method name of the exception for an enum type."""
    name = type_name or "text"
    return filters.class_name(f"invalid_{name}"), filters.method_name(f"for_{name}")


def invalid_value_message(class_name: str, argument: str) -> str:
    """f-string expression of the message for a value outside the allowed set, without the choices."""
    return f"f'Invalid value for \"{class_name}\" given. Got \"{{{argument}}}\", but allowed values are '"


class ExceptionCodeFactory(CodeFactory):
    """Builds exception class descriptions for value objects."""

    def class_description(self, type_definition: Any, value_object: ClassDescription) -> ClassDescription:
        """
        Build the exception accompanying a value object.

        Args:
            type_definition: Type definition the value object was generated from
            value_object: The value object raising the exception

        Returns:
            Description of the exception class

        Raises:
            UnsupportedTypeError: If the type has no companion exception
        """
        if isinstance(type_definition, StringType) and type_definition.enum is not None:
            return self._invalid_enum_value(type_definition, value_object)

        raise UnsupportedTypeError(type(type_definition).__name__, "for exception generation")

    def _invalid_enum_value(self, type_definition: StringType, value_object: ClassDescription) -> ClassDescription:
        class_name, method_name = exception_names(type_definition.name, self.filters)
        argument = self.filters.property_name(type_definition.name or "text")

        description = ClassDescription(
            name=class_name,
            namespace=join_namespace(value_object.namespace, EXCEPTION_NAMESPACE),
            is_final=True,
            is_typed=self.typed,
            kind=ClassKind.EXCEPTION,
            extends="ValueError",
            source_type=type_definition,
        )
        description.add_namespace_import("typing.Self", value_object.fqcn)

        message = invalid_value_message(value_object.name, argument)
        body = """
            return cls({{ message }} + ", ".join({{ value_object }}.CHOICES))
        """
        return description.add_method(
            MethodDef(
                name=method_name,
                parameters=[ParameterDef(argument, "str")],
                return_type="Self",
                body=render_body(body, message=message, value_object=value_object.name),
                is_class_method=True,
            )
        )
