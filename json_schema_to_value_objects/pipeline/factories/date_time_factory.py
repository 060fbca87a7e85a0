"""
Factory for date-time value objects.

The wrapped value is always a timezone-aware datetime in UTC; naive inputs
are taken as UTC, aware inputs are converted.
"""

from __future__ import annotations

from ..analyzer.ir_nodes import ClassDescription, ConstantDef, MethodDef, ParameterDef, Visibility
from ..config import DEFAULT_DATE_TIME_OUTPUT_FORMAT as DEFAULT_OUTPUT_FORMAT
from ..naming import NameFilters
from .base import ValueObjectCodeFactory, render_body


class DateTimeCodeFactory(ValueObjectCodeFactory):
    DEFAULT_NAME = "dateTime"

    def __init__(
        self,
        filters: NameFilters | None = None,
        typed: bool = True,
        output_format: str = DEFAULT_OUTPUT_FORMAT,
    ):
        super().__init__(filters, typed)
        self.output_format = output_format

    def class_description_from_native(self, name: str) -> ClassDescription:
        description = self.new_value_object(self.property_def(name, "datetime"))
        description.add_namespace_import("datetime.datetime", "datetime.timezone")
        description.add_constant(ConstantDef("OUTPUT_FORMAT", self.output_format))

        return description.add_method(
            self.method_named_constructor("from_date_time", name, "datetime"),
            self._method_from_string(name),
            self._method_construct(name),
            self._method_ensure_utc(),
            self.method_accessor("to_string", name, "str", "{}.strftime(self.OUTPUT_FORMAT)"),
            self.method_accessor("to_date_time", name, "datetime"),
            self.method_equals(name),
            self.method_magic_to_string(name, "self.to_string()"),
        )

    def _method_from_string(self, name: str) -> MethodDef:
        argument = self.filters.property_name(name)
        message = (
            f"f'String \"{{{argument}}}\" is not supported. "
            f"Use a date time format which is compatible with ISO 8601.'"
        )
        body = """
            try:
                parsed = datetime.fromisoformat({{ argument }})
            except ValueError:
                raise ValueError({{ message }}) from None

            return cls(parsed)
        """
        return MethodDef(
            name="from_string",
            parameters=[ParameterDef(argument, "str")],
            return_type="Self",
            body=render_body(body, argument=argument, message=message),
            is_class_method=True,
        )

    def _method_construct(self, name: str) -> MethodDef:
        argument = self.filters.property_name(name)
        return MethodDef(
            name="__init__",
            parameters=[ParameterDef(argument, "datetime")],
            body=render_body("self._{{ argument }} = self._ensure_utc({{ argument }})", argument=argument),
            visibility=Visibility.PRIVATE,
        )

    def _method_ensure_utc(self) -> MethodDef:
        body = """
            if date_time.tzinfo is None:
                return date_time.replace(tzinfo=timezone.utc)
            if date_time.tzname() == "UTC":
                return date_time

            return date_time.astimezone(timezone.utc)
        """
        return MethodDef(
            name="_ensure_utc",
            parameters=[ParameterDef("date_time", "datetime")],
            return_type="datetime",
            body=render_body(body),
            is_static=True,
            visibility=Visibility.PRIVATE,
        )
