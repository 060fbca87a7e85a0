"""
Dispatcher selecting the value object factory for a type definition.
"""

from __future__ import annotations

from ..analyzer.ir_nodes import ClassDescription
from ..errors import UnsupportedTypeError
from ..naming import NameFilters
from ..type_model import (
    FORMAT_BCP_47,
    FORMAT_DATETIME,
    FORMAT_ISO_8601,
    FORMAT_UUID,
    ArrayType,
    BooleanType,
    IntegerType,
    NumberType,
    StringType,
    TypeDefinition,
)
from .array_factory import ArrayCodeFactory
from .base import ValueObjectCodeFactory
from .bcp47_factory import Bcp47CodeFactory
from .date_time_factory import DEFAULT_OUTPUT_FORMAT, DateTimeCodeFactory
from .enum_factory import EnumCodeFactory
from .scalar_factories import BooleanCodeFactory, IntegerCodeFactory, NumberCodeFactory, StringCodeFactory
from .uuid_factory import UuidCodeFactory


class ValueObjectFactory:
    """Routes a type definition to the factory producing its value object."""

    def __init__(
        self,
        filters: NameFilters | None = None,
        typed: bool = True,
        date_time_output_format: str = DEFAULT_OUTPUT_FORMAT,
        generate_exceptions: bool = True,
    ):
        self.filters = filters or NameFilters()
        self.string = StringCodeFactory(self.filters, typed)
        self.enum = EnumCodeFactory(self.filters, typed, generate_exceptions)
        self.date_time = DateTimeCodeFactory(self.filters, typed, date_time_output_format)
        self.uuid = UuidCodeFactory(self.filters, typed)
        self.bcp47 = Bcp47CodeFactory(self.filters, typed)
        self.integer = IntegerCodeFactory(self.filters, typed)
        self.number = NumberCodeFactory(self.filters, typed)
        self.boolean = BooleanCodeFactory(self.filters, typed)
        self.array = ArrayCodeFactory(self.filters, typed)

    def factory_for(self, type_definition: TypeDefinition) -> ValueObjectCodeFactory:
        """
        Select the factory for a type definition.

        Raises:
            UnsupportedTypeError: If no value object exists for the type
        """
        if isinstance(type_definition, StringType):
            if type_definition.enum is not None:
                return self.enum
            if type_definition.format in (FORMAT_DATETIME, FORMAT_ISO_8601):
                return self.date_time
            if type_definition.format == FORMAT_UUID:
                return self.uuid
            if type_definition.format == FORMAT_BCP_47:
                return self.bcp47
            return self.string

        if isinstance(type_definition, BooleanType):
            return self.boolean
        if isinstance(type_definition, IntegerType):
            return self.integer
        if isinstance(type_definition, NumberType):
            return self.number
        if isinstance(type_definition, ArrayType):
            return self.array

        raise UnsupportedTypeError(type_definition.kind.value, f'at "{type_definition.source_path}"')

    def class_description(self, type_definition: TypeDefinition, name: str | None = None) -> ClassDescription:
        """Build the value object description for a type definition, optionally under another name."""
        return self.factory_for(type_definition).class_description(type_definition, name)
