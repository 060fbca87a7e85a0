"""
Factory for list value objects.

A list value object wraps a homogeneous, immutable sequence of item value
objects. Changing operations return a new instance.
"""

from __future__ import annotations

import logging

from ..analyzer.ir_nodes import ClassDescription, MethodDef, ParameterDef, Visibility
from ..errors import AmbiguousTypeSetError, UnresolvedReferenceError, UnsupportedTypeError
from ..naming import NameFilters
from ..type_model import ArrayType, ObjectType, ReferenceType, ScalarType, TypeSet
from .base import ValueObjectCodeFactory, render_body, with_name
from .iterator_factory import IteratorCodeFactory

logger = logging.getLogger(__name__)

# Loop variable used in generated method bodies
ITEM = "existing_item"


class ArrayCodeFactory(ValueObjectCodeFactory):
    DEFAULT_NAME = "items"

    def __init__(self, filters: NameFilters | None = None, typed: bool = True):
        super().__init__(filters, typed)
        self.iterator_factory = IteratorCodeFactory(self.filters, typed)

    def class_description(self, type_definition: ArrayType, name: str | None = None) -> ClassDescription:
        type_definition = with_name(type_definition, name or type_definition.name or self.DEFAULT_NAME)
        description = self.class_description_from_native(type_definition.name, *type_definition.items)
        description.source_type = type_definition
        return description

    def class_description_from_native(self, name: str, *items: TypeSet) -> ClassDescription:
        item_type_name = self.determine_type(name, *items)
        item_class = self.filters.class_name(item_type_name)
        argument = self.filters.property_name(name)
        item_argument = self.filters.property_name(item_type_name)
        if item_argument == argument:
            item_argument = f"{item_argument}_item"

        description = self.iterator_factory.class_description_from_native(name, item_class)
        description.add_namespace_import("typing.Self", "collections.abc.Callable")

        items_attribute = "self._" + argument
        context = dict(
            argument=argument,
            item_argument=item_argument,
            item_class=item_class,
            items=items_attribute,
            item=ITEM,
        )

        def method(method_name: str, parameters: list[ParameterDef], return_type: str | None, template: str, **kwargs) -> MethodDef:
            return MethodDef(
                name=method_name,
                parameters=parameters,
                return_type=return_type,
                body=render_body(template, **context),
                **kwargs,
            )

        return description.add_method(
            method(
                "from_array",
                [ParameterDef(argument, "list[str]")],
                "Self",
                "return cls(*({{ item_class }}.from_string({{ item }}) for {{ item }} in {{ argument }}))",
                is_class_method=True,
            ),
            method(
                "from_items",
                [ParameterDef(argument, item_class, is_variadic=True)],
                "Self",
                "return cls(*{{ argument }})",
                is_class_method=True,
            ),
            method("empty_list", [], "Self", "return cls()", is_class_method=True),
            method(
                "__init__",
                [ParameterDef(argument, item_class, is_variadic=True)],
                None,
                """
                {{ items }} = tuple({{ argument }})
                self._position = 0
                """,
                visibility=Visibility.PRIVATE,
            ),
            method(
                "add",
                [ParameterDef(item_argument, item_class)],
                "Self",
                "return self.__class__(*{{ items }}, {{ item_argument }})",
            ),
            method(
                "remove",
                [ParameterDef(item_argument, item_class)],
                "Self",
                "return self.__class__(*({{ item }} for {{ item }} in {{ items }} if not {{ item }}.equals({{ item_argument }})))",
            ),
            method(
                "first",
                [],
                f"{item_class} | None",
                """
                if len({{ items }}) == 0:
                    return None

                return {{ items }}[0]
                """,
            ),
            method(
                "last",
                [],
                f"{item_class} | None",
                """
                if len({{ items }}) == 0:
                    return None

                return {{ items }}[-1]
                """,
            ),
            method(
                "contains",
                [ParameterDef(item_argument, item_class)],
                "bool",
                """
                for {{ item }} in {{ items }}:
                    if {{ item }}.equals({{ item_argument }}):
                        return True

                return False
                """,
            ),
            method(
                "filter",
                [ParameterDef("predicate", f"Callable[[{item_class}], bool]")],
                "Self",
                "return self.__class__(*({{ item }} for {{ item }} in {{ items }} if predicate({{ item }})))",
            ),
            method("items", [], f"tuple[{item_class}, ...]", "return {{ items }}"),
            method(
                "to_array",
                [],
                "list[str]",
                "return [{{ item }}.to_string() for {{ item }} in {{ items }}]",
            ),
            method(
                "equals",
                [ParameterDef("other", "object")],
                "bool",
                """
                if not isinstance(other, type(self)):
                    return False

                return self.to_array() == other.to_array()
                """,
            ),
        )

    def determine_type(self, name: str, *items: TypeSet) -> str:
        """
        Determine the element type name of an array.

        Args:
            name: Name of the array, for error messages
            items: Item type sets of the array

        Returns:
            Name of the single element type

        Raises:
            AmbiguousTypeSetError: If there is not exactly one item type
            UnresolvedReferenceError: If the item reference cannot be resolved
            UnsupportedTypeError: If the item type is itself an array
        """
        if len(items) != 1 or len(items[0]) != 1:
            raise AmbiguousTypeSetError(f'Can only handle one JSON type for the items of array "{name}"')

        item_type = items[0].first()

        if isinstance(item_type, ReferenceType):
            resolved = item_type.resolved_type()
            if resolved is None:
                raise UnresolvedReferenceError(item_type.ref)
            if len(resolved) != 1:
                raise AmbiguousTypeSetError(f'Can only handle one JSON type for the items of array "{name}"')
            logger.debug("Array %s items resolved from %s", name, item_type.ref)
            item_type = resolved.first()

        if isinstance(item_type, (ScalarType, ObjectType)):
            return item_type.name

        raise UnsupportedTypeError(item_type.kind.value, f'as item type of array "{name}"')
