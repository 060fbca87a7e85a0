"""
Factory for the iteration protocol members of list value objects.
"""

from __future__ import annotations

from ..analyzer.ir_nodes import ClassDescription, ClassKind, MethodDef
from .base import CodeFactory, render_body

ITERATOR_CAPABILITIES = ("collections.abc.Iterable", "collections.abc.Sized")


class IteratorCodeFactory(CodeFactory):
    """Adds a cursor and the iteration methods over a list property."""

    def class_description_from_native(self, name: str, item_type: str, position: str = "position") -> ClassDescription:
        """
        Build a description holding a list property and its iteration methods.

        Args:
            name: Name of the list property
            item_type: Class name of the list elements
            position: Name of the cursor property

        Returns:
            Description with the list and cursor properties and the iteration methods
        """
        description = ClassDescription(kind=ClassKind.VALUE_OBJECT, is_typed=self.typed)
        description.add_property(
            self.property_def(name, f"tuple[{item_type}, ...]", doc_hint=item_type),
            self.property_def(position, "int"),
        )
        description.add_namespace_import(*ITERATOR_CAPABILITIES, "collections.abc.Iterator")
        description.implemented_capabilities.extend(ITERATOR_CAPABILITIES)
        description.add_method(*self.methods(name, item_type, position))
        return description

    def methods(self, name: str, item_type: str, position: str = "position") -> list[MethodDef]:
        items = "self._" + self.filters.property_name(name)
        cursor = "self._" + self.filters.property_name(position)

        def method(method_name: str, return_type: str | None, template: str) -> MethodDef:
            body = render_body(template, items=items, cursor=cursor)
            return MethodDef(name=method_name, return_type=return_type, body=body)

        return [
            method("rewind", "None", "{{ cursor }} = 0"),
            method("current", item_type, "return {{ items }}[{{ cursor }}]"),
            method("key", "int", "return {{ cursor }}"),
            method("next", "None", "{{ cursor }} += 1"),
            method("valid", "bool", "return 0 <= {{ cursor }} < len({{ items }})"),
            method("count", "int", "return len({{ items }})"),
            # Independent of the cursor so that nested loops each get their own iterator
            method("__iter__", f"Iterator[{item_type}]", "return iter({{ items }})"),
            method("__len__", "int", "return self.count()"),
        ]
