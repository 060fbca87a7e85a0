"""
Reference resolver for $ref resolution.

Resolves local $ref pointers to the type set of the definition they point at.
Definitions are parsed on first use and cached, so recursive schemas never
recurse at parse time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .nodes import TypeSet

if TYPE_CHECKING:
    from .parser import SchemaParser


class ReferenceResolver:
    """Resolves $ref to actual definitions."""

    def __init__(self, schema: dict[str, Any], parser: SchemaParser):
        """
        Initialize the resolver.

        Args:
            schema: The complete JSON Schema document
            parser: Parser used to turn a referenced definition into a type set
        """
        self.schema = schema
        self.parser = parser
        self._definition_cache: dict[str, TypeSet] = {}

    def resolve(self, ref: str) -> TypeSet | None:
        """
        Resolve a $ref pointer to its target.

        Args:
            ref: The pointer, e.g. "#/definitions/address"

        Returns:
            The referenced type set, or None if the pointer cannot be followed
        """
        # External references are not part of the document
        if not ref.startswith("#"):
            return None

        if ref in self._definition_cache:
            return self._definition_cache[ref]

        target = self._follow_pointer(ref)
        if not isinstance(target, dict):
            return None

        name = self.parser.root_name if ref in ("#", "#/") else self._unescape(ref.rstrip("/").split("/")[-1])
        type_set = self.parser.parse_type_set(target, name, ref, is_required=True)
        self._definition_cache[ref] = type_set
        return type_set

    def _follow_pointer(self, ref: str) -> Any:
        """Walk a JSON pointer fragment through the schema document."""
        node: Any = self.schema
        fragment = ref[1:].lstrip("/")
        if not fragment:
            return node

        for part in fragment.split("/"):
            part = self._unescape(part)
            if isinstance(node, dict) and part in node:
                node = node[part]
            elif isinstance(node, list) and part.isdigit() and int(part) < len(node):
                node = node[int(part)]
            else:
                return None
        return node

    @staticmethod
    def _unescape(part: str) -> str:
        return part.replace("~1", "/").replace("~0", "~")
