"""
JSON Schema parser that builds the type model.

Phase 1 of the pipeline: parse a JSON Schema document into a TypeSet
without generating any code. References stay lazy and are resolved by the
class graph builder on demand.
"""

from __future__ import annotations

from typing import Any

from ..errors import SchemaParseError
from .nodes import (
    ArrayType,
    BooleanType,
    IntegerType,
    NumberType,
    ObjectType,
    ReferenceType,
    StringType,
    TypeDefinition,
    TypeSet,
)
from .reference_resolver import ReferenceResolver

# Keys that belong to JSON Schema itself; everything else is custom metadata
JSON_SCHEMA_KEYWORDS = {
    "$schema",
    "$id",
    "$ref",
    "$defs",
    "$comment",
    "definitions",
    "id",
    "title",
    "description",
    "type",
    "properties",
    "required",
    "additionalProperties",
    "patternProperties",
    "items",
    "minItems",
    "maxItems",
    "uniqueItems",
    "enum",
    "const",
    "format",
    "default",
    "examples",
    "nullable",
    "minLength",
    "maxLength",
    "pattern",
    "minimum",
    "maximum",
    "exclusiveMinimum",
    "exclusiveMaximum",
    "multipleOf",
    "oneOf",
    "anyOf",
    "allOf",
    "not",
    "readOnly",
    "writeOnly",
    "deprecated",
}


class SchemaParser:
    """Parses JSON Schema into a TypeSet."""

    SCALAR_TYPES = {
        "string": StringType,
        "integer": IntegerType,
        "number": NumberType,
        "boolean": BooleanType,
    }

    def __init__(self):
        self.root_name = ""
        self.resolver: ReferenceResolver | None = None

    def parse(self, schema: dict[str, Any], root_name: str) -> TypeSet:
        """
        Parse a JSON Schema into a type set.

        Args:
            schema: The JSON Schema dictionary
            root_name: Name of the root type

        Returns:
            TypeSet describing the root of the schema
        """
        if not isinstance(schema, dict):
            raise SchemaParseError(f"Schema must be a JSON object, got {type(schema).__name__}")

        self.root_name = root_name
        self.resolver = ReferenceResolver(schema, self)
        return self.parse_type_set(schema, root_name, "#", is_required=True)

    def parse_type_set(
        self,
        schema: dict[str, Any],
        name: str,
        path: str,
        is_required: bool = False,
    ) -> TypeSet:
        """
        Parse one schema location.

        Args:
            schema: The schema dictionary
            name: Name of the location (property or definition name)
            path: Current path in schema (for error messages)
            is_required: Whether the location is required by its parent

        Returns:
            TypeSet with one type definition per non-null type
        """
        if not isinstance(schema, dict):
            raise SchemaParseError(f"Expected a schema object at {path}, got {type(schema).__name__}")

        custom = self._extract_custom(schema)

        if "$ref" in schema:
            return TypeSet(
                ReferenceType(
                    name=name,
                    ref=schema["$ref"],
                    is_required=is_required,
                    is_nullable=schema.get("nullable") is True,
                    custom=custom,
                    source_path=path,
                    resolver=self._resolve,
                )
            )

        type_names = self._type_names(schema, path)
        is_nullable = "null" in type_names or schema.get("nullable") is True
        type_names = [t for t in type_names if t != "null"]

        if not type_names:
            raise SchemaParseError(f'Type "null" alone is not supported at {path}')

        return TypeSet(*(self._parse_type(schema, t, name, path, is_required, is_nullable, custom) for t in type_names))

    def _resolve(self, ref: str) -> TypeSet | None:
        if self.resolver is None:
            return None
        return self.resolver.resolve(ref)

    def _type_names(self, schema: dict[str, Any], path: str) -> list[str]:
        """Determine the JSON types of a schema, inferring them when "type" is absent."""
        type_value = schema.get("type")

        if type_value is None:
            if "properties" in schema:
                return ["object"]
            if "items" in schema:
                return ["array"]
            if "enum" in schema:
                return ["string"]
            raise SchemaParseError(f"Cannot determine the type of the schema at {path}")

        if isinstance(type_value, list):
            return list(type_value)
        return [type_value]

    def _parse_type(
        self,
        schema: dict[str, Any],
        type_name: str,
        name: str,
        path: str,
        is_required: bool,
        is_nullable: bool,
        custom: dict[str, Any],
    ) -> TypeDefinition:
        """Parse a single type of a schema location."""
        common = dict(
            name=name,
            is_required=is_required,
            is_nullable=is_nullable,
            custom=dict(custom),
            source_path=path,
        )

        if type_name == "object":
            return self._parse_object(schema, path, common)

        if type_name == "array":
            return self._parse_array(schema, name, path, common)

        if type_name == "string":
            enum = schema.get("enum")
            return StringType(
                format=schema.get("format"),
                enum=[str(value) for value in enum] if enum is not None else None,
                **common,
            )

        if type_name in self.SCALAR_TYPES:
            return self.SCALAR_TYPES[type_name](**common)

        raise SchemaParseError(f'Unknown type "{type_name}" at {path}')

    def _parse_object(self, schema: dict[str, Any], path: str, common: dict[str, Any]) -> ObjectType:
        """Parse an object type, keeping the declaration order of properties."""
        required_fields = schema.get("required", [])
        properties = {}

        for prop_name, prop_schema in schema.get("properties", {}).items():
            properties[prop_name] = self.parse_type_set(
                prop_schema,
                prop_name,
                f"{path}/properties/{prop_name}",
                is_required=prop_name in required_fields,
            )

        return ObjectType(properties=properties, **common)

    def _parse_array(self, schema: dict[str, Any], name: str, path: str, common: dict[str, Any]) -> ArrayType:
        """Parse an array type node."""
        items_schema = schema.get("items")
        items = []

        if isinstance(items_schema, list):
            # Tuple type
            for i, item in enumerate(items_schema):
                item_name = self._item_name(item, f"{name}_item_{i}")
                items.append(self.parse_type_set(item, item_name, f"{path}/items/{i}", is_required=True))
        elif items_schema is not None:
            item_name = self._item_name(items_schema, f"{name}_item")
            items.append(self.parse_type_set(items_schema, item_name, f"{path}/items", is_required=True))

        return ArrayType(items=items, **common)

    def _item_name(self, item_schema: Any, default: str) -> str:
        """Inline array items are named by their title, falling back to the array name."""
        if isinstance(item_schema, dict) and isinstance(item_schema.get("title"), str):
            return item_schema["title"]
        return default

    def _extract_custom(self, schema: dict[str, Any]) -> dict[str, Any]:
        """Extract non-standard keys; x-* extensions lose their prefix."""
        custom = {}
        for key, value in schema.items():
            if key in JSON_SCHEMA_KEYWORDS:
                continue
            custom[key[2:] if key.startswith("x-") else key] = value
        return custom


def parse_schema(schema: dict[str, Any], root_name: str) -> TypeSet:
    """Convenience function to parse a schema into a TypeSet."""
    return SchemaParser().parse(schema, root_name)
