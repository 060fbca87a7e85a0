"""
Class graph builder that transforms the type model to class descriptions.

Phase 2 of the pipeline: walk the type graph of a schema (objects, arrays,
references, scalars) and produce one class description per object, list and
scalar property, wired together with typed properties and namespace imports.
"""

from __future__ import annotations

import logging

from ...utils import join_namespace
from ..analyzer.ir_nodes import ClassDescription, ClassDescriptionCollection, ClassKind, MethodDef, ParameterDef, PropertyDef
from ..errors import AmbiguousTypeSetError, UnresolvedReferenceError
from ..factories import ValueObjectFactory
from ..naming import NameFilters
from ..type_model import ArrayType, ObjectType, ReferenceType, ScalarType, TypeDefinition, TypeSet

logger = logging.getLogger(__name__)


class ClassGraphBuilder:
    """Builds class descriptions from a type set."""

    def __init__(
        self,
        filters: NameFilters | None = None,
        value_objects: ValueObjectFactory | None = None,
        typed: bool = True,
        warn_on_multiple_types: bool = True,
    ):
        """
        Initialize the builder.

        Args:
            filters: Naming filters for classes, properties, methods and constants
            value_objects: Dispatcher producing scalar and list value objects
            typed: Whether generated classes carry type annotations
            warn_on_multiple_types: Log a warning when a type set is truncated to its first type
        """
        self.filters = filters or NameFilters()
        self.value_objects = value_objects or ValueObjectFactory(self.filters, typed)
        self.typed = typed
        self.warn_on_multiple_types = warn_on_multiple_types

        # Fully qualified names of the classes currently being built
        self._in_progress: set[str] = set()

    def generate_classes(
        self,
        target: ClassDescription | None,
        collection: ClassDescriptionCollection,
        type_set: TypeSet,
        namespace: str,
        class_name: str | None = None,
    ) -> ClassDescription:
        """
        Generate the classes for a type set.

        Args:
            target: Description to populate for an object type; a new one is created if None
            collection: Collection receiving every class built
            type_set: Type set to generate classes for
            namespace: Ambient namespace of the generated classes
            class_name: Name overriding the type's own name

        Returns:
            The description built for the type set itself
        """
        type_definition = self._first(type_set, class_name)

        if isinstance(type_definition, ReferenceType):
            type_definition = self._first(self._resolve(type_definition), class_name)

        if isinstance(type_definition, ObjectType):
            return self._generate_object(target, collection, type_definition, namespace, class_name)

        if isinstance(type_definition, ArrayType):
            return self._generate_array(collection, type_definition, namespace, class_name)

        return self.generate_value_object(collection, type_definition, namespace, class_name)

    def build(self, type_set: TypeSet, namespace: str, class_name: str | None = None) -> ClassDescriptionCollection:
        """Generate all classes of a type set into a new collection."""
        collection = ClassDescriptionCollection()
        self.generate_classes(None, collection, type_set, namespace, class_name)
        return collection

    def generate_value_object(
        self,
        collection: ClassDescriptionCollection,
        type_definition: TypeDefinition,
        namespace: str,
        class_name: str | None = None,
    ) -> ClassDescription:
        """Build the value object for a scalar or array type and add it to the collection."""
        description = self.value_objects.class_description(type_definition, class_name)
        description.name = self.filters.class_name(description.source_type.name)
        description.namespace = self._namespace_for(type_definition, namespace)
        description.is_final = True
        description.is_typed = self.typed
        collection.add(description)
        logger.debug("Built value object %s", description.fqcn)
        return description

    def _generate_object(
        self,
        target: ClassDescription | None,
        collection: ClassDescriptionCollection,
        type_definition: ObjectType,
        namespace: str,
        class_name: str | None,
    ) -> ClassDescription:
        if target is None:
            target = ClassDescription(is_final=True)

        target.name = self.filters.class_name(class_name or type_definition.name)
        target.namespace = self._namespace_for(type_definition, namespace)
        target.kind = ClassKind.ENTITY
        target.is_typed = self.typed
        target.source_type = type_definition

        self._in_progress.add(target.fqcn)
        try:
            for property_name, property_type_set in type_definition.properties.items():
                # Children follow a relocated class so imports only point into sub-namespaces
                self._generate_property(target, collection, property_name, property_type_set, target.namespace)
        finally:
            self._in_progress.discard(target.fqcn)

        target.add_method(self._method_construct(target))
        collection.add(target)
        logger.debug("Built class %s with %d properties", target.fqcn, len(target.properties))
        return target

    def _generate_property(
        self,
        target: ClassDescription,
        collection: ClassDescriptionCollection,
        property_name: str,
        type_set: TypeSet,
        namespace: str,
    ) -> None:
        type_definition = self._first(type_set, property_name)
        nullable = not type_definition.is_required or type_definition.is_nullable

        if isinstance(type_definition, ReferenceType):
            resolved = self._first(self._resolve(type_definition), property_name)
            nullable = nullable or resolved.is_nullable
            description = self._generate_reference(collection, type_definition, resolved, namespace)
        elif isinstance(type_definition, (ObjectType, ArrayType)):
            # Item classes of arrays are built inside, before the wrapper
            description = self.generate_classes(None, collection, type_set, namespace, property_name)
        else:
            description = self.generate_value_object(collection, type_definition, namespace, property_name)

        target.add_property(PropertyDef(name=self.filters.property_name(property_name), type=description.name, nullable=nullable))
        self._add_import(target, description)

    def _generate_reference(
        self,
        collection: ClassDescriptionCollection,
        reference: ReferenceType,
        resolved: TypeDefinition,
        namespace: str,
    ) -> ClassDescription:
        """Build the class of a referenced definition once, under the definition's name."""
        name = resolved.name or reference.extract_name_from_reference()
        fqcn = join_namespace(self._namespace_for(resolved, namespace), self.filters.class_name(name))

        existing = collection.get(fqcn)
        if existing is not None:
            return existing

        if fqcn in self._in_progress:
            logger.debug("Reference %s points at %s which is being built", reference.ref, fqcn)
            return ClassDescription(name=self.filters.class_name(name), namespace=self._namespace_for(resolved, namespace))

        return self.generate_classes(None, collection, TypeSet(resolved), namespace, name)

    def _generate_array(
        self,
        collection: ClassDescriptionCollection,
        type_definition: ArrayType,
        namespace: str,
        class_name: str | None,
    ) -> ClassDescription:
        name = class_name or type_definition.name
        namespace = self._namespace_for(type_definition, namespace)

        items = []
        for item_type_set in type_definition.items:
            if len(item_type_set) != 1:
                raise AmbiguousTypeSetError(f'Can only handle one JSON type for the items of array "{name}"')

            item = item_type_set.first()
            if isinstance(item, ReferenceType):
                resolved = self._first(self._resolve(item), name)
                items.append(self._generate_reference(collection, item, resolved, namespace))
            elif isinstance(item, (ObjectType, ScalarType)):
                items.append(self.generate_classes(None, collection, item_type_set, namespace))

        description = self.value_objects.array.class_description(type_definition, name)
        description.name = self.filters.class_name(description.source_type.name)
        description.namespace = namespace
        description.is_final = True
        description.is_typed = self.typed
        for item_description in items:
            self._add_import(description, item_description)
        collection.add(description)
        logger.debug("Built list value object %s", description.fqcn)
        return description

    def _method_construct(self, target: ClassDescription) -> MethodDef:
        """Keyword-only constructor taking one argument per property."""
        parameters = [
            ParameterDef(prop.name, prop.type_hint, default="None" if prop.nullable else None, is_keyword_only=True)
            for prop in target.properties.values()
        ]
        body = "\n".join(f"self.{prop.attribute} = {prop.name}" for prop in target.properties.values())
        return MethodDef(name="__init__", parameters=parameters, body=body or "pass")

    def _add_import(self, target: ClassDescription, description: ClassDescription) -> None:
        if description.namespace != target.namespace:
            target.add_namespace_import(description.fqcn)

    def _namespace_for(self, type_definition: TypeDefinition, namespace: str) -> str:
        """Ambient namespace, relocated by a custom "namespace"/"ns" annotation."""
        custom = type_definition.custom_namespace()
        if custom:
            return join_namespace(namespace, custom)
        return namespace

    def _resolve(self, reference: ReferenceType) -> TypeSet:
        resolved = reference.resolved_type()
        if resolved is None:
            raise UnresolvedReferenceError(reference.ref)
        return resolved

    def _first(self, type_set: TypeSet, name: str | None) -> TypeDefinition:
        """First type of a type set; further alternatives are ignored."""
        if len(type_set) == 0:
            raise AmbiguousTypeSetError(f'Empty type set for "{name or ""}"')

        if len(type_set) > 1 and self.warn_on_multiple_types:
            first = type_set.first()
            logger.warning(
                "Type set of %s holds %d types, only %s is used",
                name or first.name or first.source_path,
                len(type_set),
                first.kind.value,
            )
        return type_set.first()
