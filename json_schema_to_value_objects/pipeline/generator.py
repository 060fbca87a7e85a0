"""
Pipeline generator orchestrating all phases of the code generation.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .. import __version__
from .analyzer.ir_nodes import ClassDescriptionCollection, ClassKind, Visibility
from .ast_backends.base import ExistingCodeHook
from .ast_backends.python_ast_backend import PythonAstBackend
from .builder import ClassGraphBuilder, add_class_constants_for_properties, add_getter_methods
from .config import CodeGeneratorConfig, OutputMode
from .factories import ExceptionCodeFactory, ValueObjectFactory
from .formatters import get_formatter
from .merger import AtomicWriter
from .naming import NameFilters
from .type_model import SchemaParser, StringType

logger = logging.getLogger(__name__)


class PipelineGenerator:
    """Generates value object modules from a JSON Schema.

    Phases:
    1. Parse the schema into a type set
    2. Build the class descriptions (graph builder, exceptions, optional passes)
    3. Render one module per namespace with the Python AST backend
    4. Optionally format and merge with existing files
    """

    def __init__(
        self,
        name: str,
        schema: dict[str, Any],
        config: CodeGeneratorConfig | None = None,
        filters: NameFilters | None = None,
        command_line: str = "json_schema_to_value_objects",
    ):
        """
        Initialize the generator.

        Args:
            name: Name of the root type
            schema: The JSON Schema dictionary
            config: Code generation configuration
            filters: Naming filters, Python conventions by default
            command_line: Command line reported in the generation comment
        """
        self.name = name
        self.schema = schema
        self.config = config or CodeGeneratorConfig()
        self.filters = filters or NameFilters()
        self.command_line = command_line

    def build(self) -> ClassDescriptionCollection:
        """Build the class descriptions of the schema."""
        config = self.config
        type_set = SchemaParser().parse(self.schema, self.name)

        value_objects = ValueObjectFactory(self.filters, config.typed, config.date_time_output_format, config.generate_exceptions)
        builder = ClassGraphBuilder(self.filters, value_objects, config.typed, config.warn_on_multiple_types)
        collection = builder.build(type_set, config.namespace, self.name)

        if config.generate_exceptions:
            self._add_exceptions(collection)

        for description in collection:
            description.is_strict = config.strict

        if config.add_getter_methods:
            add_getter_methods(collection, self.filters)

        if config.add_class_constants:
            add_class_constants_for_properties(collection, self.filters, Visibility(config.constant_visibility))

        logger.info("Built %d classes in %d namespaces for %s", len(collection), len(collection.namespaces()), self.name)
        return collection

    def _add_exceptions(self, collection: ClassDescriptionCollection) -> None:
        """Add the companion exception of every enum value object."""
        factory = ExceptionCodeFactory(self.filters, self.config.typed)
        for description in collection:
            source_type = description.source_type
            if description.kind == ClassKind.VALUE_OBJECT and isinstance(source_type, StringType) and source_type.enum is not None:
                collection.add(factory.class_description(source_type, description))

    def generate(self, existing_code: ExistingCodeHook | None = None) -> dict[str, str]:
        """
        Generate the source files.

        Args:
            existing_code: Hook returning the current contents of a file, for merging

        Returns:
            Mapping of relative file name to source code
        """
        backend = PythonAstBackend(self.config, self._generation_comment())
        files = backend.render(self.build(), existing_code)

        if self.config.formatter.enabled:
            formatter = get_formatter(self.config.formatter.name)
            files = {filename: formatter.format(code, self.config.formatter) for filename, code in files.items()}

        return files

    def write(self, output_dir: str | Path) -> list[Path]:
        """
        Generate and write the source files below `output_dir`.

        Returns:
            Paths of the written files

        Raises:
            FileExistsError: If a file exists and the output mode is "error"
            CodeMergeError: If merging or validation fails
        """
        output_dir = Path(output_dir)
        output = self.config.output

        existing_code = self._existing_code_reader(output_dir) if output.mode == OutputMode.MERGE else None
        files = self.generate(existing_code)

        writer = AtomicWriter()
        if output.mode == OutputMode.ERROR_IF_EXISTS:
            existing = writer.existing_modules(output_dir, list(files))
            if existing:
                raise FileExistsError(
                    f"Output file already exists: {existing[0]}. Use force mode to overwrite or merge mode to preserve custom code."
                )

        written = writer.write_modules(output_dir, files, output.atomic_write, output.validate_before_write)
        for path in written:
            logger.info("Generated %s", path)
        return written

    def _existing_code_reader(self, output_dir: Path) -> ExistingCodeHook:
        def read(filename: str) -> str | None:
            path = output_dir / filename
            return path.read_text(encoding="utf-8") if path.exists() else None

        return read

    def _generation_comment(self) -> str:
        return f"Generated by json_schema_to_value_objects v{__version__} : {self.command_line}"
