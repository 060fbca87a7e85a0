"""
Configuration for the value object generator pipeline.

Holds the generation options together with formatter and output options.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# strftime pattern of date-time value objects: fractional seconds and UTC offset
DEFAULT_DATE_TIME_OUTPUT_FORMAT = "%Y-%m-%dT%H:%M:%S.%f%:z"


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when an output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Default: raise error if file exists
    FORCE = "force"  # Overwrite without merging
    MERGE = "merge"  # Merge with existing file, preserving custom code


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to validate code before writing
        atomic_write: Whether to use atomic file writes
    """

    mode: OutputMode = OutputMode.ERROR_IF_EXISTS
    validate_before_write: bool = True
    atomic_write: bool = True


@dataclass
class FormatterConfig:
    """Configuration for post-processing formatters."""

    # Whether formatting is enabled
    enabled: bool = False

    # "ruff" or "black"
    name: str = "ruff"

    # Line length for the formatter
    line_length: int = 100

    # Python version target (e.g., "py312", "py313")
    target_version: str = "py312"

    # Whether to use string normalization (convert single quotes to double)
    string_normalization: bool = True

    # Whether to honor magic trailing commas
    magic_trailing_comma: bool = True


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Ambient namespace (dotted module path) of the generated classes
    namespace: str = "generated"

    # Emit type annotations
    typed: bool = True

    # Emit `from __future__ import annotations`
    strict: bool = True

    # Add one accessor method per property to non value object classes
    add_getter_methods: bool = True

    # Add one constant per property to non value object classes
    add_class_constants: bool = False

    # Visibility of the property constants: "public" or "private"
    constant_visibility: str = "public"

    # Generate the companion exceptions of enum value objects
    generate_exceptions: bool = True

    # strftime pattern used by date-time value objects
    date_time_output_format: str = DEFAULT_DATE_TIME_OUTPUT_FORMAT

    # Add generation comment at top of file
    add_generation_comment: bool = True

    # Log a warning when a type set is truncated to its first type
    warn_on_multiple_types: bool = True

    # Formatter configuration
    formatter: FormatterConfig = field(default_factory=FormatterConfig)

    # Output configuration
    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if k == "formatter" and isinstance(v, dict):
                config.formatter = FormatterConfig(**v)
            elif k == "output" and isinstance(v, dict):
                mode = v.get("mode", OutputMode.ERROR_IF_EXISTS)
                if isinstance(mode, str):
                    mode = OutputMode(mode)
                config.output = OutputConfig(
                    mode=mode,
                    validate_before_write=v.get("validate_before_write", True),
                    atomic_write=v.get("atomic_write", True),
                )
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "namespace": self.namespace,
            "typed": self.typed,
            "strict": self.strict,
            "add_getter_methods": self.add_getter_methods,
            "add_class_constants": self.add_class_constants,
            "constant_visibility": self.constant_visibility,
            "generate_exceptions": self.generate_exceptions,
            "date_time_output_format": self.date_time_output_format,
            "add_generation_comment": self.add_generation_comment,
            "warn_on_multiple_types": self.warn_on_multiple_types,
            "formatter": {
                "enabled": self.formatter.enabled,
                "name": self.formatter.name,
                "line_length": self.formatter.line_length,
                "target_version": self.formatter.target_version,
                "string_normalization": self.formatter.string_normalization,
                "magic_trailing_comma": self.formatter.magic_trailing_comma,
            },
            "output": {
                "mode": self.output.mode.value,
                "validate_before_write": self.output.validate_before_write,
                "atomic_write": self.output.atomic_write,
            },
        }
