#!/usr/bin/env python3
"""
Tests for CodeGeneratorConfig.
"""

import pytest

from json_schema_to_value_objects.pipeline import CodeGeneratorConfig, OutputMode
from json_schema_to_value_objects.pipeline.config import DEFAULT_DATE_TIME_OUTPUT_FORMAT


class TestCodeGeneratorConfig:
    def test_defaults(self):
        config = CodeGeneratorConfig()

        assert config.namespace == "generated"
        assert config.typed
        assert config.strict
        assert config.add_getter_methods
        assert not config.add_class_constants
        assert config.generate_exceptions
        assert config.date_time_output_format == DEFAULT_DATE_TIME_OUTPUT_FORMAT
        assert config.output.mode == OutputMode.ERROR_IF_EXISTS
        assert not config.formatter.enabled

    def test_from_dict(self):
        """Nested sections are converted, unknown keys are ignored"""
        config = CodeGeneratorConfig.from_dict(
            {
                "namespace": "acme.models",
                "add_class_constants": True,
                "constant_visibility": "private",
                "formatter": {"enabled": True, "name": "black", "line_length": 120},
                "output": {"mode": "merge", "atomic_write": False},
                "unknown": 1,
            }
        )

        assert config.namespace == "acme.models"
        assert config.add_class_constants
        assert config.constant_visibility == "private"
        assert config.formatter.name == "black"
        assert config.formatter.line_length == 120
        assert config.output.mode == OutputMode.MERGE
        assert not config.output.atomic_write
        assert config.output.validate_before_write
        assert not hasattr(config, "unknown")

    def test_to_dict_round_trip(self):
        config = CodeGeneratorConfig.from_dict({"namespace": "acme", "typed": False, "output": {"mode": "force"}})
        data = config.to_dict()

        assert data["output"]["mode"] == "force"
        assert data["typed"] is False
        assert CodeGeneratorConfig.from_dict(data).to_dict() == data

    def test_output_mode_values(self):
        assert [mode.value for mode in OutputMode] == ["error", "force", "merge"]


if __name__ == "__main__":
    pytest.main([__file__])
