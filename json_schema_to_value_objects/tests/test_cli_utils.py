#!/usr/bin/env python3

import pytest

from json_schema_to_value_objects.cli_utils import reconstruct_command_line
from json_schema_to_value_objects.json_schema_to_value_objects import json_schema_to_value_objects


class TestCliUtils:
    """Test cases for CLI utilities"""

    def test_reconstruct_command_line_without_context(self):
        """Test command reconstruction without active Click context (fallback)"""
        # Since there's no active Click context in tests, this should return fallback
        result = reconstruct_command_line(json_schema_to_value_objects)
        assert result == "json_schema_to_value_objects"

    def test_custom_program_name(self):
        """Test that the fallback uses the given program name"""
        result = reconstruct_command_line(json_schema_to_value_objects, program_name="codegen")
        assert result == "codegen"


if __name__ == "__main__":
    pytest.main([__file__])
