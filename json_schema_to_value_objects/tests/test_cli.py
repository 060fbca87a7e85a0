#!/usr/bin/env python3
"""
Tests for the json_schema_to_value_objects command.
"""

import json

import pytest
from click.testing import CliRunner

from json_schema_to_value_objects.json_schema_to_value_objects import json_schema_to_value_objects

SCHEMA = {
    "type": "object",
    "properties": {
        "email": {"type": "string"},
        "plan": {"enum": ["free", "pro"]},
    },
}


@pytest.fixture
def schema_path(tmp_path):
    path = tmp_path / "customer.json"
    path.write_text(json.dumps(SCHEMA))
    return path


class TestCommand:
    """Tests for the command line entry point"""

    def test_generates_modules(self, schema_path, tmp_path):
        output = tmp_path / "out"
        result = CliRunner().invoke(json_schema_to_value_objects, [str(schema_path), str(output), "--namespace", "shop"])

        assert result.exit_code == 0, result.output
        assert (output / "shop" / "__init__.py").exists()
        assert (output / "shop" / "exception.py").exists()

        code = (output / "shop" / "__init__.py").read_text()
        assert "class Customer:" in code
        first_line = code.splitlines()[0]
        assert "json_schema_to_value_objects customer.json" in first_line
        assert first_line.endswith("--namespace shop")

    def test_name_option(self, schema_path, tmp_path):
        output = tmp_path / "out"
        result = CliRunner().invoke(json_schema_to_value_objects, ["-n", "client", str(schema_path), str(output), "--namespace", "shop"])

        assert result.exit_code == 0, result.output
        assert "class Client:" in (output / "shop" / "__init__.py").read_text()

    def test_existing_files_are_an_error(self, schema_path, tmp_path):
        output = tmp_path / "out"
        runner = CliRunner()
        runner.invoke(json_schema_to_value_objects, [str(schema_path), str(output), "--namespace", "shop"])

        result = runner.invoke(json_schema_to_value_objects, [str(schema_path), str(output), "--namespace", "shop"])

        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_force_mode(self, schema_path, tmp_path):
        output = tmp_path / "out"
        runner = CliRunner()
        runner.invoke(json_schema_to_value_objects, [str(schema_path), str(output), "--namespace", "shop"])

        result = runner.invoke(json_schema_to_value_objects, [str(schema_path), str(output), "--namespace", "shop", "--mode", "force"])

        assert result.exit_code == 0, result.output

    def test_config_file(self, schema_path, tmp_path):
        """Options are read from the config file, flags override them"""
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"namespace": "store", "add_class_constants": True, "add_generation_comment": False}))
        output = tmp_path / "out"

        result = CliRunner().invoke(
            json_schema_to_value_objects,
            [str(schema_path), str(output), "-c", str(config_path), "--no-getters"],
        )

        assert result.exit_code == 0, result.output
        code = (output / "store" / "__init__.py").read_text()
        assert "    EMAIL = 'email'" in code
        assert "def email(self)" not in code
        assert not code.startswith("#")

    def test_invalid_schema(self, tmp_path):
        schema_path = tmp_path / "broken.json"
        schema_path.write_text(json.dumps({"type": "object", "properties": {"owner": {"$ref": "#/definitions/missing"}}}))

        result = CliRunner().invoke(json_schema_to_value_objects, [str(schema_path), str(tmp_path / "out")])

        assert result.exit_code == 1
        assert "#/definitions/missing" in result.output


if __name__ == "__main__":
    pytest.main([__file__])
