"""
Shared fixtures: generate value object modules into a temporary directory and import them.
"""

from __future__ import annotations

import importlib
import sys

import pytest

from json_schema_to_value_objects.pipeline import CodeGeneratorConfig, PipelineGenerator


@pytest.fixture
def generate_modules(tmp_path):
    """Return a function writing the modules of a schema to tmp_path and importing its namespace."""
    roots = set()
    sys.path.insert(0, str(tmp_path))

    def generate(name, schema, namespace, **options):
        config = CodeGeneratorConfig(namespace=namespace, **options)
        PipelineGenerator(name, schema, config).write(tmp_path)
        roots.add(namespace.split(".")[0])
        importlib.invalidate_caches()
        return importlib.import_module(namespace)

    yield generate

    sys.path.remove(str(tmp_path))
    for module in list(sys.modules):
        if module.split(".")[0] in roots:
            del sys.modules[module]
