import json
import logging
from pathlib import Path

import click

from .cli_utils import reconstruct_command_line
from .pipeline import CodeGenerationError, CodeGeneratorConfig, CodeMergeError, OutputMode, PipelineGenerator


@click.command()
@click.option("--name", "-n", default=None, type=str, help="Name of the root type (defaults to the schema file name)")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--namespace", default=None, type=str, help="Dotted module path of the generated classes")
@click.option("--getters/--no-getters", default=None, help="Add accessor methods to entity classes")
@click.option("--constants/--no-constants", default=None, help="Add one constant per property to entity classes")
@click.option(
    "--mode",
    default=None,
    type=click.Choice([m.value for m in OutputMode]),
    help="What to do with existing output files",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log every generated class and file")
@click.argument("path", default=None, type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, type=click.Path(file_okay=False, resolve_path=True))
def json_schema_to_value_objects(name, config, namespace, getters, constants, mode, verbose, path, output):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    with open(path) as f:
        schema = json.load(f)

    if config is not None:
        with open(config) as f:
            config = json.load(f)
            config = CodeGeneratorConfig.from_dict(config)
    else:
        config = CodeGeneratorConfig()

    # CLI flags override the config file
    if namespace is not None:
        config.namespace = namespace
    if getters is not None:
        config.add_getter_methods = getters
    if constants is not None:
        config.add_class_constants = constants
    if mode is not None:
        config.output.mode = OutputMode(mode)

    if name is None:
        name = Path(path).stem

    command_line = reconstruct_command_line(json_schema_to_value_objects)
    codegen = PipelineGenerator(name, schema, config, command_line=command_line)

    try:
        written = codegen.write(output)
    except (CodeGenerationError, CodeMergeError, FileExistsError) as e:
        raise click.ClickException(str(e)) from e

    for written_path in written:
        click.echo(written_path)
