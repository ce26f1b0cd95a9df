import json
import logging

import click

from .loader import DocumentError, extract_components, load_document
from .pipeline import (
    CodeGeneratorConfig,
    NameCollisionError,
    OutputExistsError,
    PipelineGenerator,
    UnknownComponentError,
    UnsupportedOutputError,
)
from .utils import parse_include


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--output", "-o", required=True, type=click.Path(dir_okay=False, resolve_path=True), help="TypeScript file to write")
@click.option(
    "--overwrite",
    is_flag=True,
    default=False,
    help="Overwrite the output file if it already exists",
)
@click.option("--include", "-i", default=None, type=str, help="Only include specific types in the output (comma separated)")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log resolution and emission details")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
def openapi_to_amplify(output, overwrite, include, config, verbose, path):
    """Generate an Amplify data schema from the component schemas of an OpenAPI document."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    if config is not None:
        with open(config) as f:
            config = CodeGeneratorConfig.from_dict(json.load(f))
    else:
        config = CodeGeneratorConfig()

    # CLI flags override the config file
    if overwrite:
        config.output.overwrite = True
    if include is not None:
        config.include = parse_include(include)

    try:
        schemas = extract_components(load_document(path))
        PipelineGenerator(schemas, config).generate_to_file(output)
    except (DocumentError, OutputExistsError, UnsupportedOutputError, UnknownComponentError, NameCollisionError) as exc:
        raise click.ClickException(str(exc)) from exc
