"""CLI entry point for structschema.

Meant to be called from a go:generate directive::

    //go:generate structschema -type=User $GOFILE
"""

from __future__ import annotations

import click
from pydantic import ValidationError as PydanticValidationError

from structschema import __version__
from structschema.cli.errors import (
    EXIT_FAILURE,
    handle_generation_error,
    handle_settings_error,
)
from structschema.cli.output import error, set_no_color, success
from structschema.config import GeneratorSettings
from structschema.errors import StructSchemaError
from structschema.observability import configure_logging
from structschema.pipeline import generate


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="structschema")
@click.option(
    "--no-color",
    is_flag=True,
    default=False,
    help="Disable colored output.",
    is_eager=True,
    expose_value=False,
    callback=lambda ctx, param, value: set_no_color(value) if value else None,
)
@click.option(
    "-t",
    "--type",
    "-type",
    "type_name",
    type=str,
    default=None,
    help="Struct type name to generate a schema for (required).",
)
@click.option(
    "-o",
    "--output-dir",
    "output_dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory for the schema file [default: current directory]",
)
@click.option(
    "--strip-json-options",
    is_flag=True,
    default=False,
    help="Drop ',omitempty'-style suffixes from json tag names.",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Log pipeline diagnostics to stderr.",
)
@click.argument("input_file", required=False, type=click.Path(dir_okay=False))
def cli(
    type_name: str | None,
    output_dir: str | None,
    strip_json_options: bool,
    verbose: bool,
    input_file: str | None,
) -> None:
    """Generate a JSON Schema from a Go struct definition.

    Reads INPUT_FILE, finds the struct named by --type and writes
    <type>.schema.json (lower-cased type name).

    Examples:

        structschema -type=User user.go

        structschema --type User --output-dir schemas user.go

        //go:generate structschema -type=User $GOFILE
    """
    if not type_name:
        error("Please specify type name using -type flag")
        raise SystemExit(EXIT_FAILURE)

    if not input_file:
        error("Please specify an input file")
        raise SystemExit(EXIT_FAILURE)

    # Options given on the command line win over STRUCTSCHEMA_* variables
    overrides: dict[str, object] = {}
    if output_dir is not None:
        overrides["output_dir"] = output_dir
    if strip_json_options:
        overrides["strip_json_options"] = True

    try:
        settings = GeneratorSettings(**overrides)
    except PydanticValidationError as e:
        handle_settings_error(e)

    configure_logging("DEBUG" if verbose else settings.log_level)

    try:
        result = generate(input_file, type_name, settings)
    except StructSchemaError as e:
        handle_generation_error(e)

    success(f"Schema file generated successfully: {result.output_path}")


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
