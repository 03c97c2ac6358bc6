"""End-to-end schema generation: parse, locate, extract, render, write."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import structlog

from structschema.builder import build_schema_for
from structschema.config import GeneratorSettings
from structschema.models import SchemaSpec
from structschema.renderer import render_schema
from structschema.source import parse_file
from structschema.writer import write_schema

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of one successful generation run."""

    schema: SchemaSpec
    text: str
    output_path: Path


def generate(
    input_file: Path | str,
    type_name: str,
    settings: GeneratorSettings | None = None,
) -> GenerationResult:
    """Generate the JSON Schema file for one struct type.

    The output file is only written after parsing, lookup and rendering
    have all succeeded.

    Args:
        input_file: Go source file declaring the type.
        type_name: Struct type to describe.
        settings: Generator settings (defaults to GeneratorSettings()).

    Returns:
        GenerationResult with the schema model, text and output path.

    Raises:
        ParseError: If the source file is not valid Go.
        NotFoundError: If the struct type is not declared in the file.
        RenderError: If the template cannot be applied.
        SchemaWriteError: If the output file cannot be written.

    Example:
        >>> result = generate("user.go", "User")
        >>> result.output_path
        PosixPath('user.schema.json')
    """
    settings = settings or GeneratorSettings()
    log = logger.bind(input_file=str(input_file), type_name=type_name)

    source = parse_file(input_file)
    schema = build_schema_for(
        source,
        type_name,
        strip_json_options=settings.strip_json_options,
    )
    text = render_schema(schema)
    output_path = write_schema(text, schema.type_name, settings.output_dir)

    log.info("schema_generated", output_path=str(output_path), properties=len(schema.fields))
    return GenerationResult(schema=schema, text=text, output_path=output_path)
