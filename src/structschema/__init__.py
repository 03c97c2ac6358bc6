"""structschema: JSON Schema generation from Go struct definitions.

This package provides:
- parse_file / parse_source: Go declaration parser
- find_struct: Struct type lookup
- extract_fields / parse_tag: json and schema tag extraction
- build_schema / render_schema / write_schema: Schema model, text and file
- generate: The whole pipeline for one type
"""

from __future__ import annotations

__version__ = "0.1.0"

from structschema.builder import build_schema, build_schema_for
from structschema.config import GeneratorSettings
from structschema.errors import (
    NotFoundError,
    ParseError,
    RenderError,
    SchemaWriteError,
    StructSchemaError,
)
from structschema.extractor import (
    extract_fields,
    infer_type,
    parse_schema_options,
    parse_tag,
)
from structschema.locator import find_struct
from structschema.models import FieldSpec, SchemaSpec, SchemaType
from structschema.pipeline import GenerationResult, generate
from structschema.renderer import render_schema
from structschema.source import parse_file, parse_source
from structschema.writer import output_filename, write_schema

__all__ = [
    "__version__",
    # Pipeline
    "generate",
    "GenerationResult",
    "GeneratorSettings",
    # Stages
    "parse_file",
    "parse_source",
    "find_struct",
    "parse_tag",
    "parse_schema_options",
    "infer_type",
    "extract_fields",
    "build_schema",
    "build_schema_for",
    "render_schema",
    "output_filename",
    "write_schema",
    # Models
    "FieldSpec",
    "SchemaSpec",
    "SchemaType",
    # Errors
    "StructSchemaError",
    "ParseError",
    "NotFoundError",
    "RenderError",
    "SchemaWriteError",
]
