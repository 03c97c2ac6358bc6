"""Assemble extracted fields into a SchemaSpec."""

from __future__ import annotations

from collections.abc import Iterable

from structschema.extractor import extract_fields
from structschema.locator import find_struct
from structschema.models import FieldSpec, SchemaSpec
from structschema.source import SourceFile


def build_schema(type_name: str, fields: Iterable[FieldSpec]) -> SchemaSpec:
    """Collect ordered fields and a type name into a SchemaSpec."""
    return SchemaSpec(type_name=type_name, fields=list(fields))


def build_schema_for(
    source: SourceFile,
    type_name: str,
    *,
    strip_json_options: bool = False,
) -> SchemaSpec:
    """Locate ``type_name`` in ``source`` and build its SchemaSpec.

    Args:
        source: Parsed source file.
        type_name: Struct type to describe.
        strip_json_options: Drop ``,option`` suffixes from json names.

    Returns:
        SchemaSpec for the struct.

    Raises:
        NotFoundError: If the struct is not declared in the file.
    """
    decl = find_struct(source, type_name)
    fields = extract_fields(decl.type, strip_json_options=strip_json_options)
    return build_schema(decl.name, fields)
