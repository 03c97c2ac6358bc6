"""Field extraction from Go struct declarations.

Reads the ``json`` and ``schema`` sub-tags of each struct field and infers
a JSON Schema primitive type from the declared Go type.

Tag grammar::

    `json:"name" schema:"required,minLength=2,format=email"`

Tag tokens are separated by whitespace and must have the form
``key:"value"``; anything else is ignored. The ``schema`` value is scanned
by substring, so an option value that itself contains ``minLength=`` or
``format=`` will be picked up as that option.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

import structlog

from structschema.models import FieldSpec, SchemaType
from structschema.source import Field, TypeExpr

logger = structlog.get_logger(__name__)

# json tag value that excludes a field from the JSON representation
SKIP_MARKER = "-"

# Go predeclared type names with a non-default schema type
GO_TYPE_MAP: dict[str, SchemaType] = {
    "string": SchemaType.STRING,
    "int": SchemaType.INTEGER,
    "int32": SchemaType.INTEGER,
    "int64": SchemaType.INTEGER,
    "float32": SchemaType.NUMBER,
    "float64": SchemaType.NUMBER,
    "bool": SchemaType.BOOLEAN,
}

_UNSIGNED_INT_RE = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class SchemaOptions:
    """Signals read from a ``schema`` tag value."""

    required: bool = False
    min_length: int | None = None
    format: str | None = None


def parse_tag(tag: str) -> dict[str, str]:
    """Parse a struct tag into a mapping of key to value.

    Tokens that do not split into exactly two parts on ``:`` are skipped.
    Surrounding double quotes are stripped from values. A repeated key
    keeps its last value.

    Args:
        tag: Decoded struct tag string.

    Returns:
        Mapping of tag key to tag value.

    Example:
        >>> parse_tag('json:"id" schema:"required,min=1"')
        {'json': 'id', 'schema': 'required,min=1'}
        >>> parse_tag('json:"a:b" db:"x"')
        {'db': 'x'}
    """
    tags: dict[str, str] = {}
    for token in tag.split():
        parts = token.split(":")
        if len(parts) != 2:
            continue
        key, value = parts
        tags[key] = value.strip('"')
    return tags


def _option_value(options: str, prefix: str) -> str | None:
    """Return the text after the first ``prefix`` up to the next comma."""
    if prefix not in options:
        return None
    return options.split(prefix, 1)[1].split(",", 1)[0]


def parse_schema_options(value: str) -> SchemaOptions:
    """Read the ``required``, ``minLength=`` and ``format=`` signals.

    Each signal is independent and found by substring search, so option
    order does not matter. ``minLength`` must be a non-negative integer,
    otherwise it is left out. An empty ``format=`` is left out.

    Args:
        value: The ``schema`` tag value (may be empty).

    Returns:
        Parsed SchemaOptions.

    Example:
        >>> parse_schema_options("required,minLength=2")
        SchemaOptions(required=True, min_length=2, format=None)
        >>> parse_schema_options("minLength=abc")
        SchemaOptions(required=False, min_length=None, format=None)
    """
    min_length = None
    raw_min_length = _option_value(value, "minLength=")
    if raw_min_length is not None:
        if _UNSIGNED_INT_RE.fullmatch(raw_min_length):
            min_length = int(raw_min_length)
        else:
            logger.debug("min_length_ignored", value=raw_min_length)

    return SchemaOptions(
        required="required" in value,
        min_length=min_length,
        format=_option_value(value, "format=") or None,
    )


def infer_type(type_expr: TypeExpr) -> SchemaType:
    """Map a declared Go type to a JSON Schema primitive type.

    Only bare type names are recognized. Everything else, including
    slices, maps, pointers, structs, parenthesized types, generic
    instantiations and qualified names, maps to ``string``.

    Example:
        >>> infer_type(TypeExpr(TYPE_IDENTIFIER, "int64", 1, 1))
        <SchemaType.INTEGER: 'integer'>
    """
    if type_expr.is_identifier:
        return GO_TYPE_MAP.get(type_expr.text, SchemaType.STRING)
    return SchemaType.STRING


def property_name(json_value: str, strip_options: bool = False) -> str:
    """Return the property name for a ``json`` tag value.

    The value is used verbatim unless ``strip_options`` is set, in which
    case everything from the first comma on (``,omitempty``) is dropped.
    """
    if strip_options:
        return json_value.split(",", 1)[0]
    return json_value


def extract_field(field: Field, *, strip_json_options: bool = False) -> FieldSpec | None:
    """Build the FieldSpec for one struct field.

    Args:
        field: Parsed struct field.
        strip_json_options: Drop ``,option`` suffixes from json names.

    Returns:
        FieldSpec, or None when the field has no tag or is marked ``json:"-"``.
    """
    if field.tag is None:
        logger.debug("field_skipped", names=list(field.names), line=field.line, reason="no tag")
        return None

    tags = parse_tag(field.tag)
    json_value = tags.get("json", "")
    if json_value == SKIP_MARKER:
        logger.debug("field_skipped", names=list(field.names), line=field.line, reason="json:-")
        return None

    options = parse_schema_options(tags.get("schema", ""))
    return FieldSpec(
        name=property_name(json_value, strip_json_options),
        type=infer_type(field.type),
        required=options.required,
        min_length=options.min_length,
        format=options.format,
    )


def extract_fields(
    struct_type: TypeExpr,
    *,
    strip_json_options: bool = False,
) -> list[FieldSpec]:
    """Extract FieldSpecs from a struct in declaration order.

    Args:
        struct_type: Parsed ``struct_type`` expression.
        strip_json_options: Drop ``,option`` suffixes from json names.

    Returns:
        One FieldSpec per tagged, non-skipped field declaration.
    """
    specs: list[FieldSpec] = []
    for field in struct_type.fields:
        spec = extract_field(field, strip_json_options=strip_json_options)
        if spec is not None:
            specs.append(spec)

    logger.debug(
        "fields_extracted",
        declared=len(struct_type.fields),
        extracted=len(specs),
    )
    return specs
