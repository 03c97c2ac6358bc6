"""Render a SchemaSpec as draft-07 JSON Schema text.

The document layout lives in a Jinja2 template. Every name and value is
passed through a JSON encoder before it reaches the template, so quotes
and backslashes in tag values cannot corrupt the output.
"""

from __future__ import annotations

import json
from typing import Any

import structlog
from jinja2 import StrictUndefined, TemplateError
from jinja2.sandbox import SandboxedEnvironment

from structschema.errors import RenderError
from structschema.models import FieldSpec, SchemaSpec

logger = structlog.get_logger(__name__)

SCHEMA_DIALECT = "http://json-schema.org/draft-07/schema#"

SCHEMA_TEMPLATE = """\
{
  "$schema": {{ dialect | json }},
  "title": {{ title | json }},
  "type": "object",
  "properties": {
{% for name, members in properties %}
    {{ name | json }}: {
{% for key, value in members %}
      {{ key | json }}: {{ value | json }}{{ "," if not loop.last else "" }}
{% endfor %}
    }{{ "," if not loop.last else "" }}
{% endfor %}
  }
}
"""


def _to_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False)


def _create_environment() -> SandboxedEnvironment:
    env = SandboxedEnvironment(
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
        autoescape=False,
    )
    env.filters["json"] = _to_json
    return env


_env = _create_environment()


def property_members(field: FieldSpec) -> list[tuple[str, Any]]:
    """Return the JSON members of one property in output order.

    ``type`` always comes first, followed by ``required``, ``minLength``,
    ``format`` and ``description`` when they are set. A minLength of 0
    is set and therefore emitted.

    Example:
        >>> property_members(FieldSpec(name="email", required=True, format="email"))
        [('type', 'string'), ('required', True), ('format', 'email')]
    """
    members: list[tuple[str, Any]] = [("type", field.type.value)]
    if field.required:
        members.append(("required", True))
    if field.min_length is not None:
        members.append(("minLength", field.min_length))
    if field.format:
        members.append(("format", field.format))
    if field.description:
        members.append(("description", field.description))
    return members


def render_schema(schema: SchemaSpec, template: str = SCHEMA_TEMPLATE) -> str:
    """Render a SchemaSpec to JSON Schema text.

    Args:
        schema: Schema description to render.
        template: Jinja2 template source (defaults to SCHEMA_TEMPLATE).

    Returns:
        JSON Schema document text ending with a newline.

    Raises:
        RenderError: If the template cannot be compiled or applied.
    """
    context = {
        "dialect": SCHEMA_DIALECT,
        "title": schema.type_name,
        "properties": [(field.name, property_members(field)) for field in schema.fields],
    }
    try:
        rendered = _env.from_string(template).render(**context)
    except TemplateError as e:
        raise RenderError(
            f"Template execution failed for {schema.type_name}",
            internal_details=repr(e),
        ) from e

    logger.debug("schema_rendered", title=schema.type_name, properties=len(schema.fields))
    return rendered
