"""Schema description models.

FieldSpec describes one struct field that becomes a JSON Schema property,
SchemaSpec the whole document for one struct type. Both are immutable:
they are built once per invocation and only read by the renderer.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SchemaType(str, Enum):
    """JSON Schema primitive types a Go field can map to."""

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"


class FieldSpec(BaseModel):
    """One struct field under consideration.

    Attributes:
        name: Property name, taken verbatim from the json tag.
        type: Inferred JSON Schema primitive type.
        required: True when the schema tag contains ``required``.
        min_length: Minimum length from ``minLength=N`` (None if absent).
        format: Format from ``format=...`` (None if absent).
        description: Human-readable description. No tag key sets it yet.

    Example:
        >>> FieldSpec(name="email", required=True, format="email")
        FieldSpec(name='email', type=<SchemaType.STRING: 'string'>, ...)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., description="Property name from the json tag")
    type: SchemaType = Field(
        default=SchemaType.STRING,
        description="JSON Schema primitive type",
    )
    required: bool = Field(default=False, description="Field is required")
    min_length: int | None = Field(
        default=None,
        ge=0,
        description="Minimum string length",
    )
    format: str | None = Field(default=None, description="String format (e.g. email)")
    description: str | None = Field(default=None, description="Property description")


class SchemaSpec(BaseModel):
    """JSON Schema description of one struct type.

    Attributes:
        type_name: Go type name, used as the schema title.
        fields: Properties in source declaration order.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    type_name: str = Field(..., min_length=1, description="Schema title")
    fields: list[FieldSpec] = Field(
        default_factory=list,
        description="Properties in declaration order",
    )

    @property
    def property_names(self) -> list[str]:
        """Return the property names in output order."""
        return [field.name for field in self.fields]
