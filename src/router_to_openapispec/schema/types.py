"""Schema variants understood by the converter.

Validation schemas coming from routes are translated into one of these
six shapes before conversion to OpenAPI. ``kind`` is the tag.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field


class SchemaBase(BaseModel):
    description: str | None = None
    nullable: bool = False
    default: Any = None  # only emitted when explicitly set


class PrimitiveSchema(SchemaBase):
    kind: Literal["primitive"] = "primitive"
    type: Literal["string", "number", "integer", "boolean"]
    format: str | None = None
    minimum: float | None = None
    maximum: float | None = None
    exclusive_minimum: bool = False
    exclusive_maximum: bool = False
    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None


class ObjectSchema(SchemaBase):
    kind: Literal["object"] = "object"
    properties: dict[str, "Schema"] = {}
    required: list[str] = []
    additional_properties: Union["Schema", bool, None] = None


class ArraySchema(SchemaBase):
    kind: Literal["array"] = "array"
    items: Union["Schema", None] = None
    min_items: int | None = None
    max_items: int | None = None


class UnionSchema(SchemaBase):
    kind: Literal["union"] = "union"
    variants: list["Schema"]


class EnumSchema(SchemaBase):
    kind: Literal["enum"] = "enum"
    values: list[Any]


class AnySchema(SchemaBase):
    """Accepts any value."""

    kind: Literal["any"] = "any"


Schema = Annotated[
    Union[PrimitiveSchema, ObjectSchema, ArraySchema, UnionSchema, EnumSchema, AnySchema],
    Field(discriminator="kind"),
]

SCHEMA_TYPES = (PrimitiveSchema, ObjectSchema, ArraySchema, UnionSchema, EnumSchema, AnySchema)

for _model in SCHEMA_TYPES:
    _model.model_rebuild()
