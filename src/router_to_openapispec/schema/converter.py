"""Convert route validation schemas into OpenAPI 3.0 objects.

``convert`` returns a schema object; ``convert_path_parameters`` and
``convert_query`` return lists of parameter objects. All three are pure.
"""

from typing import Any

from ..errors import PathParameterMismatchError, SchemaConversionError
from ..util import PathParameter
from .adapter import as_schema
from .types import AnySchema, ArraySchema, EnumSchema, ObjectSchema, PrimitiveSchema, UnionSchema


def convert(schema: Any) -> dict:
    """Convert a validation schema into an OpenAPI schema object.

    ``None`` yields ``{}``, which accepts any value.
    """
    if schema is None:
        return {}
    return _to_oas(as_schema(schema))


def convert_path_parameters(schema: Any, known_parameters: dict[str, PathParameter]) -> list[dict]:
    """Build path parameter objects, checking them against the path template."""
    obj = _as_object(schema, "Path parameters")

    for name in obj.properties:
        if name not in known_parameters:
            raise PathParameterMismatchError(f"Unknown parameter: {name}")
    for name in known_parameters:
        if name not in obj.properties:
            raise PathParameterMismatchError(
                f"Path parameter '{name}' has no matching field in the params schema"
            )

    return [
        _parameter(name, "path", not known_parameters[name].optional, prop)
        for name, prop in obj.properties.items()
    ]


def convert_query(schema: Any) -> list[dict]:
    """Build one query parameter object per top-level field."""
    obj = _as_object(schema, "Query parameters")
    return [
        _parameter(name, "query", name in obj.required, prop)
        for name, prop in obj.properties.items()
    ]


def _as_object(schema: Any, what: str) -> ObjectSchema:
    converted = as_schema(schema)
    if not isinstance(converted, ObjectSchema):
        raise SchemaConversionError(f"{what} must be described by an object schema")
    return converted


def _parameter(name: str, location: str, required: bool, prop) -> dict:
    param = {
        "name": name,
        "in": location,
        "required": required,
        "schema": _to_oas(prop.model_copy(update={"description": None})),
    }
    if prop.description:
        param["description"] = prop.description
    return param


def _to_oas(schema) -> dict:
    if isinstance(schema, PrimitiveSchema):
        result = {"type": schema.type}
        _set(result, "format", schema.format)
        _set(result, "minimum", schema.minimum)
        if schema.exclusive_minimum:
            result["exclusiveMinimum"] = True
        _set(result, "maximum", schema.maximum)
        if schema.exclusive_maximum:
            result["exclusiveMaximum"] = True
        _set(result, "minLength", schema.min_length)
        _set(result, "maxLength", schema.max_length)
        _set(result, "pattern", schema.pattern)
    elif isinstance(schema, ObjectSchema):
        result = {
            "type": "object",
            "properties": {name: _to_oas(prop) for name, prop in schema.properties.items()},
        }
        if schema.required:
            result["required"] = list(schema.required)
        if isinstance(schema.additional_properties, bool):
            result["additionalProperties"] = schema.additional_properties
        elif schema.additional_properties is not None:
            result["additionalProperties"] = _to_oas(schema.additional_properties)
    elif isinstance(schema, ArraySchema):
        result = {
            "type": "array",
            "items": _to_oas(schema.items) if schema.items is not None else {},
        }
        _set(result, "minItems", schema.min_items)
        _set(result, "maxItems", schema.max_items)
    elif isinstance(schema, UnionSchema):
        if schema.nullable:
            # 3.0 ignores nullable without a sibling type; mark each variant
            variants = [v.model_copy(update={"nullable": True}) for v in schema.variants]
            result = {"anyOf": [_to_oas(variant) for variant in variants]}
        else:
            result = {"oneOf": [_to_oas(variant) for variant in schema.variants]}
    elif isinstance(schema, EnumSchema):
        result = {}
        enum_type = _enum_type(schema.values)
        if enum_type:
            result["type"] = enum_type
        result["enum"] = list(schema.values)
    elif isinstance(schema, AnySchema):
        result = {}
    else:
        raise SchemaConversionError(f"Unknown schema variant: {schema!r}")

    _set(result, "description", schema.description)
    if schema.nullable and not isinstance(schema, UnionSchema):
        result["nullable"] = True
    if "default" in schema.model_fields_set:
        result["default"] = schema.default
    return result


def _enum_type(values: list) -> str | None:
    if values and all(isinstance(v, str) for v in values):
        return "string"
    if values and all(isinstance(v, int) and not isinstance(v, bool) for v in values):
        return "integer"
    return None


def _set(target: dict, key: str, value) -> None:
    if value is not None:
        target[key] = value
