"""Translate pydantic models and type annotations into schema variants."""

import datetime
import decimal
import enum
import inspect
import types
import uuid
from typing import Annotated, Any, Literal, Union, get_args, get_origin

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError, to_jsonable_python
from pydantic.fields import FieldInfo

from ..errors import SchemaConversionError
from .types import (
    SCHEMA_TYPES,
    AnySchema,
    ArraySchema,
    EnumSchema,
    ObjectSchema,
    PrimitiveSchema,
    UnionSchema,
)

# bool must come before int: bool is a subclass of int.
_PRIMITIVES = [
    (bool, "boolean", None),
    (int, "integer", None),
    (float, "number", None),
    (decimal.Decimal, "number", None),
    (str, "string", None),
    (bytes, "string", "byte"),
    (datetime.datetime, "string", "date-time"),
    (datetime.date, "string", "date"),
    (datetime.time, "string", "time"),
    (uuid.UUID, "string", "uuid"),
]

_ARRAY_ORIGINS = (list, set, frozenset, tuple)

# (metadata attribute, schema field, exclusive flag)
_BOUNDS = [
    ("ge", "minimum", None),
    ("gt", "minimum", "exclusive_minimum"),
    ("le", "maximum", None),
    ("lt", "maximum", "exclusive_maximum"),
]


def as_schema(value: Any):
    """Return ``value`` as a schema variant, translating it if needed."""
    if isinstance(value, SCHEMA_TYPES):
        return value
    return from_annotation(value)


def from_annotation(annotation: Any, _seen: tuple = ()):
    """Translate a Python type annotation into a schema variant.

    Raises SchemaConversionError for anything without an OpenAPI shape.
    """
    origin = get_origin(annotation)
    args = get_args(annotation)

    if annotation is Any or annotation is object:
        return AnySchema()

    if origin is Annotated:
        schema = from_annotation(args[0], _seen)
        return _apply_metadata(schema, args[1:])

    if origin is Union or origin is types.UnionType:
        members = [a for a in args if a is not type(None)]
        nullable = len(members) < len(args)
        if len(members) == 1:
            schema = from_annotation(members[0], _seen)
        else:
            schema = UnionSchema(variants=[from_annotation(m, _seen) for m in members])
        if nullable:
            schema = schema.model_copy(update={"nullable": True})
        return schema

    if origin is Literal:
        return EnumSchema(values=list(args))

    if origin in _ARRAY_ORIGINS:
        if origin is tuple and not (len(args) == 2 and args[1] is Ellipsis):
            raise SchemaConversionError(f"Fixed-length tuples are not supported: {annotation!r}")
        items = from_annotation(args[0], _seen) if args and args[0] is not Any else None
        return ArraySchema(items=items)

    if origin is dict:
        if args and args[0] is not str:
            raise SchemaConversionError(f"Object keys must be strings: {annotation!r}")
        extra = from_annotation(args[1], _seen) if args and args[1] is not Any else True
        return ObjectSchema(additional_properties=extra)

    if annotation in _ARRAY_ORIGINS:
        return ArraySchema()
    if annotation is dict:
        return ObjectSchema(additional_properties=True)

    if inspect.isclass(annotation):
        if issubclass(annotation, BaseModel):
            return from_model(annotation, _seen)
        if issubclass(annotation, enum.Enum):
            return EnumSchema(values=[member.value for member in annotation])
        for py_type, oas_type, fmt in _PRIMITIVES:
            if issubclass(annotation, py_type):
                return PrimitiveSchema(type=oas_type, format=fmt)

    raise SchemaConversionError(f"Unsupported schema type: {annotation!r}")


def from_model(model: type[BaseModel], _seen: tuple = ()) -> ObjectSchema:
    """Translate a pydantic model class into an object schema."""
    if model in _seen:
        raise SchemaConversionError(f"Recursive model is not supported: {model.__name__}")
    seen = _seen + (model,)

    properties = {}
    required = []
    for name, field in model.model_fields.items():
        key = field.alias or name
        schema = from_annotation(field.annotation, seen)
        schema = _apply_metadata(schema, field.metadata)

        update = {}
        if field.description:
            update["description"] = field.description
        if field.is_required():
            required.append(key)
        elif field.default_factory is None:
            update["default"] = _plain_default(field.default)
        if update:
            schema = schema.model_copy(update=update)
        properties[key] = schema

    return ObjectSchema(
        description=inspect.getdoc(model) if model.__doc__ else None,
        properties=properties,
        required=required,
    )


def _apply_metadata(schema, metadata):
    """Carry Field() constraints (ge, lt, min_length, pattern, ...) over."""
    update = {}
    for item in metadata:
        if isinstance(item, FieldInfo):
            schema = _apply_metadata(schema, item.metadata)
            if item.description:
                update["description"] = item.description
            continue
        for attr, target, flag in _BOUNDS:
            value = getattr(item, attr, None)
            if value is not None and isinstance(schema, PrimitiveSchema):
                update[target] = value
                if flag:
                    update[flag] = True
        min_length = getattr(item, "min_length", None)
        max_length = getattr(item, "max_length", None)
        if isinstance(schema, ArraySchema):
            if min_length is not None:
                update["min_items"] = min_length
            if max_length is not None:
                update["max_items"] = max_length
        elif isinstance(schema, PrimitiveSchema):
            if min_length is not None:
                update["min_length"] = min_length
            if max_length is not None:
                update["max_length"] = max_length
            pattern = getattr(item, "pattern", None)
            if pattern is not None:
                update["pattern"] = pattern if isinstance(pattern, str) else pattern.pattern
    if not update:
        return schema
    return schema.model_copy(update=update)


def _plain_default(value):
    try:
        return to_jsonable_python(value)
    except PydanticSerializationError as e:
        raise SchemaConversionError(f"Default value is not serializable: {value!r}") from e
