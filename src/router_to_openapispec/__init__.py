"""Generate OpenAPI 3.0 documents from registered HTTP routes."""

from .errors import (
    OpenApiGenerationError,
    PathParameterMismatchError,
    RouteProcessingError,
    SchemaConversionError,
)
from .generate import AppRouters, GenerateOpenApiDocumentOptions, generate_openapi_document
from .router.router import Router, VersionedRouter

__all__ = [
    "AppRouters",
    "GenerateOpenApiDocumentOptions",
    "OpenApiGenerationError",
    "PathParameterMismatchError",
    "RouteProcessingError",
    "Router",
    "SchemaConversionError",
    "VersionedRouter",
    "generate_openapi_document",
]
