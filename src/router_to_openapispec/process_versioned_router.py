"""Build OpenAPI path items for versioned routes.

Path and query parameters come from the newest handler only: they are
expected to stay backwards compatible across versions. Request and response
bodies are collected from every handler, each under its own media type.
"""

import logging

from .errors import RouteProcessingError
from .operation_id import OperationIdAllocator
from .process_router import NO_DESCRIPTION, prepare_routes
from .router.base import VersionedRoute
from .schema.converter import convert, convert_path_parameters, convert_query
from .util import (
    assign_to_paths_object,
    extract_validation_schema_from_versioned_handler,
    get_path_parameters,
    get_versioned_content_string,
)
from .versions import newest

logger = logging.getLogger(__name__)


def process_versioned_router(
    router,
    path_starts_with: str | None = None,
    *,
    allocator: OperationIdAllocator | None = None,
    access: str | None = None,
) -> dict:
    """Return the paths object for every versioned route of ``router``."""
    allocator = allocator or OperationIdAllocator()
    routes = prepare_routes(router.get_routes(), path_starts_with, access)

    paths: dict = {}
    for route in routes:
        version = newest([h.version for h in route.handlers])
        logger.debug(
            "Processing versioned route %s %s (newest version: %s)",
            route.method.upper(), route.path, version,
        )
        try:
            operation = _build_operation(route, version, allocator)
        except Exception as e:
            raise RouteProcessingError(route.path, e, version=version) from e
        assign_to_paths_object(paths, route.path, {route.method: operation})
    return paths


def _build_operation(route: VersionedRoute, version: str | None, allocator: OperationIdAllocator) -> dict:
    path_params = get_path_parameters(route.path)
    handler = next((h for h in route.handlers if h.version == version), None)
    schemas = extract_validation_schema_from_versioned_handler(handler) if handler else None
    request = schemas.request if schemas else None

    path_objects: list[dict] = []
    query_objects: list[dict] = []
    if request:
        if request.params is not None:
            path_objects = convert_path_parameters(request.params, path_params)
        if request.query is not None:
            query_objects = convert_query(request.query)

    operation = {}
    content = _extract_request_body(route)
    if content:
        operation["requestBody"] = {"content": content}
    operation["responses"] = _extract_responses(route)
    operation["parameters"] = path_objects + query_objects
    operation["operationId"] = allocator.allocate(route.path)
    return operation


def _extract_request_body(route: VersionedRoute) -> dict:
    content = {}
    for handler in route.handlers:
        schemas = extract_validation_schema_from_versioned_handler(handler)
        if not schemas or not schemas.request or schemas.request.body is None:
            continue
        content[get_versioned_content_string(handler.version)] = {
            "schema": convert(schemas.request.body)
        }
    return content


def _extract_responses(route: VersionedRoute) -> dict:
    # Every version contributes to the same status code entries; the
    # description is route-level and identical across versions.
    responses: dict = {}
    for handler in route.handlers:
        schemas = extract_validation_schema_from_versioned_handler(handler)
        if not schemas:
            continue
        for status_code, response in schemas.response.items():
            entry = responses.setdefault(
                str(status_code),
                {"description": route.options.description or NO_DESCRIPTION, "content": {}},
            )
            entry["content"][get_versioned_content_string(handler.version)] = {
                "schema": convert(response.body)
            }
    return responses
