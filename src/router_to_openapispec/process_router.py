"""Build OpenAPI path items for unversioned routes."""

import logging

from .errors import RouteProcessingError
from .operation_id import OperationIdAllocator
from .router.base import Route
from .schema.converter import convert, convert_path_parameters, convert_query
from .util import (
    assign_to_paths_object,
    extract_validation_schema_from_route,
    get_json_content_string,
    get_path_parameters,
)

logger = logging.getLogger(__name__)

NO_DESCRIPTION = "No description"


def prepare_routes(routes: list, path_starts_with: str | None = None, access: str | None = None) -> list:
    """Keep the routes matching the path prefix and access level, if given."""
    if path_starts_with:
        routes = [r for r in routes if r.path.startswith(path_starts_with)]
    if access:
        routes = [r for r in routes if r.options.access == access]
    return routes


def process_router(
    router,
    path_starts_with: str | None = None,
    *,
    allocator: OperationIdAllocator | None = None,
    access: str | None = None,
) -> dict:
    """Return the paths object for every route of ``router``.

    The first route that fails aborts processing with a RouteProcessingError.
    """
    allocator = allocator or OperationIdAllocator()
    routes = prepare_routes(router.get_routes(), path_starts_with, access)

    paths: dict = {}
    for route in routes:
        logger.debug("Processing route %s %s", route.method.upper(), route.path)
        try:
            operation = _build_operation(route, allocator)
        except Exception as e:
            raise RouteProcessingError(route.path, e) from e
        assign_to_paths_object(paths, route.path, {route.method: operation})
    return paths


def _build_operation(route: Route, allocator: OperationIdAllocator) -> dict:
    path_params = get_path_parameters(route.path)
    schemas = extract_validation_schema_from_route(route)

    path_objects: list[dict] = []
    query_objects: list[dict] = []
    if schemas:
        if schemas.params is not None:
            path_objects = convert_path_parameters(schemas.params, path_params)
        if schemas.query is not None:
            query_objects = convert_query(schemas.query)

    operation = {}
    if schemas and schemas.body is not None:
        operation["requestBody"] = {
            "content": {get_json_content_string(): {"schema": convert(schemas.body)}}
        }
    operation["responses"] = _extract_responses(route)
    operation["parameters"] = path_objects + query_objects
    operation["operationId"] = allocator.allocate(route.path)
    return operation


def _extract_responses(route: Route) -> dict:
    responses = {}
    for status_code, response in route.options.responses.items():
        responses[str(status_code)] = {
            "description": route.options.description or NO_DESCRIPTION,
            "content": {get_json_content_string(): {"schema": convert(response.body)}},
        }
    return responses
