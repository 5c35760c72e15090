"""Assemble an OpenAPI 3.0 document from a set of routers."""

import copy
import logging
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from .operation_id import OperationIdAllocator
from .process_router import process_router
from .process_versioned_router import process_versioned_router
from .util import assign_to_paths_object

logger = logging.getLogger(__name__)

OPENAPI_VERSION = "3.0.0"

SECURITY = [{"basicAuth": []}, {"apiKeyAuth": []}]

SECURITY_SCHEMES = {
    "basicAuth": {"type": "http", "scheme": "basic"},
    "apiKeyAuth": {"type": "apiKey", "in": "header", "name": "Authorization"},
}


class AppRouters(BaseModel):
    """The routers of an application, each exposing ``get_routes()``."""

    routers: list[Any] = []
    versioned_routers: list[Any] = []


class GenerateOpenApiDocumentOptions(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    title: str
    description: str | None = None
    version: str
    base_url: str = Field(alias="baseUrl")
    docs_url: str | None = Field(default=None, alias="docsUrl")
    tags: list[str] | None = None
    path_starts_with: str | None = Field(default=None, alias="pathStartsWith")
    access: Literal["public", "internal"] | None = None


def generate_openapi_document(app_routers: AppRouters, options: GenerateOpenApiDocumentOptions) -> dict:
    """Generate the OpenAPI document for every route of ``app_routers``.

    Raises RouteProcessingError for the first route that cannot be converted;
    no partial document is returned.
    """
    allocator = OperationIdAllocator()
    paths: dict = {}

    for router in app_routers.routers:
        _merge_paths(
            paths,
            process_router(
                router, options.path_starts_with, allocator=allocator, access=options.access
            ),
        )
    for router in app_routers.versioned_routers:
        _merge_paths(
            paths,
            process_versioned_router(
                router, options.path_starts_with, allocator=allocator, access=options.access
            ),
        )

    info = {"title": options.title}
    if options.description:
        info["description"] = options.description
    info["version"] = options.version

    document = {
        "openapi": OPENAPI_VERSION,
        "info": info,
        "servers": [{"url": options.base_url}],
        "paths": paths,
        "components": {"securitySchemes": copy.deepcopy(SECURITY_SCHEMES)},
        "security": copy.deepcopy(SECURITY),
    }
    if options.tags:
        document["tags"] = [{"name": tag} for tag in options.tags]
    if options.docs_url:
        document["externalDocs"] = {"url": options.docs_url}

    logger.info("Generated OpenAPI document with %d paths", len(paths))
    return document


def _merge_paths(paths: dict, new_paths: dict) -> None:
    for path, path_item in new_paths.items():
        assign_to_paths_object(paths, path, path_item)
