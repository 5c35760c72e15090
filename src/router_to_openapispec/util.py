"""Helpers shared by the route processors."""

import re

from pydantic import BaseModel

from .router.base import Route, RouteValidation, VersionedHandler, VersionedValidation

VERSION_HEADER = "Elastic-Api-Version"

_PATH_PARAM_RE = re.compile(r"\{(.+?)\}")


class PathParameter(BaseModel):
    """A ``{token}`` found in a route path template."""

    name: str
    optional: bool = False


def get_path_parameters(path: str) -> dict[str, PathParameter]:
    """Parse ``{name}``, ``{name?}`` and ``{name*}`` tokens out of a path template."""
    params = {}
    for token in _PATH_PARAM_RE.findall(path):
        optional = token.endswith("?")
        name = token.rstrip("?*")
        params[name] = PathParameter(name=name, optional=optional)
    return params


def get_json_content_string() -> str:
    return "application/json"


def get_versioned_content_string(version: str) -> str:
    return f"application/json; {VERSION_HEADER}={version}"


def extract_validation_schema_from_route(route: Route) -> RouteValidation | None:
    return route.validation


def extract_validation_schema_from_versioned_handler(
    handler: VersionedHandler,
) -> VersionedValidation | None:
    return handler.validation


def assign_to_paths_object(paths: dict, path: str, path_item: dict) -> None:
    """Merge ``path_item`` into ``paths`` keeping methods already present."""
    path_name = path.replace("?", "")
    paths[path_name] = {**paths.get(path_name, {}), **path_item}
