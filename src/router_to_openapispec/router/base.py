"""Route metadata models.

Routers (unversioned and versioned) describe their registered routes with
these models. Schemas held in a validation set are opaque here; only the
schema converter knows how to read them.
"""

from typing import Any, Literal

from pydantic import BaseModel


class ResponseValidation(BaseModel):
    """Schema of a response body for one status code."""

    body: Any = None


class RouteValidation(BaseModel):
    """Request-side schemas of a route."""

    params: Any = None
    query: Any = None
    body: Any = None


class RouteOptions(BaseModel):
    access: Literal["public", "internal"] = "internal"
    description: str | None = None
    responses: dict[int, ResponseValidation] = {}  # {status_code: {body}}


class Route(BaseModel):
    """A single unversioned method + path registration."""

    method: str  # get / post / put / delete / patch
    path: str  # /api/users/{id}
    options: RouteOptions = RouteOptions()
    validation: RouteValidation | None = None


class VersionedValidation(BaseModel):
    request: RouteValidation | None = None
    response: dict[int, ResponseValidation] = {}


class VersionedHandler(BaseModel):
    """One version of a versioned route."""

    version: str  # "1", "2023-10-31"
    validation: VersionedValidation | None = None


class VersionedRouteOptions(BaseModel):
    access: Literal["public", "internal"] = "internal"
    description: str | None = None


class VersionedRoute(BaseModel):
    """A method + path registration served by several versioned handlers."""

    method: str
    path: str
    options: VersionedRouteOptions = VersionedRouteOptions()
    handlers: list[VersionedHandler] = []

    def add_version(
        self, version: str, validation: VersionedValidation | None = None
    ) -> "VersionedRoute":
        """Register a handler for ``version``. Returns the route for chaining."""
        if any(h.version == version for h in self.handlers):
            raise ValueError(
                f"Version '{version}' is already registered for {self.method.upper()} {self.path}"
            )
        self.handlers.append(VersionedHandler(version=version, validation=validation))
        return self
