"""In-memory routers that expose their registered routes.

Anything with a ``get_routes()`` method can be handed to the processors;
these two classes are the simplest such producers.
"""

from .base import (
    Route,
    RouteOptions,
    RouteValidation,
    VersionedRoute,
    VersionedRouteOptions,
)


class Router:
    """Collects unversioned routes."""

    def __init__(self):
        self._routes: list[Route] = []

    def add_route(
        self,
        method: str,
        path: str,
        validation: RouteValidation | None = None,
        options: RouteOptions | None = None,
    ) -> Route:
        route = Route(
            method=method.lower(),
            path=path,
            options=options or RouteOptions(),
            validation=validation,
        )
        self._routes.append(route)
        return route

    def get(self, path: str, **kwargs) -> Route:
        return self.add_route("get", path, **kwargs)

    def post(self, path: str, **kwargs) -> Route:
        return self.add_route("post", path, **kwargs)

    def put(self, path: str, **kwargs) -> Route:
        return self.add_route("put", path, **kwargs)

    def patch(self, path: str, **kwargs) -> Route:
        return self.add_route("patch", path, **kwargs)

    def delete(self, path: str, **kwargs) -> Route:
        return self.add_route("delete", path, **kwargs)

    def get_routes(self) -> list[Route]:
        return list(self._routes)


class VersionedRouter:
    """Collects versioned routes; handlers are added on the returned route.

    Usage: ``router.get("/api/foo").add_version("1").add_version("2")``
    """

    def __init__(self):
        self._routes: list[VersionedRoute] = []

    def add_route(
        self, method: str, path: str, options: VersionedRouteOptions | None = None
    ) -> VersionedRoute:
        route = VersionedRoute(
            method=method.lower(),
            path=path,
            options=options or VersionedRouteOptions(),
        )
        self._routes.append(route)
        return route

    def get(self, path: str, **kwargs) -> VersionedRoute:
        return self.add_route("get", path, **kwargs)

    def post(self, path: str, **kwargs) -> VersionedRoute:
        return self.add_route("post", path, **kwargs)

    def put(self, path: str, **kwargs) -> VersionedRoute:
        return self.add_route("put", path, **kwargs)

    def patch(self, path: str, **kwargs) -> VersionedRoute:
        return self.add_route("patch", path, **kwargs)

    def delete(self, path: str, **kwargs) -> VersionedRoute:
        return self.add_route("delete", path, **kwargs)

    def get_routes(self) -> list[VersionedRoute]:
        return list(self._routes)
