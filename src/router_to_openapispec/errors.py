"""Exceptions raised while generating an OpenAPI document."""


class OpenApiGenerationError(Exception):
    """Base class for all generation failures."""


class SchemaConversionError(OpenApiGenerationError):
    """A validation schema uses a construct that has no OpenAPI equivalent."""


class PathParameterMismatchError(OpenApiGenerationError):
    """Path template tokens and the params schema disagree."""


class RouteProcessingError(OpenApiGenerationError):
    """Wraps the first error raised while processing a single route.

    Carries the route path (and, for versioned routes, the selected version)
    so a failure can be traced back to where the route was registered.
    """

    def __init__(self, route_path: str, cause: Exception, version: str | None = None):
        self.route_path = route_path
        self.version = version
        self.cause = cause
        if version is None:
            message = f"Error generating OpenAPI for route '{route_path}': {cause}"
        else:
            message = (
                f"Error generating OpenAPI for route '{route_path}' "
                f"using version '{version}': {cause}"
            )
        super().__init__(message)
