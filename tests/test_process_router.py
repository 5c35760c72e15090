import pytest
from pydantic import BaseModel

from router_to_openapispec.errors import PathParameterMismatchError, RouteProcessingError
from router_to_openapispec.operation_id import OperationIdAllocator
from router_to_openapispec.process_router import process_router
from router_to_openapispec.router.base import ResponseValidation, RouteOptions, RouteValidation
from router_to_openapispec.router.router import Router


class PetParams(BaseModel):
    id: str


class PetQuery(BaseModel):
    include: list[str] = []


class PetBody(BaseModel):
    name: str


class PetResponse(BaseModel):
    id: str
    name: str


def _pet_router() -> Router:
    router = Router()
    router.get("/api/pets")
    router.put(
        "/api/pets/{id}",
        validation=RouteValidation(params=PetParams, query=PetQuery, body=PetBody),
        options=RouteOptions(
            description="Update a pet",
            responses={200: ResponseValidation(body=PetResponse), 404: ResponseValidation()},
        ),
    )
    return router


class TestProcessRouter:
    def test_every_route_is_a_path(self):
        paths = process_router(_pet_router())
        assert list(paths) == ["/api/pets", "/api/pets/{id}"]

    def test_route_without_validation(self):
        operation = process_router(_pet_router())["/api/pets"]["get"]
        assert operation == {"responses": {}, "parameters": [], "operationId": "/api/pets#0"}

    def test_body_and_responses(self):
        operation = process_router(_pet_router())["/api/pets/{id}"]["put"]
        assert operation["requestBody"]["content"]["application/json"]["schema"]["required"] == ["name"]
        assert list(operation["responses"]) == ["200", "404"]
        ok = operation["responses"]["200"]
        assert ok["description"] == "Update a pet"
        assert ok["content"]["application/json"]["schema"]["required"] == ["id", "name"]
        assert operation["responses"]["404"]["content"]["application/json"]["schema"] == {}

    def test_path_params_come_before_query_params(self):
        operation = process_router(_pet_router())["/api/pets/{id}"]["put"]
        assert [(p["in"], p["name"]) for p in operation["parameters"]] == [("path", "id"), ("query", "include")]

    def test_response_description_fallback(self):
        router = Router()
        router.get("/api/ping", options=RouteOptions(responses={200: ResponseValidation(body=str)}))
        responses = process_router(router)["/api/ping"]["get"]["responses"]
        assert responses["200"]["description"] == "No description"

    def test_methods_on_same_path_are_merged(self):
        router = Router()
        router.get("/api/pets")
        router.post("/api/pets", validation=RouteValidation(body=PetBody))
        paths = process_router(router)
        assert set(paths["/api/pets"]) == {"get", "post"}
        assert paths["/api/pets"]["get"]["operationId"] == "/api/pets#0"
        assert paths["/api/pets"]["post"]["operationId"] == "/api/pets#1"

    def test_optional_marker_is_stripped_from_path(self):
        class FileParams(BaseModel):
            path: str | None = None

        router = Router()
        router.get("/api/files/{path?}", validation=RouteValidation(params=FileParams))
        paths = process_router(router)
        assert list(paths) == ["/api/files/{path}"]
        assert paths["/api/files/{path}"]["get"]["parameters"][0]["required"] is False
        assert paths["/api/files/{path}"]["get"]["operationId"] == "/api/files/{path?}#0"


class TestFiltering:
    def test_path_prefix(self):
        router = Router()
        router.get("/api/x")
        router.get("/internal/x")
        assert list(process_router(router, "/api")) == ["/api/x"]

    def test_prefix_is_case_sensitive(self):
        router = Router()
        router.get("/API/x")
        assert process_router(router, "/api") == {}

    def test_access(self):
        router = Router()
        router.get("/api/public", options=RouteOptions(access="public"))
        router.get("/api/internal")
        assert list(process_router(router, access="public")) == ["/api/public"]


class TestErrors:
    def test_error_names_route_and_stops(self):
        router = Router()
        router.get("/api/pets/{petId}", validation=RouteValidation(params=PetParams))
        router.get("/api/never")
        allocator = OperationIdAllocator()
        with pytest.raises(RouteProcessingError) as excinfo:
            process_router(router, allocator=allocator)
        err = excinfo.value
        assert err.route_path == "/api/pets/{petId}"
        assert err.version is None
        assert isinstance(err.cause, PathParameterMismatchError)
        assert err.__cause__ is err.cause
        assert str(err) == (
            "Error generating OpenAPI for route '/api/pets/{petId}': Unknown parameter: id"
        )
        assert allocator.allocate("/api/never") == "/api/never#0"
