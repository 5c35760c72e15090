import pytest
from pydantic import BaseModel, ValidationError

from router_to_openapispec.errors import RouteProcessingError
from router_to_openapispec.generate import (
    AppRouters,
    GenerateOpenApiDocumentOptions,
    generate_openapi_document,
)
from router_to_openapispec.router.base import RouteValidation, VersionedValidation
from router_to_openapispec.router.router import Router, VersionedRouter


class ItemBody(BaseModel):
    name: str


def _options(**kwargs) -> GenerateOpenApiDocumentOptions:
    return GenerateOpenApiDocumentOptions(title="Items", version="1.0.0", base_url="http://localhost:5601", **kwargs)


def _app() -> AppRouters:
    first = Router()
    first.get("/api/items")
    second = Router()
    second.post("/api/items", validation=RouteValidation(body=ItemBody))
    versioned = VersionedRouter()
    versioned.delete("/api/items").add_version("1")
    versioned.get("/internal/items").add_version("1")
    return AppRouters(routers=[first, second], versioned_routers=[versioned])


class TestGenerateOpenApiDocument:
    def test_envelope(self):
        doc = generate_openapi_document(AppRouters(), _options())
        assert doc == {
            "openapi": "3.0.0",
            "info": {"title": "Items", "version": "1.0.0"},
            "servers": [{"url": "http://localhost:5601"}],
            "paths": {},
            "components": {
                "securitySchemes": {
                    "basicAuth": {"type": "http", "scheme": "basic"},
                    "apiKeyAuth": {"type": "apiKey", "in": "header", "name": "Authorization"},
                }
            },
            "security": [{"basicAuth": []}, {"apiKeyAuth": []}],
        }

    def test_optional_metadata(self):
        doc = generate_openapi_document(
            AppRouters(),
            _options(description="Item API", docs_url="https://docs.example.com", tags=["items", "admin"]),
        )
        assert doc["info"]["description"] == "Item API"
        assert doc["externalDocs"] == {"url": "https://docs.example.com"}
        assert doc["tags"] == [{"name": "items"}, {"name": "admin"}]

    def test_methods_from_all_routers_are_merged(self):
        doc = generate_openapi_document(_app(), _options())
        assert set(doc["paths"]["/api/items"]) == {"get", "post", "delete"}
        assert "requestBody" in doc["paths"]["/api/items"]["post"]

    def test_operation_ids_unique_across_routers(self):
        doc = generate_openapi_document(_app(), _options())
        item = doc["paths"]["/api/items"]
        assert [item[m]["operationId"] for m in ("get", "post", "delete")] == [
            "/api/items#0",
            "/api/items#1",
            "/api/items#2",
        ]

    def test_generation_is_repeatable(self):
        app = _app()
        assert generate_openapi_document(app, _options()) == generate_openapi_document(app, _options())

    def test_path_starts_with(self):
        doc = generate_openapi_document(_app(), _options(path_starts_with="/api"))
        assert list(doc["paths"]) == ["/api/items"]

    def test_access_filter(self):
        router = Router()
        router.get("/api/internal")
        doc = generate_openapi_document(AppRouters(routers=[router]), _options(access="public"))
        assert doc["paths"] == {}

    def test_documents_do_not_share_security(self):
        doc = generate_openapi_document(AppRouters(), _options())
        doc["security"].clear()
        assert generate_openapi_document(AppRouters(), _options())["security"] != []

    def test_first_failure_aborts(self):
        class BadParams(BaseModel):
            other: str

        versioned = VersionedRouter()
        versioned.get("/api/items/{id}").add_version(
            "1", VersionedValidation(request=RouteValidation(params=BadParams))
        )
        with pytest.raises(RouteProcessingError, match="using version '1'"):
            generate_openapi_document(AppRouters(versioned_routers=[versioned]), _options())


class TestOptions:
    def test_camel_case_aliases(self):
        options = GenerateOpenApiDocumentOptions.model_validate(
            {
                "title": "t",
                "version": "1",
                "baseUrl": "http://x",
                "docsUrl": "http://docs",
                "pathStartsWith": "/api",
            }
        )
        assert options.base_url == "http://x"
        assert options.docs_url == "http://docs"
        assert options.path_starts_with == "/api"

    def test_missing_required(self):
        with pytest.raises(ValidationError):
            GenerateOpenApiDocumentOptions(title="t", version="1")

    def test_unknown_option(self):
        with pytest.raises(ValidationError):
            GenerateOpenApiDocumentOptions(title="t", version="1", base_url="x", colour="red")
