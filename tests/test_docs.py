"""Tests for the Swagger UI documentation endpoints."""

from fastapi.testclient import TestClient

from configui.core.config import Settings
from configui.main import create_app


def test_swagger_index_serves_html(client: TestClient) -> None:
    response = client.get("/swagger/index.html")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "swagger-ui" in response.text
    assert "/swagger/doc.json" in response.text
    assert "Config UI Example - API Documentation" in response.text


def test_swagger_assets_load_from_configured_cdn() -> None:
    settings = Settings(_env_file=None, SWAGGER_CDN_URL="https://assets.example.test/swagger/")

    with TestClient(create_app(settings)) as client:
        response = client.get("/swagger/index.html")

    assert "https://assets.example.test/swagger/swagger-ui-bundle.js" in response.text
    assert "https://assets.example.test/swagger/swagger-ui.css" in response.text


def test_swagger_root_redirects_to_index(client: TestClient) -> None:
    for path in ("/swagger", "/swagger/"):
        response = client.get(path, follow_redirects=False)

        assert response.status_code == 301, path
        assert response.headers["location"] == "/swagger/index.html"


def test_swagger_doc_describes_all_operations(client: TestClient) -> None:
    response = client.get("/swagger/doc.json")

    assert response.status_code == 200
    doc = response.json()
    assert doc["info"] == {
        "title": "Config UI Example",
        "description": "Toy health and readiness resources with browsable API docs",
        "version": "1.0",
    }

    paths = doc["paths"]
    assert set(paths) == {"/api/v1/health", "/api/v1/ready"}
    assert paths["/api/v1/health"]["get"]["summary"] == "Get health"
    assert paths["/api/v1/health"]["post"]["summary"] == "Set health"
    assert paths["/api/v1/ready"]["get"]["summary"] == "Get readiness"
    assert paths["/api/v1/ready"]["post"]["summary"] == "Set readiness"


def test_swagger_doc_declares_required_request_bodies(client: TestClient) -> None:
    paths = client.get("/swagger/doc.json").json()["paths"]

    health_body = paths["/api/v1/health"]["post"]["requestBody"]
    assert health_body["required"] is True
    assert health_body["description"] == "New health"
    schema = health_body["content"]["application/json"]["schema"]
    assert schema["required"] == ["health"]
    assert schema["example"] == {"health": "very fit"}

    ready_schema = paths["/api/v1/ready"]["post"]["requestBody"]["content"]["application/json"]["schema"]
    assert ready_schema["required"] == ["ready"]


def test_unknown_swagger_asset_is_not_found(client: TestClient) -> None:
    response = client.get("/swagger/missing.js")

    assert response.status_code == 404
    assert response.json()["success"] is False


def test_framework_default_docs_are_disabled(client: TestClient) -> None:
    for path in ("/docs", "/redoc", "/openapi.json"):
        assert client.get(path).status_code == 404, path


def test_startup_logs_swagger_location(settings: Settings, log_messages) -> None:
    with TestClient(create_app(settings)):
        pass

    assert "Serving Swagger UI at /swagger for API Config UI Example" in log_messages


def test_swagger_mount_point_is_configurable() -> None:
    settings = Settings(_env_file=None, SWAGGER_PATH="/apidocs/")

    with TestClient(create_app(settings)) as client:
        index = client.get("/apidocs/index.html")
        redirect = client.get("/apidocs", follow_redirects=False)

    assert index.status_code == 200
    assert "/apidocs/doc.json" in index.text
    assert redirect.headers["location"] == "/apidocs/index.html"
