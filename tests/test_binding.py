"""Tests for explicit request body binding."""

import pytest
from fastapi.testclient import TestClient

from configui.core.binding import BindResult, bind_mapping, bind_payload
from configui.core.config import Settings
from configui.core.exceptions import BindError
from configui.main import create_app
from configui.models.schemas import Health, Ready


def test_bind_payload_returns_bound_model() -> None:
    result = bind_payload(Health, b'{"health": "very fit"}')

    assert result.ok
    assert result.errors == []
    assert result.unwrap() == Health(health="very fit")


def test_bind_payload_reports_missing_field_location() -> None:
    result = bind_payload(Ready, b"{}")

    assert not result.ok
    assert result.value is None
    assert len(result.errors) == 1
    assert result.errors[0].startswith("body -> ready: ")


def test_bind_payload_rejects_number_instead_of_string() -> None:
    result = bind_payload(Health, b'{"health": 1}')

    assert not result.ok
    assert result.errors[0].startswith("body -> health: ")


@pytest.mark.parametrize(
    "raw, expected",
    [
        (b"", "body: request body is empty"),
        (b"   ", "body: request body is empty"),
        (b"[1, 2]", "body: expected a JSON object"),
        (b"null", "body: expected a JSON object"),
    ],
)
def test_bind_payload_rejects_non_object_bodies(raw: bytes, expected: str) -> None:
    assert bind_payload(Health, raw).errors == [expected]


def test_bind_payload_rejects_invalid_json() -> None:
    result = bind_payload(Health, b"{health: foo}")

    assert not result.ok
    assert result.errors[0].startswith("body: invalid JSON")


def test_bind_payload_rejects_undecodable_bytes() -> None:
    assert not bind_payload(Health, b"\xff\xfe\xfa").ok


def test_unwrap_failed_result_raises_bind_error() -> None:
    result = bind_mapping(Health, {"ready": "x"})

    with pytest.raises(BindError) as excinfo:
        result.unwrap()

    assert excinfo.value.status_code == 400
    assert excinfo.value.errors == result.errors
    assert excinfo.value.message == result.errors[0]


def test_failed_result_always_carries_an_error() -> None:
    result = BindResult.failed([])

    assert not result.ok
    assert result.errors == ["body: invalid request body"]


def test_explicit_bind_errors_returns_json_body() -> None:
    settings = Settings(_env_file=None, EXPLICIT_BIND_ERRORS=True)

    with TestClient(create_app(settings)) as client:
        response = client.post("/api/v1/health", json={})

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["message"].startswith("body -> health: ")
    assert body["errors"] == [body["message"]]
