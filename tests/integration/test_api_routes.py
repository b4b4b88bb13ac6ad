"""Integration tests for the local HTTP surface."""

import asyncio
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from starlette.requests import Request

from weather_lambda.dependencies import get_service_context
from weather_lambda.exceptions import PersistenceException, ValidationException, WeatherLambdaException
from weather_lambda.main import app
from weather_lambda.middleware.error_handlers import (
    general_exception_handler,
    weather_lambda_exception_handler,
)


@pytest.fixture
def client(request_handler):
    """Test client whose weather route uses the test request handler."""
    app.dependency_overrides[get_service_context] = lambda: SimpleNamespace(handler=request_handler)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_health_endpoint(client):
    """Test health check endpoint."""
    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert "version" in data


def test_weather_seattle(client, mock_weather_client, mock_store):
    """Test fresh lookup then cached lookup."""
    first = client.get("/weather", params={"city": "Seattle"})
    second = client.get("/weather", params={"city": "Seattle"})

    assert first.status_code == 200
    assert first.json() == {"City": "Seattle", "Temperature": 18.5, "Humidity": 60}
    assert first.headers["content-type"].startswith("application/json")
    assert second.content == first.content
    mock_weather_client.fetch.assert_called_once_with("Seattle")
    mock_store.save.assert_called_once()


@pytest.mark.parametrize("query", ["/weather", "/weather?city=", "/weather?city=%20%20"])
def test_weather_missing_city(client, query, mock_weather_client):
    """Test missing or empty city returns 400 with no body."""
    response = client.get(query)

    assert response.status_code == 400
    assert response.content == b""
    mock_weather_client.fetch.assert_not_called()


def test_weather_persistence_failure(client, mock_store):
    """Test persistence failure surfaces as 500."""
    mock_store.save.side_effect = PersistenceException("Failed to save weather data")

    response = client.get("/weather", params={"city": "Seattle"})

    assert response.status_code == 500


def test_exception_handlers_registered():
    """Test application and fallback handlers are registered."""
    assert WeatherLambdaException in app.exception_handlers
    assert Exception in app.exception_handlers


def _request() -> Request:
    return Request({"type": "http", "method": "GET", "path": "/weather", "headers": [], "query_string": b""})


def test_weather_lambda_exception_handler_uses_status_code():
    """Test escaped application errors keep their status and code."""
    response = asyncio.run(
        weather_lambda_exception_handler(_request(), ValidationException("City parameter is required"))
    )

    assert response.status_code == 400
    assert b"VALIDATION_ERROR" in response.body


def test_general_exception_handler_hides_details():
    """Test unexpected errors return a generic 500."""
    response = asyncio.run(general_exception_handler(_request(), RuntimeError("boom")))

    assert response.status_code == 500
    assert b"boom" not in response.body
    assert b"INTERNAL_ERROR" in response.body
