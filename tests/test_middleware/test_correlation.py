"""Tests for correlation ID middleware."""

import uuid

import pytest
from fastapi import FastAPI, Request
from httpx import AsyncClient
from structlog.contextvars import get_contextvars

from content_hub.middleware.correlation import REQUEST_ID_HEADER, CorrelationMiddleware


@pytest.fixture(autouse=True)
def setup_test_routes(test_app: FastAPI) -> None:
    @test_app.get("/api/test-correlation")
    async def _echo(request: Request) -> dict[str, str | None]:
        return {
            "state": request.state.correlation_id,
            "context": get_contextvars().get("correlation_id"),
        }


@pytest.mark.asyncio
async def test_generates_correlation_id(test_app_async_client: AsyncClient) -> None:
    """A UUID is generated when the caller sends none."""
    response = await test_app_async_client.get("/api/test-correlation")

    correlation_id = response.headers[REQUEST_ID_HEADER]
    assert uuid.UUID(correlation_id).version == 4
    assert response.json() == {"state": correlation_id, "context": correlation_id}


@pytest.mark.asyncio
async def test_reuses_valid_request_id(test_app_async_client: AsyncClient) -> None:
    response = await test_app_async_client.get(
        "/api/test-correlation", headers={REQUEST_ID_HEADER: "edge-proxy:42"}
    )

    assert response.headers[REQUEST_ID_HEADER] == "edge-proxy:42"
    assert response.json()["state"] == "edge-proxy:42"


@pytest.mark.asyncio
async def test_replaces_malformed_request_id(test_app_async_client: AsyncClient) -> None:
    response = await test_app_async_client.get(
        "/api/test-correlation", headers={REQUEST_ID_HEADER: "bad id<script>"}
    )

    assert response.headers[REQUEST_ID_HEADER] != "bad id<script>"
    uuid.UUID(response.headers[REQUEST_ID_HEADER])


@pytest.mark.parametrize(
    ("value", "valid"),
    [
        ("abc-123", True),
        ("a" * 128, True),
        ("a" * 129, False),
        ("", False),
        (None, False),
        ("with space", False),
    ],
)
def test_is_valid_request_id(value: str | None, valid: bool) -> None:
    assert CorrelationMiddleware.is_valid_request_id(value) is valid
