"""Access logging from RequestIDMiddleware."""

import logging
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from paged_catalog.dependencies import get_product_accessor
from paged_catalog.main import app
from paged_catalog.middleware import REQUEST_ID_HEADER
from paged_catalog.repositories.memory import InMemoryAccessor


class BrokenAccessor:
    async def count(self) -> int:
        raise RuntimeError("bug in accessor")

    async def slice(self, offset: int, limit: int) -> list[Any]:
        raise RuntimeError("bug in accessor")


def completed_events(caplog: pytest.LogCaptureFixture) -> list[dict[str, Any]]:
    return [
        record.msg
        for record in caplog.records
        if record.name == "paged_catalog.middleware"
        and isinstance(record.msg, dict)
        and record.msg.get("event") == "request_completed"
    ]


@pytest.mark.asyncio
async def test_successful_request_is_logged(
    api_client: AsyncClient, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.INFO)
    app.dependency_overrides[get_product_accessor] = lambda: InMemoryAccessor()

    await api_client.get("/products", headers={REQUEST_ID_HEADER: "req-ok"})

    [event] = completed_events(caplog)
    assert event["status_code"] == 200
    assert event["path"] == "/products"
    assert event["method"] == "GET"
    assert event["request_id"] == "req-ok"


@pytest.mark.asyncio
async def test_failing_request_is_logged_as_500(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)
    app.dependency_overrides[get_product_accessor] = BrokenAccessor

    try:
        async with AsyncClient(
            transport=ASGITransport(app=app, raise_app_exceptions=False),
            base_url="http://test",
        ) as client:
            resp = await client.get("/products")
    finally:
        app.dependency_overrides.clear()

    assert resp.status_code == 500
    assert resp.json()["error"]["code"] == "internal_error"
    [event] = completed_events(caplog)
    assert event["status_code"] == 500
