"""Error Handlers — verifies translation of every failure class to problem details.

Tests cover:
    - Unhandled exceptions → 500 problem details without internal details
    - UsersApiError raised in a route → its own status
    - 404 for unknown routes, 405 with Allow header for wrong methods
    - RequestValidationError → 400 with per-field errors
    - HTTPException with a custom detail keeps the detail
"""

import logging

import pytest
from fastapi import HTTPException

from users_api.core.domain_types import ValidationErrorReason
from users_api.core.errors import InvalidIdentifierError


@pytest.fixture
def app(app):
    @app.get("/boom")
    async def boom():
        raise RuntimeError("database password is hunter2")

    @app.get("/rejected")
    async def rejected():
        raise InvalidIdentifierError(
            "id rejected upstream", ValidationErrorReason.NON_POSITIVE,
        )

    @app.get("/search")
    async def search(limit: int):
        return {"limit": limit}

    @app.get("/gone")
    async def gone():
        raise HTTPException(status_code=410, detail="User was removed")

    return app


async def test_unhandled_exception_returns_500_problem(client):
    res = await client.get("/boom")
    assert res.status_code == 500
    assert res.headers["content-type"] == "application/problem+json"
    body = res.json()
    assert body["status"] == 500
    assert body["title"] == "Internal Server Error"
    assert body["instance"] == "/boom"
    assert "hunter2" not in res.text


async def test_unhandled_exception_is_logged_with_traceback(client, caplog):
    with caplog.at_level(logging.ERROR, logger="users_api.api.error_handlers"):
        await client.get("/boom")
    record = next(r for r in caplog.records if r.name == "users_api.api.error_handlers")
    assert record.exc_info is not None
    assert record.error_code == "INTERNAL_ERROR"


async def test_users_api_error_uses_own_status(client):
    res = await client.get("/rejected")
    assert res.status_code == 400
    body = res.json()
    assert body["detail"] == "id rejected upstream"
    assert body["instance"] == "/rejected"


async def test_unknown_route_returns_404_problem(client):
    res = await client.get("/accounts/1")
    assert res.status_code == 404
    body = res.json()
    assert body["type"] == "https://tools.ietf.org/html/rfc9110#section-15.5.5"
    assert "detail" not in body


async def test_wrong_method_returns_405_with_allow_header(client):
    res = await client.post("/users/5")
    assert res.status_code == 405
    assert "GET" in res.headers["allow"]
    assert res.json()["title"] == "Method Not Allowed"


async def test_request_validation_error_returns_400_with_fields(client):
    res = await client.get("/search", params={"limit": "lots"})
    assert res.status_code == 400
    body = res.json()
    assert body["title"] == "Bad Request"
    assert body["errors"][0]["field"] == "query.limit"
    assert body["errors"][0]["type"] == "int_parsing"


async def test_http_exception_keeps_custom_detail(client):
    res = await client.get("/gone")
    assert res.status_code == 410
    body = res.json()
    assert body["detail"] == "User was removed"
    assert body["type"] == "about:blank"


class TestProblemDetailsDisabled:
    @pytest.fixture
    def settings(self):
        from users_api.config import Settings
        return Settings(problem_details_enabled=False, log_format="text")

    async def test_405_keeps_allow_header_without_body(self, client):
        res = await client.post("/users/5")
        assert res.status_code == 405
        assert res.content == b""
        assert "GET" in res.headers["allow"]

    async def test_validation_error_has_empty_body(self, client):
        res = await client.get("/search", params={"limit": "lots"})
        assert res.status_code == 400
        assert res.content == b""

    async def test_500_still_has_problem_body(self, client):
        res = await client.get("/boom")
        assert res.status_code == 500
        assert res.json()["status"] == 500
