"""Application Factory — create_app wiring and lifespan."""

from httpx import ASGITransport, AsyncClient

from users_api.config import Settings
from users_api.main import create_app, lifespan


def test_create_app_attaches_settings():
    settings = Settings(service_name="users-test", service_version="9.9.9")
    app = create_app(settings)
    assert app.state.settings is settings
    assert app.title == "users-test"
    assert app.version == "9.9.9"


async def test_users_route_registered():
    app = create_app(Settings(problem_details_enabled=False))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        res = await client.get("/users/1")
    assert res.status_code == 200
    assert res.json() == {"id": 1}


def test_users_route_in_openapi_schema():
    paths = create_app(Settings()).openapi()["paths"]
    assert "get" in paths["/users/{user_id}"]


async def test_lifespan_configures_logging(monkeypatch):
    calls = []
    monkeypatch.setattr(
        "users_api.main.setup_logging", lambda level, fmt: calls.append((level, fmt)),
    )
    app = create_app(Settings(log_level="WARNING", log_format="text"))
    async with lifespan(app):
        pass
    assert calls == [("WARNING", "text")]
