"""Route Dependencies — per-request access to app-scoped objects."""

from fastapi import Request

from users_api.config import Settings


def get_app_settings(request: Request) -> Settings:
    """Settings attached to the app by create_app()."""
    return request.app.state.settings
