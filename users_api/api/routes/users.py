"""Users Routes — GET /users/{id}.

Invariants:
    - {user_id} uses the signed_int convertor: non-integer tokens never reach the handler
    - Route delegates to handle_get_user; request path becomes the problem "instance"
"""

from fastapi import APIRouter, Depends, Request, Response

from users_api.api import convertors  # noqa: F401  registers "signed_int"
from users_api.api.dependencies import get_app_settings
from users_api.config import Settings
from users_api.core.problem_details import PROBLEM_JSON_MEDIA_TYPE, ProblemDetails
from users_api.schemas.user import User
from users_api.services.handle_get_user import handle_get_user

router = APIRouter(prefix="/users", tags=["users"])


@router.get(
    "/{user_id:signed_int}",
    response_model=User,
    responses={
        400: {
            "model": ProblemDetails,
            "description": "User id is zero or negative",
            "content": {PROBLEM_JSON_MEDIA_TYPE: {}},
        },
    },
)
async def get_user(
    user_id: str,
    request: Request,
    settings: Settings = Depends(get_app_settings),
) -> Response:
    """Return the user named by a positive integer id."""
    return handle_get_user(user_id, settings, instance=request.url.path)
