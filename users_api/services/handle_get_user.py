"""Get User Handler — validates the raw id and builds the HTTP response.

Invariants:
    - Valid id -> 200 with {"id": n}
    - Non-positive id -> 400, problem details body unless disabled in settings
    - No shared state: identical inputs produce identical responses
"""

import logging

from fastapi import Response, status
from fastapi.responses import JSONResponse

from users_api.config import Settings
from users_api.core.validate_identifier import ValidationError, validate_identifier
from users_api.schemas.user import User
from users_api.services.problem_response import problem_response

logger = logging.getLogger(__name__)


def handle_get_user(
    raw_id: str, settings: Settings, instance: str | None = None,
) -> Response:
    result = validate_identifier(raw_id)

    if isinstance(result, ValidationError):
        error = result.to_error()
        logger.warning(
            f"Rejected user id {raw_id}: {result.reason.value}",
            extra={"user_id": raw_id, "error_code": error.code},
        )
        if not settings.problem_details_enabled:
            return Response(status_code=status.HTTP_400_BAD_REQUEST)
        return problem_response(error.to_problem_details(instance))

    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=User(id=result).model_dump(),
    )
