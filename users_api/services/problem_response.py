"""Problem Responses — render ProblemDetails as application/problem+json."""

from collections.abc import Mapping

from fastapi.responses import JSONResponse

from users_api.core.problem_details import PROBLEM_JSON_MEDIA_TYPE, ProblemDetails


def problem_response(
    problem: ProblemDetails, headers: Mapping[str, str] | None = None,
) -> JSONResponse:
    """Status comes from the problem; None-valued members are omitted."""
    return JSONResponse(
        status_code=problem.status,
        content=problem.model_dump(exclude_none=True),
        headers=headers,
        media_type=PROBLEM_JSON_MEDIA_TYPE,
    )
