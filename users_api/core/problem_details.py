"""Problem Details — RFC 7807 error bodies with per-status defaults.

Invariants:
    - ProblemDetails is immutable; extension members are allowed (e.g. "errors")
    - type/title defaults come from _PROBLEM_TYPES, keyed by HTTP status
    - Unknown statuses get type "about:blank" and the HTTP reason phrase

Design Decisions:
    - Type URIs point at the RFC 9110 section describing each status,
      matching what ASP.NET-style problem details emit
"""

from http import HTTPStatus

from pydantic import BaseModel, ConfigDict


PROBLEM_JSON_MEDIA_TYPE = "application/problem+json"
DEFAULT_PROBLEM_TYPE = "about:blank"

_RFC9110 = "https://tools.ietf.org/html/rfc9110#section-"

_PROBLEM_TYPES: dict[int, tuple[str, str]] = {
    400: ("15.5.1", "Bad Request"),
    401: ("15.5.2", "Unauthorized"),
    403: ("15.5.4", "Forbidden"),
    404: ("15.5.5", "Not Found"),
    405: ("15.5.6", "Method Not Allowed"),
    406: ("15.5.7", "Not Acceptable"),
    408: ("15.5.9", "Request Timeout"),
    409: ("15.5.10", "Conflict"),
    412: ("15.5.13", "Precondition Failed"),
    415: ("15.5.16", "Unsupported Media Type"),
    422: ("15.5.21", "Unprocessable Content"),
    500: ("15.6.1", "Internal Server Error"),
    502: ("15.6.3", "Bad Gateway"),
    503: ("15.6.4", "Service Unavailable"),
    504: ("15.6.5", "Gateway Timeout"),
}


class ProblemDetails(BaseModel):
    """Structured error body (RFC 7807)."""

    model_config = ConfigDict(frozen=True, extra="allow")

    type: str = DEFAULT_PROBLEM_TYPE
    title: str
    status: int
    detail: str | None = None
    instance: str | None = None


def _reason_phrase(status: int) -> str:
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return "Error"


def build_problem_details(
    status: int,
    *,
    title: str | None = None,
    detail: str | None = None,
    instance: str | None = None,
    **extensions,
) -> ProblemDetails:
    """Build a ProblemDetails for `status`, filling type/title defaults."""
    known = _PROBLEM_TYPES.get(status)
    if known:
        section, default_title = known
        problem_type = f"{_RFC9110}{section}"
    else:
        problem_type, default_title = DEFAULT_PROBLEM_TYPE, _reason_phrase(status)

    return ProblemDetails(
        type=problem_type,
        title=title or default_title,
        status=status,
        detail=detail,
        instance=instance,
        **extensions,
    )
