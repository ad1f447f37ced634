"""Error Hierarchy — typed, categorized exceptions for Users API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; internal errors (500-level) are critical
    - to_problem_details() produces the RFC 7807 body for the error's http_status
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with UsersApiError base: the global handler catches all of it
"""

from enum import Enum

from users_api.core.domain_types import ValidationErrorReason
from users_api.core.problem_details import ProblemDetails, build_problem_details


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    INTERNAL = "internal"


class UsersApiError(Exception):
    """Base exception for all Users API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_problem_details(self, instance: str | None = None) -> ProblemDetails:
        """Convert to an RFC 7807 problem details body."""
        return build_problem_details(
            self.http_status, detail=self.message, instance=instance,
        )


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidIdentifierError(UsersApiError):
    """Path identifier is lexically an integer but not a usable id."""
    def __init__(self, message: str, reason: ValidationErrorReason):
        super().__init__(
            message, "INVALID_IDENTIFIER", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.reason = reason


# ─── Internal Errors (500-level) ────────────────────────────────

class InternalError(UsersApiError):
    """Unexpected fault. Message is fixed so nothing internal leaks."""
    def __init__(self):
        super().__init__(
            "An unexpected error occurred while processing the request.",
            "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, 500,
        )
