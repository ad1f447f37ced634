"""Identifier Validation — maps a raw path token to an Identifier or a rejection.

Invariants:
    - validate_identifier is PURE and total over [-+]?[0-9]+ tokens of any length
    - Sign is decided lexically; only positive tokens are converted to int
    - Any value <= 0 is rejected with ValidationErrorReason.NON_POSITIVE
    - More than MAX_IDENTIFIER_DIGITS significant digits → OUT_OF_RANGE
      (routing already caps token length, so this only guards direct callers)

Design Decisions:
    - Result is `Identifier | ValidationError` instead of an exception:
      the caller recovers locally, only unexpected faults use the exception channel
"""

from dataclasses import dataclass

from users_api.core.domain_types import (
    MAX_IDENTIFIER_DIGITS,
    Identifier,
    ValidationErrorReason,
)
from users_api.core.errors import InvalidIdentifierError


@dataclass(frozen=True)
class ValidationError:
    """Locally-recoverable rejection of a raw identifier token."""
    reason: ValidationErrorReason
    raw: str

    @property
    def message(self) -> str:
        if self.reason is ValidationErrorReason.OUT_OF_RANGE:
            return (
                f"User id must have at most {MAX_IDENTIFIER_DIGITS} digits, "
                f"got {len(self.raw)} characters."
            )
        return f"User id must be a positive integer, got '{self.raw}'."

    def to_error(self) -> InvalidIdentifierError:
        return InvalidIdentifierError(self.message, self.reason)


def validate_identifier(raw: str) -> Identifier | ValidationError:
    negative = raw.startswith("-")
    digits = raw.lstrip("+-").lstrip("0")

    if negative or not digits:
        return ValidationError(ValidationErrorReason.NON_POSITIVE, raw)
    if len(digits) > MAX_IDENTIFIER_DIGITS:
        return ValidationError(ValidationErrorReason.OUT_OF_RANGE, raw)
    return Identifier(int(digits, 10))
