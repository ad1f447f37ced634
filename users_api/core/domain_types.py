"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Identifier wraps int and is >= 1 whenever produced by validate_identifier
    - Rejection reasons encoded as Enums, no raw string matching
    - MAX_IDENTIFIER_DIGITS stays <= 640, the lowest int/str conversion limit
      sys.set_int_max_str_digits() accepts

Design Decisions:
    - NewType over a wrapper class: zero runtime cost, serializes as a plain int
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

Identifier = NewType("Identifier", int)   # >= 1

MAX_IDENTIFIER_DIGITS: int = 640


# ─── Enums ───────────────────────────────────────────────────────

class ValidationErrorReason(str, Enum):
    """Why a raw path token was rejected by the validator."""
    NON_POSITIVE = "non_positive"
    OUT_OF_RANGE = "out_of_range"
