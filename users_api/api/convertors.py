"""Path Convertors — routing-level lexical checks on path segments.

Invariants:
    - "signed_int" matches an optional sign and 1..MAX_IDENTIFIER_DIGITS digits;
      anything else (letters, decimals, oversized tokens) matches no route (404)
    - The matched token is passed through as str; parsing belongs to the validator

Design Decisions:
    - Starlette's built-in "int" convertor rejects signed numbers at routing,
      which would turn /users/-3 into 404 instead of 400
"""

from starlette.convertors import Convertor, register_url_convertor

from users_api.core.domain_types import MAX_IDENTIFIER_DIGITS


class SignedIntegerConvertor(Convertor[str]):
    regex = f"[-+]?[0-9]{{1,{MAX_IDENTIFIER_DIGITS}}}"

    def convert(self, value: str) -> str:
        return value

    def to_string(self, value: str | int) -> str:
        return str(value)


# Must run before any route using "{...:signed_int}" is compiled
register_url_convertor("signed_int", SignedIntegerConvertor())
