"""Key Coercion - turns the raw key request parameter into a typed Key.

Invariants:
    - NUMERIC keys are base-10 integers within the signed 64-bit range
    - NATURAL keys are non-empty strings, used exactly as supplied
    - Malformed keys raise RecordValidationError before any store lookup
"""

import re

from resource_catalog.core.domain_types import Key, KeyKind, NaturalKey, NumericKey
from resource_catalog.core.errors import RecordValidationError

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

_INTEGER = re.compile(r"^[+-]?[0-9]+$")


def parse_key(kind: KeyKind, raw: object, param_name: str = "id") -> Key:
    """Coerce a raw key value according to the resource's key kind."""
    if kind is KeyKind.NUMERIC:
        return NumericKey(_parse_numeric(raw, param_name))
    return NaturalKey(_parse_natural(raw, param_name))


def _parse_numeric(raw: object, param_name: str) -> int:
    if isinstance(raw, bool):
        raise _invalid(param_name, raw, "must be an integer")
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str) and _INTEGER.match(raw.strip()):
        value = int(raw.strip())
    else:
        raise _invalid(param_name, raw, "must be an integer")
    if not INT64_MIN <= value <= INT64_MAX:
        raise _invalid(param_name, raw, "is out of range")
    return value


def _parse_natural(raw: object, param_name: str) -> str:
    if not isinstance(raw, str) or not raw:
        raise _invalid(param_name, raw, "must be a non-empty string")
    return raw


def _invalid(param_name: str, raw: object, reason: str) -> RecordValidationError:
    return RecordValidationError(
        f"Invalid value for {param_name}: {reason}",
        details=[{"field": param_name, "message": reason, "input": str(raw)}],
    )
