"""Domain Types - keys, tiers, operations and callers shared by every resource.

Invariants:
    - A Key is exactly one of NumericKey (surrogate) or NaturalKey (caller-supplied code)
    - str(key) is the literal value supplied, used verbatim in error messages
    - Operation and Tier are closed enums; no raw string matching in handlers
    - Caller.roles is immutable and already normalized (ROLE_ prefix)

Design Decisions:
    - Frozen dataclasses for the Key union: hashable, comparable, pattern-matchable
    - str Enums: serialize to JSON and log extras without custom encoders
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


# ─── Keys ────────────────────────────────────────────────────────

class KeyKind(str, Enum):
    """How a resource identifies its records."""
    NUMERIC = "numeric"   # store-generated surrogate integer
    NATURAL = "natural"   # caller-supplied unique string code


@dataclass(frozen=True)
class NumericKey:
    """Surrogate key generated by the store."""
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class NaturalKey:
    """Natural key supplied by the caller on create."""
    value: str

    def __str__(self) -> str:
        return self.value


Key = Union[NumericKey, NaturalKey]


# ─── Authorization ───────────────────────────────────────────────

class Tier(str, Enum):
    """Authorization tiers. ELEVATED strictly contains BASELINE."""
    BASELINE = "baseline"
    ELEVATED = "elevated"


class Operation(str, Enum):
    """Operations every resource exposes."""
    LIST = "list"
    GET = "get"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


@dataclass(frozen=True)
class Caller:
    """Verified identity handed over by the upstream identity provider."""
    email: str | None = None
    roles: frozenset[str] = field(default_factory=frozenset)
