"""Authorization Policy - operation -> minimum tier, checked against caller roles.

Invariants:
    - Every Operation has exactly one required Tier (missing entry = ValueError at build)
    - BASELINE is checked first; a caller without it is rejected before tier checks
    - ELEVATED requires both the baseline and the elevated role (strict containment)
    - Both rejections raise the same AuthorizationError class
    - Pure: no IO, no logging; the handler decides what to log

Design Decisions:
    - Explicit policy object consulted by the handler instead of per-route decorators,
      so every resource shares one table of requirements
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from resource_catalog.core.domain_types import Caller, Operation, Tier
from resource_catalog.core.errors import AuthorizationError, ErrorContext

ROLE_PREFIX = "ROLE_"
DEFAULT_BASELINE_ROLE = "ROLE_USER"
DEFAULT_ELEVATED_ROLE = "ROLE_ADMIN"

DEFAULT_REQUIREMENTS: Mapping[Operation, Tier] = MappingProxyType({
    Operation.LIST: Tier.BASELINE,
    Operation.GET: Tier.BASELINE,
    Operation.CREATE: Tier.ELEVATED,
    Operation.UPDATE: Tier.ELEVATED,
    Operation.DELETE: Tier.ELEVATED,
})


def normalize_role(role: str) -> str:
    """'admin' / 'ADMIN' / 'ROLE_ADMIN' all become 'ROLE_ADMIN'."""
    role = role.strip().upper()
    if not role:
        return role
    return role if role.startswith(ROLE_PREFIX) else f"{ROLE_PREFIX}{role}"


def normalize_roles(roles: Iterable[str]) -> frozenset[str]:
    return frozenset(r for r in (normalize_role(role) for role in roles) if r)


class AuthorizationPolicy:
    """Decides whether a caller may perform an operation."""

    def __init__(
        self,
        requirements: Mapping[Operation, Tier] = DEFAULT_REQUIREMENTS,
        baseline_role: str = DEFAULT_BASELINE_ROLE,
        elevated_role: str = DEFAULT_ELEVATED_ROLE,
    ):
        missing = [op.value for op in Operation if op not in requirements]
        if missing:
            raise ValueError(f"No tier configured for operations: {', '.join(missing)}")
        self._requirements = dict(requirements)
        self.baseline_role = normalize_role(baseline_role)
        self.elevated_role = normalize_role(elevated_role)

    def required_tier(self, operation: Operation) -> Tier:
        return self._requirements[operation]

    def granted_tier(self, caller: Caller) -> Tier | None:
        """Highest tier the caller holds, or None without the baseline role."""
        if self.baseline_role not in caller.roles:
            return None
        if self.elevated_role in caller.roles:
            return Tier.ELEVATED
        return Tier.BASELINE

    def authorize(
        self, operation: Operation, caller: Caller, context: ErrorContext | None = None,
    ) -> None:
        """Raise AuthorizationError unless the caller holds the required tier."""
        granted = self.granted_tier(caller)
        if granted is None:
            raise AuthorizationError(
                f"Access denied: {operation.value} requires an authenticated user",
                context,
            )
        required = self.required_tier(operation)
        if required is Tier.ELEVATED and granted is not Tier.ELEVATED:
            raise AuthorizationError(
                f"Access denied: {operation.value} requires administrative privileges",
                context,
            )
