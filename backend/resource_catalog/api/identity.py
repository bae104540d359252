"""Caller Identity - FastAPI dependencies that expose the caller and the authorization policy.

Invariants:
    - get_caller never raises: missing headers produce an anonymous Caller with no roles,
      and the handler's policy check turns that into a 403
    - Roles header is comma separated; values are normalized (USER -> ROLE_USER)
    - The policy is built once per process from settings

Design Decisions:
    - Identity is verified upstream (gateway / auth proxy); this module only reads
      the trusted headers it forwards
"""

from functools import lru_cache

from fastapi import Request

from resource_catalog.config import get_settings
from resource_catalog.core.authorization import AuthorizationPolicy, normalize_roles
from resource_catalog.core.domain_types import Caller


def get_caller(request: Request) -> Caller:
    """Return the caller described by the identity headers."""
    settings = get_settings()
    email = request.headers.get(settings.identity_email_header) or None
    raw_roles = request.headers.get(settings.identity_roles_header, "")
    return Caller(email=email, roles=normalize_roles(raw_roles.split(",")))


@lru_cache
def get_authorization_policy() -> AuthorizationPolicy:
    settings = get_settings()
    return AuthorizationPolicy(
        baseline_role=settings.baseline_role,
        elevated_role=settings.elevated_role,
    )
