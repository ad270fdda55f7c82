"""Authorization Gates — caller identity extraction and composable request gates.

Invariants:
    - All functions are PURE except for logging: no IO, no async, no DB
    - authenticate() never raises: a missing or bad credential is an anonymous caller
    - Gates raise AuthorizationError on rejection and return the caller on success
    - validate_gates chains gates in order; first failure wins

Design Decisions:
    - Explicit RequestContext value instead of mutable request state: the caller
      is set exactly once, at chain entry
    - Token verification injected as a TokenVerifier: core stays free of the JWT library
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Mapping

from jobly.core.errors import AuthorizationError, InvalidCredentialError
from jobly.core.repository_protocols import TokenVerifier

logger = logging.getLogger(__name__)

_BEARER_PREFIX = re.compile(r"^bearer(\s+|$)", re.IGNORECASE)


@dataclass(frozen=True)
class CallerIdentity:
    """Authenticated party for a single request."""
    username: str
    is_admin: bool = False
    issued_at: int | None = None


@dataclass(frozen=True)
class RequestContext:
    """Per-request context; caller is None for anonymous requests."""
    caller: CallerIdentity | None = None


def extract_bearer_token(header: str | None) -> str | None:
    """'Bearer abc.def' -> 'abc.def'. Missing or blank header -> None."""
    if not header:
        return None
    token = _BEARER_PREFIX.sub("", header.strip()).strip()
    return token or None


def identity_from_claims(claims: Mapping[str, Any]) -> CallerIdentity | None:
    """Claims without a usable username carry no identity."""
    username = claims.get("username")
    if not isinstance(username, str) or not username:
        return None
    issued_at = claims.get("iat")
    return CallerIdentity(
        username=username,
        is_admin=claims.get("isAdmin") is True,
        issued_at=issued_at if isinstance(issued_at, int) else None,
    )


def authenticate(
    header: str | None, secret: str, verifier: TokenVerifier,
) -> RequestContext:
    """Derive the request context from an Authorization header value."""
    token = extract_bearer_token(header)
    if token is None:
        return RequestContext()
    try:
        claims = verifier.verify(token, secret)
    except InvalidCredentialError as e:
        logger.debug(f"Ignoring bearer credential: {e.message}")
        return RequestContext()
    return RequestContext(caller=identity_from_claims(claims))


# ─── Gates ───────────────────────────────────────────────────────

def ensure_logged_in(ctx: RequestContext) -> CallerIdentity:
    """Any authenticated caller passes."""
    if ctx.caller is None:
        raise AuthorizationError("Login required")
    return ctx.caller


def ensure_admin(ctx: RequestContext) -> CallerIdentity:
    """Only administrators pass."""
    caller = ensure_logged_in(ctx)
    if not caller.is_admin:
        raise AuthorizationError("Admin privileges required")
    return caller


def ensure_self_or_admin(ctx: RequestContext, username: str) -> CallerIdentity:
    """Administrators, or the caller whose username matches the target."""
    caller = ensure_logged_in(ctx)
    if not (caller.is_admin or caller.username == username):
        raise AuthorizationError(f"Not permitted to act on user '{username}'")
    return caller


Gate = Callable[[RequestContext], CallerIdentity]


def self_or_admin(username: str) -> Gate:
    """Bind ensure_self_or_admin to a target so it composes with the other gates."""
    def gate(ctx: RequestContext) -> CallerIdentity:
        return ensure_self_or_admin(ctx, username)
    return gate


def validate_gates(ctx: RequestContext, *gates: Gate) -> RequestContext:
    """Apply gates in order; the first rejection propagates."""
    for gate in gates:
        gate(ctx)
    return ctx
