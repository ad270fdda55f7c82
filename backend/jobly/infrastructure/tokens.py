"""JWT Verification — PyJWT-backed TokenVerifier for bearer credentials.

Invariants:
    - Only the configured algorithms are accepted (no "none")
    - Every PyJWT failure surfaces as InvalidCredentialError
"""

from typing import Any, Mapping, Sequence

import jwt

from jobly.core.errors import InvalidCredentialError


class JwtTokenVerifier:
    """Verifies HMAC-signed tokens; expiry is enforced when the token carries exp."""

    def __init__(self, algorithms: Sequence[str] = ("HS256",)):
        self.algorithms = list(algorithms)

    def verify(self, token: str, secret: str) -> Mapping[str, Any]:
        try:
            return jwt.decode(token, secret, algorithms=self.algorithms)
        except jwt.InvalidTokenError as e:
            raise InvalidCredentialError(f"{type(e).__name__}: {e}")
