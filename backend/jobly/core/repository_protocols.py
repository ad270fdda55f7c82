"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Store and credential IO accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, tests pass plain fakes
    - Statements use $n positional placeholders; the executor owns any
      translation to its driver's bind style
"""

from typing import Any, Mapping, Protocol, Sequence


class StatementExecutor(Protocol):
    """Run one parameterized statement, return its rows as column -> value dicts.

    Raises UniqueViolationError / ForeignKeyViolationError / CheckViolationError
    for constraint failures, DatabaseError for everything else.
    """
    async def execute(
        self, statement: str, values: Sequence[Any] = (),
    ) -> list[dict[str, Any]]: ...


class TokenVerifier(Protocol):
    """Verify a signed bearer credential and return its claims.

    Raises InvalidCredentialError for any bad, tampered or expired token.
    """
    def verify(self, token: str, secret: str) -> Mapping[str, Any]: ...
