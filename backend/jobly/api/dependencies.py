"""Request Dependencies — request context, gates and repositories for route handlers.

Invariants:
    - get_request_context runs once per request (FastAPI caches dependencies)
    - require_* raise AuthorizationError; the global handler turns it into a 401
    - Repositories get a fresh executor bound to the request's DB session
"""

import logging

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from jobly.config import get_settings
from jobly.core.enforce_auth import (
    CallerIdentity,
    RequestContext,
    authenticate,
    ensure_admin,
    ensure_logged_in,
    ensure_self_or_admin,
)
from jobly.core.repository_protocols import StatementExecutor, TokenVerifier
from jobly.infrastructure.database import SqlAlchemyStatementExecutor, get_db
from jobly.infrastructure.tokens import JwtTokenVerifier
from jobly.services.company_repository import CompanyRepository
from jobly.services.job_repository import JobRepository

logger = logging.getLogger(__name__)


def get_token_verifier() -> TokenVerifier:
    return JwtTokenVerifier([get_settings().jwt_algorithm])


async def get_request_context(
    authorization: str | None = Header(None),
    verifier: TokenVerifier = Depends(get_token_verifier),
) -> RequestContext:
    """Credential extraction: never fails, anonymous when no valid token."""
    ctx = authenticate(authorization, get_settings().secret_key, verifier)
    if ctx.caller:
        logger.debug(
            "Authenticated request", extra={"username": ctx.caller.username},
        )
    return ctx


async def require_logged_in(
    ctx: RequestContext = Depends(get_request_context),
) -> CallerIdentity:
    return ensure_logged_in(ctx)


async def require_admin(
    ctx: RequestContext = Depends(get_request_context),
) -> CallerIdentity:
    return ensure_admin(ctx)


async def require_self_or_admin(
    username: str, ctx: RequestContext = Depends(get_request_context),
) -> CallerIdentity:
    """Target username comes from the route's {username} path parameter."""
    return ensure_self_or_admin(ctx, username)


def get_executor(db: AsyncSession = Depends(get_db)) -> StatementExecutor:
    return SqlAlchemyStatementExecutor(db)


def get_company_repository(
    executor: StatementExecutor = Depends(get_executor),
) -> CompanyRepository:
    return CompanyRepository(executor)


def get_job_repository(
    executor: StatementExecutor = Depends(get_executor),
) -> JobRepository:
    return JobRepository(executor)
