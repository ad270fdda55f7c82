"""Request Dependencies — gates wired as FastAPI dependencies on a throwaway app.

Covers require_logged_in and require_self_or_admin, which the listing routes
do not use directly.
"""

import pytest
from fastapi import Depends, FastAPI
from httpx import ASGITransport, AsyncClient

from jobly.api.dependencies import (
    get_request_context,
    require_logged_in,
    require_self_or_admin,
)
from jobly.api.error_handlers import register_error_handlers
from jobly.core.enforce_auth import CallerIdentity, RequestContext
from tests.api.auth_tokens import bearer


def _build_app() -> FastAPI:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/whoami")
    async def whoami(ctx: RequestContext = Depends(get_request_context)):
        if ctx.caller is None:
            return {"caller": None}
        return {"caller": ctx.caller.username, "isAdmin": ctx.caller.is_admin}

    @app.get("/private")
    async def private(caller: CallerIdentity = Depends(require_logged_in)):
        return {"username": caller.username}

    @app.get("/users/{username}")
    async def profile(username: str, caller: CallerIdentity = Depends(require_self_or_admin)):
        return {"username": username, "viewer": caller.username}

    return app


@pytest.fixture
async def gate_client():
    async with AsyncClient(
        transport=ASGITransport(app=_build_app()), base_url="http://test",
    ) as c:
        yield c


async def test_context_from_valid_token(gate_client):
    res = await gate_client.get("/whoami", headers=bearer("a", is_admin=True))
    assert res.json() == {"caller": "a", "isAdmin": True}


async def test_context_anonymous_without_header(gate_client):
    res = await gate_client.get("/whoami")
    assert res.status_code == 200
    assert res.json() == {"caller": None}


async def test_context_anonymous_with_bad_token(gate_client):
    res = await gate_client.get("/whoami", headers={"Authorization": "Bearer junk"})
    assert res.status_code == 200
    assert res.json() == {"caller": None}


async def test_logged_in_gate(gate_client):
    assert (await gate_client.get("/private")).status_code == 401
    res = await gate_client.get("/private", headers=bearer("a"))
    assert res.json() == {"username": "a"}


async def test_self_or_admin_gate_self(gate_client):
    res = await gate_client.get("/users/a", headers=bearer("a"))
    assert res.status_code == 200


async def test_self_or_admin_gate_other_user(gate_client):
    res = await gate_client.get("/users/b", headers=bearer("a"))
    assert res.status_code == 401


async def test_self_or_admin_gate_admin(gate_client):
    res = await gate_client.get("/users/b", headers=bearer("boss", is_admin=True))
    assert res.json() == {"username": "b", "viewer": "boss"}


async def test_self_or_admin_gate_anonymous(gate_client):
    assert (await gate_client.get("/users/a")).status_code == 401
