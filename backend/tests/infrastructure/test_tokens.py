"""JWT Verification — PyJWT-backed verifier accepts good tokens, rejects the rest."""

import time

import jwt
import pytest

from jobly.core.enforce_auth import authenticate
from jobly.core.errors import InvalidCredentialError
from jobly.infrastructure.tokens import JwtTokenVerifier

SECRET = "secret-test"


def test_verify_returns_claims():
    token = jwt.encode({"username": "test", "isAdmin": False}, SECRET, algorithm="HS256")
    claims = JwtTokenVerifier().verify(token, SECRET)
    assert claims["username"] == "test"
    assert claims["isAdmin"] is False


def test_verify_rejects_wrong_secret():
    token = jwt.encode({"username": "test"}, "wrong", algorithm="HS256")
    with pytest.raises(InvalidCredentialError):
        JwtTokenVerifier().verify(token, SECRET)


def test_verify_rejects_expired_token():
    token = jwt.encode(
        {"username": "test", "exp": int(time.time()) - 60}, SECRET, algorithm="HS256",
    )
    with pytest.raises(InvalidCredentialError, match="ExpiredSignatureError"):
        JwtTokenVerifier().verify(token, SECRET)


def test_verify_rejects_garbage():
    with pytest.raises(InvalidCredentialError):
        JwtTokenVerifier().verify("not-a-jwt", SECRET)


def test_verify_rejects_unlisted_algorithm():
    token = jwt.encode({"username": "test"}, SECRET, algorithm="HS512")
    with pytest.raises(InvalidCredentialError):
        JwtTokenVerifier(algorithms=["HS256"]).verify(token, SECRET)


def test_authenticate_end_to_end_with_issued_at():
    token = jwt.encode(
        {"username": "test", "isAdmin": True, "iat": 1700000000}, SECRET, algorithm="HS256",
    )
    ctx = authenticate(f"Bearer {token}", SECRET, JwtTokenVerifier())
    assert ctx.caller.username == "test"
    assert ctx.caller.is_admin is True
    assert ctx.caller.issued_at == 1700000000
