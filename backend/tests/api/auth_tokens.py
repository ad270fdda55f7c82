"""Token helpers for API tests — sign bearer credentials with the test secret."""

import jwt

from jobly.config import get_settings


def make_token(username: str, is_admin: bool = False, secret: str | None = None) -> str:
    return jwt.encode(
        {"username": username, "isAdmin": is_admin},
        secret or get_settings().secret_key,
        algorithm="HS256",
    )


def bearer(username: str, is_admin: bool = False) -> dict:
    return {"Authorization": f"Bearer {make_token(username, is_admin)}"}
