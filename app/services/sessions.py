import os

from fastapi import Response

from .tokens import SESSION_TTL

COOKIE_NAME = "admin_session"


def set_session_cookie(resp: Response, token: str, seconds: int = int(SESSION_TTL.total_seconds())):
    is_prod = os.getenv("ENV") == "production"

    resp.set_cookie(
        key=COOKIE_NAME,
        value=token,
        httponly=True,
        secure=is_prod,              # True in prod (HTTPS)
        samesite="lax",
        domain=os.getenv("COOKIE_DOMAIN") or None,
        max_age=seconds,
        path="/",
    )


def clear_session_cookie(resp: Response):
    resp.delete_cookie(COOKIE_NAME, path="/", domain=os.getenv("COOKIE_DOMAIN") or None)
