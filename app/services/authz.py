from fastapi import HTTPException, Request

from app.services.passwords import admin_email
from app.services.sessions import COOKIE_NAME
from app.services.tokens import verify_session_token


def require_admin(req: Request) -> str:
    raw = req.cookies.get(COOKIE_NAME)
    if not raw:
        raise HTTPException(status_code=401, detail="Unauthorized")

    email = verify_session_token(raw)
    # a token for a previous ADMIN_EMAIL no longer counts
    if not email or email != admin_email():
        raise HTTPException(status_code=401, detail="Session expired")
    return email
