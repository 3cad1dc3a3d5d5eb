import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from app.schemas.auth import SignInIn
from app.services.authz import require_admin
from app.services.passwords import check_admin_credentials
from app.services.sessions import clear_session_cookie, set_session_cookie
from app.services.tokens import sign_session_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["auth"])


@router.post("/signin")
def signin(payload: SignInIn, resp: Response):
    if not check_admin_credentials(payload.email, payload.password):
        # same answer for unknown email and wrong password
        logger.warning("Rejected admin sign-in")
        raise HTTPException(status_code=401, detail="Invalid email or password")

    set_session_cookie(resp, sign_session_token(payload.email))
    logger.info("Admin signed in")
    return {"success": True}


@router.post("/signout")
def signout(resp: Response):
    clear_session_cookie(resp)
    return {"success": True}


@router.get("/check-auth")
def check_auth(email: str = Depends(require_admin)):
    return {"authenticated": True, "email": email}
