import base64
import binascii
import hashlib
import hmac
import os
import secrets
from datetime import datetime, timedelta, timezone

SESSION_TTL = timedelta(days=7)
CLOCK_SKEW = timedelta(minutes=1)

# used only when SESSION_SECRET is unset outside production; sessions die with the process
_EPHEMERAL_SECRET = secrets.token_urlsafe(32)


def utcnow():
    return datetime.now(timezone.utc)


def _secret() -> bytes:
    secret = os.getenv("SESSION_SECRET", "").strip()
    if not secret:
        if os.getenv("ENV") == "production":
            raise RuntimeError("SESSION_SECRET is not set")
        secret = _EPHEMERAL_SECRET
    return secret.encode("utf-8")


def _sign(body: str) -> str:
    return hmac.new(_secret(), body.encode("utf-8"), hashlib.sha256).hexdigest()


def sign_session_token(email: str, issued_at: datetime | None = None) -> str:
    issued = int((issued_at or utcnow()).timestamp())
    payload = f"{email}:{issued}".encode("utf-8")
    body = base64.urlsafe_b64encode(payload).rstrip(b"=").decode("ascii")
    return f"{body}.{_sign(body)}"


def verify_session_token(
    token: str,
    now: datetime | None = None,
    max_age: timedelta = SESSION_TTL,
) -> str | None:
    """Returns the signed-in email, or None if the token is forged, malformed or expired."""
    body, _, sig = token.rpartition(".")
    if not body or not sig:
        return None
    if not hmac.compare_digest(sig, _sign(body)):
        return None

    try:
        payload = base64.urlsafe_b64decode(body + "=" * (-len(body) % 4)).decode("utf-8")
        email, _, issued_raw = payload.rpartition(":")
        issued = datetime.fromtimestamp(int(issued_raw), tz=timezone.utc)
    except (binascii.Error, UnicodeDecodeError, ValueError):
        return None

    now = now or utcnow()
    if issued > now + CLOCK_SKEW or now - issued > max_age:
        return None
    return email or None
