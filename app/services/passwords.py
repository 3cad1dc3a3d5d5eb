import os
import secrets

from passlib.context import CryptContext

pwd = CryptContext(
    schemes=["argon2"],
    deprecated="auto",
)

DEFAULT_ADMIN_EMAIL = "admin@turnitaround.com"
DEFAULT_ADMIN_PASSWORD = "admin123"


def hash_password(password: str) -> str:
    return pwd.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return pwd.verify(password, password_hash)


def admin_email() -> str:
    return os.getenv("ADMIN_EMAIL") or DEFAULT_ADMIN_EMAIL


def _same(a: str, b: str) -> bool:
    return secrets.compare_digest(a.encode("utf-8"), b.encode("utf-8"))


def check_admin_credentials(email: str, password: str) -> bool:
    """
    Exact match against the configured admin account.
    ADMIN_PASSWORD_HASH (argon2) takes precedence over the plain ADMIN_PASSWORD.
    """
    email_ok = _same(email, admin_email())

    password_hash = os.getenv("ADMIN_PASSWORD_HASH", "").strip()
    if password_hash:
        password_ok = verify_password(password, password_hash)
    else:
        password_ok = _same(password, os.getenv("ADMIN_PASSWORD") or DEFAULT_ADMIN_PASSWORD)

    return email_ok and password_ok
