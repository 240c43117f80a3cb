from datetime import datetime, timedelta, UTC

from jose import jwt
from passlib.context import CryptContext

import tasktracker.config as cfg

MAX_PASSWORD_BYTES = 72

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=cfg.BCRYPT_ROUNDS)


def hash_password(password: str) -> str:
    """Salted bcrypt hash; a new salt is drawn on every call.

    Raises ValueError for passwords longer than bcrypt's 72-byte input.
    """
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError("password too long: must be at most 72 bytes when UTF-8 encoded")
    return pwd_context.hash(password)


def verify_password(plain, hashed) -> bool:
    # wrong, over-long and unrecognised hashes all count as a mismatch
    if not plain or not hashed:
        return False
    try:
        return pwd_context.verify(plain, hashed)
    except ValueError:
        return False


def create_token(claims: dict) -> str:
    """Signed access token; lifetime and key come from the current settings."""
    expires = datetime.now(UTC) + timedelta(minutes=cfg.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {**claims, "exp": int(expires.timestamp())}
    return jwt.encode(payload, cfg.SECRET_KEY, algorithm=cfg.ALGORITHM)
