"""Salted password hashing, credential verification, and JWT creation/verification."""

import hmac
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from tasktracker.core.config import settings

# Min/max lengths for username and password validation.
USERNAME_MIN_LEN = 1
USERNAME_MAX_LEN = 255
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 128

# bcrypt only reads the first 72 bytes of a password.
BCRYPT_MAX_PASSWORD_BYTES = 72


def _password_bytes(plain_password: str) -> bytes:
    return plain_password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


def generate_salt(rounds: int | None = None) -> str:
    """Generate a fresh per-user bcrypt salt."""
    return bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS).decode("utf-8")


def hash_password(plain_password: str, salt: str) -> str:
    """Derive the stored hash for a password and the user's salt. Do not store plain passwords."""
    return bcrypt.hashpw(_password_bytes(plain_password), salt.encode("utf-8")).decode("utf-8")


def verify_password(plain_password: str, stored_hash: str, stored_salt: str) -> bool:
    """
    Re-derive the hash from the plain password and stored salt, and compare it
    to the stored hash. Malformed salts or hashes never verify.
    """
    try:
        derived = hash_password(plain_password, stored_salt)
    except (ValueError, TypeError):
        return False
    return hmac.compare_digest(derived.encode("utf-8"), stored_hash.encode("utf-8"))


def create_access_token(sub: str | int) -> str:
    """Create a JWT access token with sub (user id), exp and iat."""
    now = datetime.now(UTC)
    expire = now + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "sub": str(sub),
        "exp": expire,
        "iat": now,
    }
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.encode(
        payload,
        secret,
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and validate JWT; return payload (sub, exp, iat).
    Raises jwt.PyJWTError on invalid or expired token.
    """
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.decode(
        token,
        secret,
        algorithms=[settings.JWT_ALGORITHM],
    )
