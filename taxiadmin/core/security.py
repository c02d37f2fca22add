"""Password hashing and bearer tokens for admin and driver logins."""
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import ValidationError

from taxiadmin.core.config import get_settings

# Stored user passwords are bcrypt hashes
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a login attempt against the stored hash of the account."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password before it is stored on a User.

    Used for the seeded admin and for the first password of each driver
    account (driver number followed by first name).
    """
    return pwd_context.hash(password)


def create_access_token(
    subject: str,
    claims: Optional[dict[str, Any]] = None,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """Issue the bearer token returned by the login endpoint.

    Args:
        subject: Username, the driver number for driver accounts
        claims: Extra claims; the login adds the account ``role``
        expires_delta: Lifetime, ``access_token_expire_minutes`` by default

    Returns:
        Signed JWT
    """
    settings = get_settings()
    lifetime = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)

    payload = dict(claims or {})
    payload["sub"] = subject
    payload["exp"] = datetime.now(timezone.utc) + lifetime
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> Optional[str]:
    """Username carried by a bearer token.

    None for a token that is expired, signed with another key, malformed,
    or has no username.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token, settings.secret_key, algorithms=[settings.algorithm]
        )
    except (JWTError, ValidationError):
        return None
    username = payload.get("sub")
    if not isinstance(username, str) or not username:
        return None
    return username
