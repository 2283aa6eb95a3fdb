# app/core/auth.py
import hmac
from datetime import datetime, timedelta, timezone
from typing import Any

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError

from app.core.config import get_settings

settings = get_settings()

# HTTP Bearer scheme:
# - auto_error=False => missing Authorization header will NOT raise immediately
#   so we can answer with our own 401 message.
bearer_scheme = HTTPBearer(auto_error=False)

ADMIN_ROLE = "admin"


def verify_admin_credentials(username: str, password: str) -> bool:
    """
    Check a username/password pair against the configured admin account.

    Both comparisons always run and are constant-time.
    """
    user_ok = hmac.compare_digest(
        username.encode("utf-8"), settings.ADMIN_USERNAME.encode("utf-8")
    )
    password_ok = hmac.compare_digest(
        password.encode("utf-8"), settings.ADMIN_PASSWORD.encode("utf-8")
    )
    return user_ok and password_ok


def create_access_token(subject: str) -> tuple[str, datetime]:
    """
    Issue a short-lived admin JWT.

    Returns:
        (encoded token, expiry time in UTC)
    """
    expires_at = datetime.now(timezone.utc) + timedelta(
        minutes=settings.ADMIN_TOKEN_TTL_MINUTES
    )
    claims = {
        "sub": subject,
        "role": ADMIN_ROLE,
        "exp": expires_at,
    }
    token = jwt.encode(
        claims,
        settings.ADMIN_TOKEN_SECRET,
        algorithm=settings.ADMIN_TOKEN_ALG,
    )
    return token, expires_at


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and verify an admin access token (JWT).

    Verification:
      - signature (HS256 using ADMIN_TOKEN_SECRET)
      - expiration time (exp)

    Raises:
        HTTPException(401): if token is invalid/expired.
    """
    try:
        return jwt.decode(
            token,
            settings.ADMIN_TOKEN_SECRET,
            algorithms=[settings.ADMIN_TOKEN_ALG],
        )
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )


def require_admin(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str:
    """
    Enforce a valid admin token.

    Returns:
        The admin username (token 'sub').

    Raises:
        HTTPException(401): missing, invalid or expired token.
        HTTPException(403): token without the admin role.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )

    payload = decode_access_token(credentials.credentials)
    sub = payload.get("sub")
    if not sub:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token missing sub",
        )

    if payload.get("role") != ADMIN_ROLE:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return sub
