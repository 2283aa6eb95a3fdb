# app/routers/admin.py
import logging

from fastapi import APIRouter, HTTPException, status

from app.core.auth import create_access_token, verify_admin_credentials
from app.schemas.auth import AdminLogin, AdminToken

router = APIRouter(prefix="/admin", tags=["Admin"])

logger = logging.getLogger(__name__)


@router.post("/login", response_model=AdminToken)
def login(payload: AdminLogin):
    """
    Exchange the admin username/password for a short-lived bearer token.

    Send it as `Authorization: Bearer <token>` on admin endpoints.
    """
    if not verify_admin_credentials(payload.username, payload.password):
        logger.warning(f"Failed admin login for {payload.username!r}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
        )

    token, expires_at = create_access_token(payload.username)
    return AdminToken(access_token=token, expires_at=expires_at)
