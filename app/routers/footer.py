# app/routers/footer.py
from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.core.auth import require_admin
from app.database import get_session
from app.repositories.footer_repo import FooterRepository
from app.schemas.footer import FooterRead, FooterUpdate
from app.services.footer_service import FooterService

router = APIRouter(prefix="/footer", tags=["Footer"])

service = FooterService(FooterRepository())


@router.get("", response_model=FooterRead)
def get_footer(session: Session = Depends(get_session)):
    """Footer text shown on every storefront page."""
    return service.get_footer(session)


@router.put(
    "",
    response_model=FooterRead,
    dependencies=[Depends(require_admin)],
)
def update_footer(
    payload: FooterUpdate,
    session: Session = Depends(get_session),
):
    """
    Replace the footer text (admin only).
    """
    return service.update_footer(session, payload)
