# app/services/footer_service.py
from fastapi import HTTPException, status
from sqlmodel import Session

from app.models.footer import FooterContent
from app.repositories.footer_repo import FooterRepository
from app.schemas.footer import FooterRead, FooterUpdate

DEFAULT_FOOTER = FooterRead(
    copyright="© 2024 Shekhar Sailesh Decoration. All rights reserved.",
    address="123 Main Street, City, State, Country",
    phone="+91 1234567890",
    email="contact@shekharsailesh.com",
    whatsapp="+91 1234567890",
)


class FooterService:
    """
    Read / replace the site footer. Falls back to DEFAULT_FOOTER until an
    admin saves the first version.
    """

    def __init__(self, repo: FooterRepository):
        self.repo = repo

    def get_footer(self, session: Session) -> FooterRead:
        footer = self.repo.get(session)
        if footer is None:
            return DEFAULT_FOOTER
        return FooterRead.model_validate(footer, from_attributes=True)

    def update_footer(self, session: Session, payload: FooterUpdate) -> FooterRead:
        footer = FooterContent(**payload.model_dump(mode="json"))
        saved = self.repo.save(session, footer)
        if saved is None:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to update footer content",
            )
        return FooterRead.model_validate(saved, from_attributes=True)
