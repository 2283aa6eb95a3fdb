# app/repositories/footer_repo.py
import logging
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.models.footer import FOOTER_ROW_ID, FooterContent

logger = logging.getLogger(__name__)


class FooterRepository:

    def get(self, session: Session) -> FooterContent | None:
        try:
            return session.get(FooterContent, FOOTER_ROW_ID)
        except SQLAlchemyError as e:
            logger.error(f"Error fetching footer content: {e}")
            session.rollback()
            return None

    def save(self, session: Session, footer: FooterContent) -> FooterContent | None:
        """Insert or update the single footer row."""
        footer.id = FOOTER_ROW_ID
        footer.updated_at = datetime.now(timezone.utc)
        try:
            footer = session.merge(footer)
            session.commit()
            session.refresh(footer)
            return footer
        except SQLAlchemyError as e:
            logger.error(f"Error saving footer content: {e}")
            session.rollback()
            return None
