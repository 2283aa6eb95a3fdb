# app/repositories/carousel_repo.py
from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from app.models.carousel import CarouselImage

logger = logging.getLogger(__name__)


class CarouselRepository:
    """
    Data access layer for CarouselImage.

    Same soft-failure policy as ProductRepository.
    """

    def get_by_id(self, session: Session, image_id: uuid.UUID) -> CarouselImage | None:
        try:
            return session.get(CarouselImage, image_id)
        except SQLAlchemyError as e:
            logger.error(f"Error fetching carousel image {image_id}: {e}")
            session.rollback()
            return None

    def list(self, session: Session) -> list[CarouselImage]:
        """
        All slides in render order (display_order asc, oldest first on ties).
        """
        stmt = select(CarouselImage).order_by(
            CarouselImage.display_order,
            CarouselImage.created_at,
        )
        try:
            return list(session.exec(stmt).all())
        except SQLAlchemyError as e:
            logger.error(f"Error fetching carousel images: {e}")
            session.rollback()
            return []

    def next_display_order(self, session: Session) -> int | None:
        """
        Order value that puts a new slide last. None on store error.
        """
        stmt = select(func.max(CarouselImage.display_order))
        try:
            current = session.exec(stmt).one()
        except SQLAlchemyError as e:
            logger.error(f"Error reading carousel order: {e}")
            session.rollback()
            return None
        return 0 if current is None else current + 1

    def create(self, session: Session, image: CarouselImage) -> CarouselImage | None:
        try:
            session.add(image)
            session.commit()
            session.refresh(image)
            return image
        except SQLAlchemyError as e:
            logger.error(f"Error creating carousel image: {e}")
            session.rollback()
            return None

    def update(self, session: Session, image: CarouselImage) -> CarouselImage | None:
        image.updated_at = datetime.now(timezone.utc)
        try:
            session.add(image)
            session.commit()
            session.refresh(image)
            return image
        except SQLAlchemyError as e:
            logger.error(f"Error updating carousel image {image.id}: {e}")
            session.rollback()
            return None

    def delete(self, session: Session, image: CarouselImage) -> bool:
        try:
            session.delete(image)
            session.commit()
            return True
        except SQLAlchemyError as e:
            logger.error(f"Error deleting carousel image {image.id}: {e}")
            session.rollback()
            return False

    def save_orders(self, session: Session, images: list[CarouselImage]) -> bool:
        """
        Write display_order for several slides in a single commit.

        Used for the pairwise swap (two rows) and for renumbering.
        """
        now = datetime.now(timezone.utc)
        try:
            for image in images:
                image.updated_at = now
                session.add(image)
            session.commit()
            for image in images:
                session.refresh(image)
            return True
        except SQLAlchemyError as e:
            logger.error(f"Error updating carousel order: {e}")
            session.rollback()
            return False
