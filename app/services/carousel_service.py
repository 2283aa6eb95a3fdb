# app/services/carousel_service.py
import logging
import uuid

from fastapi import HTTPException, status
from sqlmodel import Session

from app.models.carousel import CarouselImage
from app.repositories.carousel_repo import CarouselRepository
from app.schemas.carousel import CarouselImageCreate, CarouselImageUpdate

logger = logging.getLogger(__name__)


class CarouselService:
    """
    Business logic for the hero carousel.

    Responsibilities:
      - append new slides at the end unless an order is given
      - move a slide one position up/down by swapping order values
        with its neighbour (no full renumbering)
    """

    def __init__(self, repo: CarouselRepository):
        self.repo = repo

    # ----- Helpers -----

    def _get_or_404(self, session: Session, image_id: uuid.UUID) -> CarouselImage:
        image = self.repo.get_by_id(session, image_id)
        if not image:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Carousel image not found",
            )
        return image

    @staticmethod
    def _store_failure(action: str) -> HTTPException:
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to {action} carousel image",
        )

    # ----- CRUD -----

    def list_images(self, session: Session) -> list[CarouselImage]:
        """Slides in render order."""
        return self.repo.list(session)

    def find_image(self, session: Session, image_id: uuid.UUID) -> CarouselImage | None:
        return self.repo.get_by_id(session, image_id)

    def create_image(self, session: Session, payload: CarouselImageCreate) -> CarouselImage:
        display_order = payload.display_order
        if display_order is None:
            display_order = self.repo.next_display_order(session)
            if display_order is None:
                raise self._store_failure("create")

        image = CarouselImage(
            image=payload.image,
            title=payload.title,
            subtitle=payload.subtitle,
            button_text=payload.button_text,
            button_link=payload.button_link,
            display_order=display_order,
        )
        created = self.repo.create(session, image)
        if created is None:
            raise self._store_failure("create")
        return created

    def update_image(
        self,
        session: Session,
        image_id: uuid.UUID,
        payload: CarouselImageUpdate,
    ) -> CarouselImage:
        image = self._get_or_404(session, image_id)

        changes = payload.model_dump(exclude_unset=True)
        for field, value in changes.items():
            # image, button_text, button_link and display_order are NOT NULL
            if value is None and field != "title" and field != "subtitle":
                continue
            setattr(image, field, value)

        updated = self.repo.update(session, image)
        if updated is None:
            raise self._store_failure("update")
        return updated

    def delete_image(self, session: Session, image_id: uuid.UUID) -> bool:
        image = self.find_image(session, image_id)
        if not image:
            return False
        if not self.repo.delete(session, image):
            raise self._store_failure("delete")
        return True

    # ----- Ordering -----

    def move_up(self, session: Session, image_id: uuid.UUID) -> list[CarouselImage]:
        """
        Swap the slide with the one rendered just before it.
        The first slide stays where it is.
        """
        return self._move(session, image_id, step=-1)

    def move_down(self, session: Session, image_id: uuid.UUID) -> list[CarouselImage]:
        """
        Swap the slide with the one rendered just after it.
        The last slide stays where it is.
        """
        return self._move(session, image_id, step=1)

    def _move(
        self,
        session: Session,
        image_id: uuid.UUID,
        step: int,
    ) -> list[CarouselImage]:
        self._get_or_404(session, image_id)

        slides = self.repo.list(session)
        index = next(
            (i for i, slide in enumerate(slides) if slide.id == image_id),
            None,
        )
        if index is None:
            # Row exists but the list read failed
            raise self._store_failure("reorder")

        neighbour_index = index + step
        if neighbour_index < 0 or neighbour_index >= len(slides):
            return slides

        current = slides[index]
        neighbour = slides[neighbour_index]

        if current.display_order == neighbour.display_order:
            # Equal values would make the swap invisible, so spread them to
            # 0..n-1 first. This rewrites the set of order values on purpose;
            # without a tie the move stays a pure two-row swap.
            # See DESIGN.md, "Carousel ties".
            logger.info("Carousel order values collide, renumbering slides")
            for position, slide in enumerate(slides):
                slide.display_order = position
            current.display_order, neighbour.display_order = (
                neighbour.display_order,
                current.display_order,
            )
            changed = slides
        else:
            current.display_order, neighbour.display_order = (
                neighbour.display_order,
                current.display_order,
            )
            changed = [current, neighbour]

        if not self.repo.save_orders(session, changed):
            raise self._store_failure("reorder")

        return self.repo.list(session)
