# app/routers/carousel.py
import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session

from app.core.auth import require_admin
from app.database import get_session
from app.repositories.carousel_repo import CarouselRepository
from app.schemas.carousel import (
    CarouselImageCreate,
    CarouselImageRead,
    CarouselImageUpdate,
)
from app.services.carousel_service import CarouselService

router = APIRouter(prefix="/carousel", tags=["Carousel"])

service = CarouselService(CarouselRepository())


# -------- Public endpoints --------


@router.get("", response_model=list[CarouselImageRead])
def list_carousel_images(session: Session = Depends(get_session)):
    """
    Slides in render order (display_order ascending).
    """
    return service.list_images(session)


# -------- Admin endpoints --------


@router.post(
    "",
    response_model=CarouselImageRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_carousel_image(
    payload: CarouselImageCreate,
    session: Session = Depends(get_session),
):
    """
    Add a slide (admin only). Goes last unless `display_order` is given.
    """
    return service.create_image(session, payload)


@router.patch(
    "/{image_id}",
    response_model=CarouselImageRead,
    dependencies=[Depends(require_admin)],
)
def update_carousel_image(
    image_id: uuid.UUID,
    payload: CarouselImageUpdate,
    session: Session = Depends(get_session),
):
    return service.update_image(session, image_id, payload)


@router.delete(
    "/{image_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
def delete_carousel_image(
    image_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    if not service.delete_image(session, image_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Carousel image not found",
        )
    return None


@router.post(
    "/{image_id}/move-up",
    response_model=list[CarouselImageRead],
    dependencies=[Depends(require_admin)],
    summary="Move a slide one position earlier",
)
def move_carousel_image_up(
    image_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    """
    Swap order with the previous slide. No-op for the first slide.

    Returns the full list in its new order.
    """
    return service.move_up(session, image_id)


@router.post(
    "/{image_id}/move-down",
    response_model=list[CarouselImageRead],
    dependencies=[Depends(require_admin)],
    summary="Move a slide one position later",
)
def move_carousel_image_down(
    image_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    """
    Swap order with the next slide. No-op for the last slide.

    Returns the full list in its new order.
    """
    return service.move_down(session, image_id)
