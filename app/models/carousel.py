# app/models/carousel.py
import uuid
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class CarouselImage(SQLModel, table=True):
    """
    Hero carousel slide on the storefront.

    Slides render in ascending display_order. Values need not be
    contiguous; only their relative order matters.
    """

    __tablename__ = "carousel_images"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    image: str = Field(
        description="Slide background (public URL or data URL)",
    )

    title: str | None = Field(default=None, max_length=200)
    subtitle: str | None = Field(default=None)

    button_text: str = Field(
        default="Shop Now",
        max_length=50,
    )

    button_link: str = Field(
        default="/?section=featured",
        description="Usually a storefront link like /?category=<name>",
    )

    display_order: int = Field(
        default=0,
        index=True,
        description="Render position (ascending)",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )

    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Last modification timestamp (UTC)",
    )
