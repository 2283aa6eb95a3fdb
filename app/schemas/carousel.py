# app/schemas/carousel.py
import uuid
from datetime import datetime

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field


class CarouselImageCreate(SQLModel):
    """
    Payload for adding a carousel slide.

    - image is required.
    - display_order is optional: if omitted, the slide goes last.
    """

    model_config = ConfigDict(extra="forbid")

    image: str
    title: str | None = Field(default=None, max_length=200)
    subtitle: str | None = None
    button_text: str = Field(default="Shop Now", max_length=50)
    button_link: str = "/?section=featured"
    display_order: int | None = None

    @field_validator("image")
    @classmethod
    def validate_image(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("image cannot be empty")
        return v


class CarouselImageRead(SQLModel):
    id: uuid.UUID
    image: str
    title: str | None = None
    subtitle: str | None = None
    button_text: str
    button_link: str
    display_order: int
    created_at: datetime
    updated_at: datetime


class CarouselImageUpdate(SQLModel):
    """
    Partial update payload for a slide.
    """

    model_config = ConfigDict(extra="forbid")

    image: str | None = None
    title: str | None = Field(default=None, max_length=200)
    subtitle: str | None = None
    button_text: str | None = Field(default=None, max_length=50)
    button_link: str | None = None
    display_order: int | None = None

    @field_validator("image")
    @classmethod
    def validate_image(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("image cannot be empty")
        return v
