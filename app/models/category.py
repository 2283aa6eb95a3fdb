# app/models/category.py
import uuid
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class Category(SQLModel, table=True):
    """
    Storefront category (e.g. "Ceiling Cornices", "Wall Panels").

    Products point at a category by its `name`, so the name is unique.
    """

    __tablename__ = "categories"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    name: str = Field(
        max_length=100,
        unique=True,
        index=True,
        description="Display name, referenced by products.category",
    )

    description: str | None = Field(
        default=None,
        description="Short blurb shown on the category tile",
    )

    image: str | None = Field(
        default=None,
        description="Tile image (public URL or data URL)",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )

    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Last modification timestamp (UTC)",
    )
