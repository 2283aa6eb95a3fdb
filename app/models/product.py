# app/models/product.py
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, ForeignKey, String
from sqlmodel import SQLModel, Field


class Product(SQLModel, table=True):
    """
    Catalog entry (cornice, wall panel, medallion...).

    - category: named reference to categories.name. Renames cascade
      (ON UPDATE CASCADE on Postgres, mirrored by the repository).
    - is_featured / is_new_arrival are mutually exclusive; the service
      enforces it on every write.
    """

    __tablename__ = "products"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    name: str = Field(
        max_length=200,
        index=True,
        description="Display name of the product",
    )

    description: str | None = Field(
        default=None,
        description="Optional long description",
    )

    dimensions: str | None = Field(
        default=None,
        description='Free text, e.g. "12cm height x 15cm projection"',
    )

    category: str = Field(
        sa_column=Column(
            String(100),
            ForeignKey("categories.name", onupdate="CASCADE"),
            nullable=False,
            index=True,
        ),
        description="FK to categories.name",
    )

    use_case: str | None = Field(
        default=None,
        description='Free text, e.g. "Living Rooms, Dining Rooms"',
    )

    image: str | None = Field(
        default=None,
        description="Main image (public URL or data URL)",
    )

    is_featured: bool = Field(
        default=False,
        index=True,
        description="Shown in the featured grid",
    )

    is_new_arrival: bool = Field(
        default=False,
        index=True,
        description="Shown in the new arrivals grid",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )

    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Last modification timestamp (UTC)",
    )
