# app/schemas/category.py
import uuid
from datetime import datetime

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field


class CategoryCreate(SQLModel):
    """
    Payload for creating a category.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(max_length=100)
    description: str | None = None
    image: str | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty")
        return v


class CategoryRead(SQLModel):
    id: uuid.UUID
    name: str
    description: str | None = None
    image: str | None = None
    created_at: datetime
    updated_at: datetime


class CategoryUpdate(SQLModel):
    """
    Partial update payload for categories.

    Renaming cascades to products that reference the old name.
    """

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, max_length=100)
    description: str | None = None
    image: str | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty")
        return v
