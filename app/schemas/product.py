# app/schemas/product.py
import uuid
from datetime import datetime

from pydantic import ConfigDict, field_validator, model_validator
from sqlmodel import SQLModel, Field


def _exclusive_flags(is_featured: bool | None, is_new_arrival: bool | None) -> None:
    if is_featured and is_new_arrival:
        raise ValueError("a product cannot be both featured and a new arrival")


class ProductCreate(SQLModel):
    """
    Payload for creating a product.

    - name and category are required and cannot be blank.
    - category must match an existing category name (checked by the service).
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(max_length=200)
    description: str | None = None
    dimensions: str | None = None
    category: str = Field(max_length=100)
    use_case: str | None = None
    image: str | None = None
    is_featured: bool = False
    is_new_arrival: bool = False

    @field_validator("name", "category")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty")
        return v

    @model_validator(mode="after")
    def check_flags(self) -> "ProductCreate":
        _exclusive_flags(self.is_featured, self.is_new_arrival)
        return self


class ProductRead(SQLModel):
    """
    Product representation for clients.
    """

    id: uuid.UUID
    name: str
    description: str | None = None
    dimensions: str | None = None
    category: str
    use_case: str | None = None
    image: str | None = None
    is_featured: bool
    is_new_arrival: bool
    created_at: datetime
    updated_at: datetime


class ProductUpdate(SQLModel):
    """
    Partial update payload for products.
    All fields are optional; only the ones sent are applied.
    """

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, max_length=200)
    description: str | None = None
    dimensions: str | None = None
    category: str | None = Field(default=None, max_length=100)
    use_case: str | None = None
    image: str | None = None
    is_featured: bool | None = None
    is_new_arrival: bool | None = None

    @field_validator("name", "category")
    @classmethod
    def not_empty(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty")
        return v

    @model_validator(mode="after")
    def check_flags(self) -> "ProductUpdate":
        _exclusive_flags(self.is_featured, self.is_new_arrival)
        return self
