"""
Unit tests for CategoryService: uniqueness, rename cascade, delete guard
"""
import uuid

import pytest
from fastapi import HTTPException
from pydantic import ValidationError
from sqlmodel import select

from app.models.category import Category
from app.schemas.category import CategoryCreate, CategoryUpdate
from app.schemas.product import ProductCreate


class TestCategoryService:
    """Test CategoryService methods"""

    def test_create_requires_name(self, session):
        """Test create({}) fails before any store write"""
        with pytest.raises(ValidationError):
            CategoryCreate()
        with pytest.raises(ValidationError):
            CategoryCreate(name="  ")

        assert session.exec(select(Category)).all() == []

    def test_create_and_list(self, session, category_service, wall_panels):
        category_service.create_category(session, CategoryCreate(name="Light Troughs"))

        names = [c.name for c in category_service.list_categories(session)]

        assert names == ["Wall Panels", "Light Troughs"]

    def test_duplicate_name_conflicts(self, session, category_service, wall_panels):
        with pytest.raises(HTTPException) as exc:
            category_service.create_category(session, CategoryCreate(name="Wall Panels"))

        assert exc.value.status_code == 409

    def test_rename_cascades_to_products(
        self, session, category_service, product_service, wall_panels
    ):
        """Test renaming a category moves its products to the new name"""
        product = product_service.create_product(
            session, ProductCreate(name="Geometric Panel", category="Wall Panels")
        )

        renamed = category_service.update_category(
            session, wall_panels.id, CategoryUpdate(name="Decorative Wall Panels")
        )

        assert renamed.name == "Decorative Wall Panels"
        refreshed = product_service.find_product(session, product.id)
        assert refreshed.category == "Decorative Wall Panels"
        assert product_service.list_products(session, category="Wall Panels") == []

    def test_rename_to_existing_name_conflicts(self, session, category_service, wall_panels):
        other = category_service.create_category(session, CategoryCreate(name="Light Troughs"))

        with pytest.raises(HTTPException) as exc:
            category_service.update_category(
                session, other.id, CategoryUpdate(name="Wall Panels")
            )

        assert exc.value.status_code == 409

    def test_update_description_only(self, session, category_service, wall_panels):
        updated = category_service.update_category(
            session, wall_panels.id, CategoryUpdate(description="Textured walls.")
        )

        assert updated.name == "Wall Panels"
        assert updated.description == "Textured walls."

    def test_update_missing_is_404(self, session, category_service):
        with pytest.raises(HTTPException) as exc:
            category_service.update_category(
                session, uuid.uuid4(), CategoryUpdate(description="x")
            )

        assert exc.value.status_code == 404

    def test_delete_in_use_is_refused(
        self, session, category_service, product_service, wall_panels
    ):
        product_service.create_product(
            session, ProductCreate(name="Geometric Panel", category="Wall Panels")
        )

        with pytest.raises(HTTPException) as exc:
            category_service.delete_category(session, wall_panels.id)

        assert exc.value.status_code == 409
        assert category_service.find_category(session, wall_panels.id) is not None

    def test_delete_unused(self, session, category_service, wall_panels):
        assert category_service.delete_category(session, wall_panels.id) is True
        assert category_service.find_category(session, wall_panels.id) is None
        assert category_service.delete_category(session, wall_panels.id) is False
