# app/services/category_service.py
import logging
import uuid

from fastapi import HTTPException, status
from sqlmodel import Session

from app.models.category import Category
from app.repositories.category_repo import CategoryRepository
from app.repositories.product_repo import ProductRepository
from app.schemas.category import CategoryCreate, CategoryUpdate

logger = logging.getLogger(__name__)


class CategoryService:
    """
    Business logic for Category.

    Responsibilities:
      - unique names
      - cascade renames to products (via the repository)
      - refuse deleting a category that products still use
    """

    def __init__(self, repo: CategoryRepository, product_repo: ProductRepository):
        self.repo = repo
        self.product_repo = product_repo

    def _ensure_name_free(self, session: Session, name: str, action: str) -> None:
        taken = self.repo.name_exists(session, name)
        if taken is None:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to {action} category",
            )
        if taken:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Category already exists: {name}",
            )

    def list_categories(self, session: Session) -> list[Category]:
        return self.repo.list(session)

    def find_category(self, session: Session, category_id: uuid.UUID) -> Category | None:
        return self.repo.get_by_id(session, category_id)

    def create_category(self, session: Session, payload: CategoryCreate) -> Category:
        self._ensure_name_free(session, payload.name, "create")

        category = Category(
            name=payload.name,
            description=payload.description,
            image=payload.image,
        )
        created = self.repo.create(session, category)
        if created is None:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to create category",
            )
        return created

    def update_category(
        self,
        session: Session,
        category_id: uuid.UUID,
        payload: CategoryUpdate,
    ) -> Category:
        """
        Partial update. A rename moves all products to the new name.
        """
        category = self.find_category(session, category_id)
        if not category:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Category not found",
            )

        previous_name = category.name

        if payload.name is not None and payload.name != previous_name:
            self._ensure_name_free(session, payload.name, "update")
            logger.info(f"Renaming category {previous_name!r} -> {payload.name!r}")
            category.name = payload.name

        changes = payload.model_dump(exclude_unset=True, exclude={"name"})
        for field, value in changes.items():
            setattr(category, field, value)

        updated = self.repo.update(session, category, previous_name=previous_name)
        if updated is None:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to update category",
            )
        return updated

    def delete_category(self, session: Session, category_id: uuid.UUID) -> bool:
        """
        Delete a category. Returns False if it does not exist.

        Raises 409 while products still reference it.
        """
        category = self.find_category(session, category_id)
        if not category:
            return False

        in_use = self.product_repo.count_by_category(session, category.name)
        if in_use is None:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to delete category",
            )
        if in_use:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Category is used by {in_use} product(s)",
            )

        if not self.repo.delete(session, category):
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to delete category",
            )
        return True
