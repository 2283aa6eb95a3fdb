# app/services/product_service.py
import logging
import uuid

from fastapi import HTTPException, status
from sqlmodel import Session

from app.models.product import Product
from app.repositories.category_repo import CategoryRepository
from app.repositories.product_repo import ProductRepository
from app.schemas.product import ProductCreate, ProductUpdate
from app.services.search import search_products

logger = logging.getLogger(__name__)


class ProductService:
    """
    Business logic for Product.

    Responsibilities:
      - category reference check (must name an existing category)
      - featured / new arrival exclusivity
      - turning store failures into a generic error for writes
      - admin-only operations (enforced at router via require_admin)
    """

    def __init__(self, repo: ProductRepository, category_repo: CategoryRepository):
        self.repo = repo
        self.category_repo = category_repo

    # ----- Helpers -----

    def _ensure_category_exists(self, session: Session, name: str, action: str) -> None:
        exists = self.category_repo.name_exists(session, name)
        if exists is None:
            raise self._store_failure(action)
        if not exists:
            logger.info(f"Rejected product write: unknown category {name!r}")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Unknown category: {name}",
            )

    @staticmethod
    def _store_failure(action: str) -> HTTPException:
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to {action} product",
        )

    # ----- Reads -----

    def list_products(
        self,
        session: Session,
        category: str | None = None,
        is_featured: bool | None = None,
        is_new_arrival: bool | None = None,
    ) -> list[Product]:
        return self.repo.list(
            session,
            category=category,
            is_featured=is_featured,
            is_new_arrival=is_new_arrival,
        )

    def list_featured(self, session: Session) -> list[Product]:
        return self.repo.list(session, is_featured=True)

    def list_new_arrivals(self, session: Session) -> list[Product]:
        return self.repo.list(session, is_new_arrival=True)

    def find_product(self, session: Session, product_id: uuid.UUID) -> Product | None:
        """Return the product, or None when it does not exist."""
        return self.repo.get_by_id(session, product_id)

    def search_products(self, session: Session, query: str) -> list[Product]:
        if not query or not query.strip():
            return []
        return search_products(query, self.repo.list(session))

    # ----- Writes -----

    def create_product(self, session: Session, payload: ProductCreate) -> Product:
        """
        Create a product after checking its category exists.
        """
        self._ensure_category_exists(session, payload.category, "create")

        product = Product(
            name=payload.name,
            description=payload.description,
            dimensions=payload.dimensions,
            category=payload.category,
            use_case=payload.use_case,
            image=payload.image,
            is_featured=payload.is_featured,
            is_new_arrival=payload.is_new_arrival,
        )
        created = self.repo.create(session, product)
        if created is None:
            raise self._store_failure("create")
        return created

    def update_product(
        self,
        session: Session,
        product_id: uuid.UUID,
        payload: ProductUpdate,
    ) -> Product:
        """
        Partial update of a product.

        - Turning on is_featured turns off is_new_arrival, and vice versa.
        - A new category must exist.
        """
        product = self.find_product(session, product_id)
        if not product:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found",
            )

        changes = payload.model_dump(exclude_unset=True)

        if changes.get("category") is not None and changes["category"] != product.category:
            self._ensure_category_exists(session, changes["category"], "update")

        if changes.get("is_featured"):
            changes["is_new_arrival"] = False
        elif changes.get("is_new_arrival"):
            changes["is_featured"] = False

        # Required columns cannot be nulled out
        for field in ("name", "category", "is_featured", "is_new_arrival"):
            if field in changes and changes[field] is None:
                del changes[field]

        for field, value in changes.items():
            setattr(product, field, value)

        updated = self.repo.update(session, product)
        if updated is None:
            raise self._store_failure("update")
        return updated

    def delete_product(self, session: Session, product_id: uuid.UUID) -> bool:
        """
        Delete a product. Returns False if it does not exist.
        """
        product = self.find_product(session, product_id)
        if not product:
            return False
        if not self.repo.delete(session, product):
            raise self._store_failure("delete")
        return True
