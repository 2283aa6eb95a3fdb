# app/repositories/product_repo.py
import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy import func, update
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from app.models.product import Product

logger = logging.getLogger(__name__)


class ProductRepository:
    """
    Data access layer for Product.

    - Pure DB operations (CRUD + queries).
    - Store errors never escape: they are logged, the session is rolled
      back, and the caller gets [] / None / False instead.
    """

    def get_by_id(self, session: Session, product_id: uuid.UUID) -> Product | None:
        try:
            return session.get(Product, product_id)
        except SQLAlchemyError as e:
            logger.error(f"Error fetching product {product_id}: {e}")
            session.rollback()
            return None

    def list(
        self,
        session: Session,
        category: str | None = None,
        is_featured: bool | None = None,
        is_new_arrival: bool | None = None,
    ) -> list[Product]:
        """
        List products, optionally filtered by equality on category and
        the featured / new arrival flags. Ordered by creation time.
        """
        stmt = select(Product)
        if category is not None:
            stmt = stmt.where(Product.category == category)
        if is_featured is not None:
            stmt = stmt.where(Product.is_featured == is_featured)
        if is_new_arrival is not None:
            stmt = stmt.where(Product.is_new_arrival == is_new_arrival)
        stmt = stmt.order_by(Product.created_at)
        try:
            return list(session.exec(stmt).all())
        except SQLAlchemyError as e:
            logger.error(f"Error fetching products: {e}")
            session.rollback()
            return []

    def count_by_category(self, session: Session, category: str) -> int | None:
        """
        Number of products referencing `category`. None on store error,
        so callers can tell "unused" apart from "unknown".
        """
        stmt = (
            select(func.count())
            .select_from(Product)
            .where(Product.category == category)
        )
        try:
            return session.exec(stmt).one()
        except SQLAlchemyError as e:
            logger.error(f"Error counting products in category {category!r}: {e}")
            session.rollback()
            return None

    def create(self, session: Session, product: Product) -> Product | None:
        try:
            session.add(product)
            session.commit()
            session.refresh(product)
            return product
        except SQLAlchemyError as e:
            logger.error(f"Error creating product: {e}")
            session.rollback()
            return None

    def update(self, session: Session, product: Product) -> Product | None:
        product.updated_at = datetime.now(timezone.utc)
        try:
            session.add(product)
            session.commit()
            session.refresh(product)
            return product
        except SQLAlchemyError as e:
            logger.error(f"Error updating product {product.id}: {e}")
            session.rollback()
            return None

    def delete(self, session: Session, product: Product) -> bool:
        try:
            session.delete(product)
            session.commit()
            return True
        except SQLAlchemyError as e:
            logger.error(f"Error deleting product {product.id}: {e}")
            session.rollback()
            return False

    def rename_category(self, session: Session, old_name: str, new_name: str) -> None:
        """
        Point every product at the renamed category.

        No commit here; the category rename owns the transaction.
        On Postgres the FK already cascaded and this matches zero rows.
        """
        stmt = (
            update(Product)
            .where(Product.category == old_name)
            .values(category=new_name, updated_at=datetime.now(timezone.utc))
        )
        session.execute(stmt)
