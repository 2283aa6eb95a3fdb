# app/repositories/category_repo.py
import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from app.models.category import Category
from app.repositories.product_repo import ProductRepository

logger = logging.getLogger(__name__)


class CategoryRepository:
    """
    Data access layer for Category.

    Same soft-failure policy as ProductRepository.
    """

    def __init__(self, product_repo: ProductRepository | None = None):
        self.product_repo = product_repo or ProductRepository()

    def get_by_id(self, session: Session, category_id: uuid.UUID) -> Category | None:
        try:
            return session.get(Category, category_id)
        except SQLAlchemyError as e:
            logger.error(f"Error fetching category {category_id}: {e}")
            session.rollback()
            return None

    def name_exists(self, session: Session, name: str) -> bool | None:
        """
        True/False for a category with this name, None on store error.
        """
        stmt = select(Category.id).where(Category.name == name)
        try:
            return session.exec(stmt).first() is not None
        except SQLAlchemyError as e:
            logger.error(f"Error fetching category {name!r}: {e}")
            session.rollback()
            return None

    def list(self, session: Session) -> list[Category]:
        stmt = select(Category).order_by(Category.created_at)
        try:
            return list(session.exec(stmt).all())
        except SQLAlchemyError as e:
            logger.error(f"Error fetching categories: {e}")
            session.rollback()
            return []

    def create(self, session: Session, category: Category) -> Category | None:
        try:
            session.add(category)
            session.commit()
            session.refresh(category)
            return category
        except SQLAlchemyError as e:
            logger.error(f"Error creating category: {e}")
            session.rollback()
            return None

    def update(
        self,
        session: Session,
        category: Category,
        previous_name: str | None = None,
    ) -> Category | None:
        """
        Persist changes. If `previous_name` differs from the current name,
        products referencing the old name are moved over in the same commit.
        """
        category.updated_at = datetime.now(timezone.utc)
        try:
            session.add(category)
            if previous_name is not None and previous_name != category.name:
                session.flush()
                self.product_repo.rename_category(
                    session, previous_name, category.name
                )
            session.commit()
            session.refresh(category)
            return category
        except SQLAlchemyError as e:
            logger.error(f"Error updating category {category.id}: {e}")
            session.rollback()
            return None

    def delete(self, session: Session, category: Category) -> bool:
        try:
            session.delete(category)
            session.commit()
            return True
        except SQLAlchemyError as e:
            logger.error(f"Error deleting category {category.id}: {e}")
            session.rollback()
            return False
