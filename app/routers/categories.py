# app/routers/categories.py
import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session

from app.core.auth import require_admin
from app.database import get_session
from app.repositories.category_repo import CategoryRepository
from app.repositories.product_repo import ProductRepository
from app.schemas.category import CategoryCreate, CategoryRead, CategoryUpdate
from app.services.category_service import CategoryService

router = APIRouter(prefix="/categories", tags=["Categories"])

product_repo = ProductRepository()
service = CategoryService(CategoryRepository(product_repo), product_repo)


# -------- Public endpoints --------


@router.get("", response_model=list[CategoryRead])
def list_categories(session: Session = Depends(get_session)):
    """
    List all categories (public).
    """
    return service.list_categories(session)


@router.get("/{category_id}", response_model=CategoryRead)
def get_category(
    category_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    category = service.find_category(session, category_id)
    if not category:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Category not found",
        )
    return category


# -------- Admin endpoints --------


@router.post(
    "",
    response_model=CategoryRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_category(
    payload: CategoryCreate,
    session: Session = Depends(get_session),
):
    """
    Create a new category (admin only).
    """
    return service.create_category(session, payload)


@router.patch(
    "/{category_id}",
    response_model=CategoryRead,
    dependencies=[Depends(require_admin)],
)
def update_category(
    category_id: uuid.UUID,
    payload: CategoryUpdate,
    session: Session = Depends(get_session),
):
    """
    Update a category (admin only).

    Renaming also renames the category on every product that uses it.
    """
    return service.update_category(session, category_id, payload)


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
def delete_category(
    category_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    """
    Delete a category (admin only).

    - 409 while products still reference it.
    """
    if not service.delete_category(session, category_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Category not found",
        )
    return None
