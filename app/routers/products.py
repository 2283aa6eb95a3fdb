# app/routers/products.py
import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session

from app.core.auth import require_admin
from app.database import get_session
from app.repositories.category_repo import CategoryRepository
from app.repositories.product_repo import ProductRepository
from app.schemas.product import ProductCreate, ProductRead, ProductUpdate
from app.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["Products"])

repo = ProductRepository()
service = ProductService(repo, CategoryRepository(repo))


# -------- Public endpoints --------


@router.get("", response_model=list[ProductRead])
def list_products(
    session: Session = Depends(get_session),
    category: str | None = None,
    featured: bool | None = None,
    new_arrival: bool | None = None,
):
    """
    List products.

    - Public endpoint.
    - Optional equality filters: `category`, `featured`, `new_arrival`.
    - Returns [] if the store is unreachable.
    """
    return service.list_products(
        session,
        category=category,
        is_featured=featured,
        is_new_arrival=new_arrival,
    )


@router.get("/search", response_model=list[ProductRead])
def search_products(
    q: str = "",
    session: Session = Depends(get_session),
):
    """
    Case-insensitive substring search over name, description and category.

    - Blank `q` returns [].
    """
    return service.search_products(session, q)


@router.get("/{product_id}", response_model=ProductRead)
def get_product(
    product_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    """
    Get a single product by id.

    - Public endpoint.
    """
    product = service.find_product(session, product_id)
    if not product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found",
        )
    return product


# -------- Admin endpoints --------


@router.post(
    "",
    response_model=ProductRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_product(
    payload: ProductCreate,
    session: Session = Depends(get_session),
):
    """
    Create a new product (admin only).
    """
    return service.create_product(session, payload)


@router.patch(
    "/{product_id}",
    response_model=ProductRead,
    dependencies=[Depends(require_admin)],
)
def update_product(
    product_id: uuid.UUID,
    payload: ProductUpdate,
    session: Session = Depends(get_session),
):
    """
    Update an existing product (admin only).

    Setting `is_featured` clears `is_new_arrival` and vice versa.
    """
    return service.update_product(session, product_id, payload)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
def delete_product(
    product_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    """
    Delete a product permanently (admin only).
    """
    if not service.delete_product(session, product_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found",
        )
    return None
