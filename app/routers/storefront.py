# app/routers/storefront.py
from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.database import get_session
from app.repositories.carousel_repo import CarouselRepository
from app.repositories.category_repo import CategoryRepository
from app.repositories.footer_repo import FooterRepository
from app.repositories.product_repo import ProductRepository
from app.schemas.carousel import CarouselImageRead
from app.schemas.category import CategoryRead
from app.schemas.product import ProductRead
from app.schemas.storefront import StorefrontPage
from app.services.carousel_service import CarouselService
from app.services.category_service import CategoryService
from app.services.footer_service import FooterService
from app.services.product_service import ProductService

router = APIRouter(prefix="/storefront", tags=["Storefront"])

product_repo = ProductRepository()
category_repo = CategoryRepository(product_repo)

products = ProductService(product_repo, category_repo)
categories = CategoryService(category_repo, product_repo)
carousel = CarouselService(CarouselRepository())
footer = FooterService(FooterRepository())


@router.get("", response_model=StorefrontPage)
def storefront(
    session: Session = Depends(get_session),
    category: str | None = None,
    section: str | None = None,
):
    """
    Home page payload.

    - `?category=<name>` narrows `products` to one category.
    - `?section=<id>` is echoed back for the client to scroll to.

    Every list degrades to [] on store errors so the page still renders.
    """
    category = category.strip() if category and category.strip() else None

    return StorefrontPage(
        category=category,
        section=section,
        carousel=[
            CarouselImageRead.model_validate(s) for s in carousel.list_images(session)
        ],
        categories=[
            CategoryRead.model_validate(c) for c in categories.list_categories(session)
        ],
        featured=[ProductRead.model_validate(p) for p in products.list_featured(session)],
        new_arrivals=[
            ProductRead.model_validate(p) for p in products.list_new_arrivals(session)
        ],
        products=[
            ProductRead.model_validate(p)
            for p in products.list_products(session, category=category)
        ],
        footer=footer.get_footer(session),
    )
