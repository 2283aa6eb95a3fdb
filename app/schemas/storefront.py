# app/schemas/storefront.py
from sqlmodel import SQLModel

from app.schemas.carousel import CarouselImageRead
from app.schemas.category import CategoryRead
from app.schemas.footer import FooterRead
from app.schemas.product import ProductRead


class StorefrontPage(SQLModel):
    """
    Everything the home page renders, in one response.

    `category` and `section` echo the ?category= / ?section= query
    parameters so shared links (e.g. carousel buttons) resolve.
    """

    category: str | None = None
    section: str | None = None
    carousel: list[CarouselImageRead]
    categories: list[CategoryRead]
    featured: list[ProductRead]
    new_arrivals: list[ProductRead]
    products: list[ProductRead]
    footer: FooterRead
