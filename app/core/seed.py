# app/core/seed.py
"""
Starter catalog content for a fresh database.

Each table is only filled when it is empty, so running the seed twice
is harmless.
"""
import logging

from sqlmodel import Session, select

from app.models.carousel import CarouselImage
from app.models.category import Category
from app.models.product import Product

logger = logging.getLogger(__name__)

SAMPLE_CATEGORIES: list[dict] = [
    {
        "name": "Ceiling Cornices",
        "description": "Elegant ceiling trim designs to enhance your room's perimeter.",
        "image": "https://images.unsplash.com/photo-1618221195710-dd6b41faaea6",
    },
    {
        "name": "Wall Panels",
        "description": "Add texture and dimension to your walls with decorative panels.",
        "image": "https://images.unsplash.com/photo-1600210492493-0946911123ea",
    },
    {
        "name": "Light Troughs",
        "description": "Create ambient lighting with our recessed ceiling designs.",
        "image": "https://images.unsplash.com/photo-1600607687920-4e2a09cf159d",
    },
    {
        "name": "Columns & Pillars",
        "description": "Classic and modern column designs for architectural accents.",
        "image": "https://images.unsplash.com/photo-1505796149773-5d216eb9ac6d",
    },
    {
        "name": "3D Panels",
        "description": "Sculpted panels for statement feature walls.",
        "image": "https://images.unsplash.com/photo-1601084881623-cdf9a8ea242c",
    },
    {
        "name": "Ceiling Medallions",
        "description": "Decorative centrepieces for chandeliers and pendant lights.",
        "image": "https://images.unsplash.com/photo-1603203040289-611d79cb1fe7",
    },
]

SAMPLE_PRODUCTS: list[dict] = [
    {
        "name": "Royal Crown Cornice",
        "description": "Elegant cornice design with intricate detailing.",
        "dimensions": "12cm height x 15cm projection",
        "category": "Ceiling Cornices",
        "use_case": "Living Rooms, Dining Rooms",
        "image": "https://images.unsplash.com/photo-1600607687920-4e2a09cf159d",
        "is_featured": True,
    },
    {
        "name": "Geometric 3D Wall Panel",
        "description": "Modern geometric pattern that creates a stunning visual effect.",
        "dimensions": "50cm x 50cm panels",
        "category": "3D Panels",
        "use_case": "Feature Walls, Office Spaces",
        "image": "https://images.unsplash.com/photo-1601084881623-cdf9a8ea242c",
        "is_featured": True,
    },
    {
        "name": "Classic Ceiling Medallion",
        "description": "Traditional ceiling medallion with floral motif.",
        "dimensions": "60cm diameter",
        "category": "Ceiling Medallions",
        "use_case": "Dining Rooms, Entryways",
        "image": "https://images.unsplash.com/photo-1603203040289-611d79cb1fe7",
        "is_new_arrival": True,
    },
]

SAMPLE_SLIDES: list[dict] = [
    {
        "title": "Elegant Gypsum Designs for Modern Interiors",
        "subtitle": "Transform your space with our premium quality gypsum and interior decor products.",
        "image": "https://images.unsplash.com/photo-1600210492493-0946911123ea",
        "button_text": "Explore Collection",
        "button_link": "/?section=featured",
    },
    {
        "title": "Ceiling Designs That Inspire",
        "subtitle": "Our ceiling medallions and cornices add elegance to any room.",
        "image": "https://images.unsplash.com/photo-1618221195710-dd6b41faaea6",
        "button_text": "View Ceiling Collection",
        "button_link": "/?category=Ceiling Cornices",
    },
    {
        "title": "Wall Panels for Character & Style",
        "subtitle": "Add dimension and texture to your walls with our designer panels.",
        "image": "https://images.unsplash.com/photo-1484154218962-a197022b5858",
        "button_text": "Discover Wall Panels",
        "button_link": "/?category=Wall Panels",
    },
]


def _is_empty(session: Session, model) -> bool:
    return session.exec(select(model).limit(1)).first() is None


def seed_catalog(session: Session) -> dict[str, int]:
    """
    Insert the sample categories, products and carousel slides.

    Returns:
        Number of rows inserted per table.
    """
    inserted = {"categories": 0, "products": 0, "carousel_images": 0}

    if _is_empty(session, Category):
        session.add_all(Category(**row) for row in SAMPLE_CATEGORIES)
        inserted["categories"] = len(SAMPLE_CATEGORIES)
        # Products reference category names
        session.flush()

    if _is_empty(session, Product):
        session.add_all(Product(**row) for row in SAMPLE_PRODUCTS)
        inserted["products"] = len(SAMPLE_PRODUCTS)

    if _is_empty(session, CarouselImage):
        session.add_all(
            CarouselImage(display_order=position, **row)
            for position, row in enumerate(SAMPLE_SLIDES)
        )
        inserted["carousel_images"] = len(SAMPLE_SLIDES)

    session.commit()
    logger.info(f"Seeded catalog: {inserted}")
    return inserted
