# app/services/search.py
from typing import Iterable

from app.models.product import Product

SEARCH_FIELDS = ("name", "description", "category")


def search_products(query: str, products: Iterable[Product]) -> list[Product]:
    """
    Case-insensitive substring match on name, description or category.

    - Blank query => [] ("not searched yet", not "no matches").
    - Result keeps the input order; no ranking.

    A linear scan is enough for a catalog of a few hundred items.
    """
    needle = (query or "").strip().lower()
    if not needle:
        return []

    matches: list[Product] = []
    for product in products:
        for field in SEARCH_FIELDS:
            value = getattr(product, field, None)
            if value and needle in value.lower():
                matches.append(product)
                break
    return matches
