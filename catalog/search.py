"""
catalog/search.py
-----------------
Catalog browsing helpers: filter by category, free-text search over
name/description/brand, and sorting.
"""

from typing import List, Optional

from catalog.store import Store
from reco_core.types import CatalogFacets, Product

SORT_KEYS = {
    "name": (lambda p: p.name.lower(), False),
    "price": (lambda p: p.price, False),
    "rating": (lambda p: p.rating, True),
}


def _matches(product: Product, term: str) -> bool:
    return (
        term in product.name.lower()
        or term in product.description.lower()
        or term in product.brand.lower()
    )


def search_products(
    store: Store,
    category: Optional[str] = None,
    query: Optional[str] = None,
    sort_by: Optional[str] = None,
) -> List[Product]:
    term = (query or "").strip().lower()
    results = [
        p for p in store.products
        if (not category or p.category == category) and (not term or _matches(p, term))
    ]
    if sort_by in SORT_KEYS:
        key, reverse = SORT_KEYS[sort_by]
        results.sort(key=key, reverse=reverse)
    return results


def catalog_facets(store: Store) -> CatalogFacets:
    prices = [p.price for p in store.products] or [0.0]
    ratings = [p.rating for p in store.products] or [0.0]
    return CatalogFacets(
        categories=store.categories(),
        price_range=(min(prices), max(prices)),
        rating_range=(min(ratings), max(ratings)),
    )
