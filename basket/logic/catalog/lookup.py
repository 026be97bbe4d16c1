"""Catalog lookup: exact name/alias match, name suggestions and category guessing.

Works on the built-in catalog tables only; the list store is not consulted.
"""
from typing import List, Optional

from basket.domain.Catalog import normalize_name
from basket.utilities.defaults import CATALOG_PRODUCTS, CATEGORY_KEYWORDS

MAX_SUGGESTIONS = 6

__all__ = ["find_catalog_by_name", "suggest_catalog", "resolve_category_for_name", "MAX_SUGGESTIONS"]


def find_catalog_by_name(name: str) -> Optional[dict]:
    """Return the catalog product whose name or one of its aliases equals ``name``."""
    target = normalize_name(name)
    if not target:
        return None
    for product in CATALOG_PRODUCTS:
        if normalize_name(product["name"]) == target:
            return product
        if any(normalize_name(alias) == target for alias in product["aliases"]):
            return product
    return None


def suggest_catalog(name: str, limit: int = MAX_SUGGESTIONS) -> List[dict]:
    """Catalog products whose name contains ``name``, in catalog order."""
    target = normalize_name(name)
    if not target:
        return []
    return [p for p in CATALOG_PRODUCTS if target in normalize_name(p["name"])][:limit]


def resolve_category_for_name(name: str) -> Optional[str]:
    """Category id for ``name``: catalog match first, then keyword substrings."""
    match = find_catalog_by_name(name)
    if match:
        return match["categoryId"]
    target = normalize_name(name)
    if not target:
        return None
    for category_id, tokens in CATEGORY_KEYWORDS.items():
        if any(token in target for token in tokens):
            return category_id
    return None
