"""
catalog/validate_catalog.py
---------------------------
Ensures catalog.json and users.json are well-formed and consistent
with each other.
"""

import json
import logging
from pathlib import Path
from typing import List

from reco_core.errors import CatalogError
from reco_core.logger import configure_logging

CATALOG_PATH = Path(__file__).parent / "catalog.json"
USERS_PATH = Path(__file__).parent / "users.json"

logger = logging.getLogger(__name__)

PRODUCT_FIELDS = ["product_id", "name", "category", "price", "rating", "features"]
USER_FIELDS = ["user_id", "preferences", "interaction_history"]


def _load(path: Path):
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise CatalogError(f"{path.name} must contain a JSON list")
    return data


def validate_catalog(products_path: Path = CATALOG_PATH, users_path: Path = USERS_PATH) -> List[str]:
    """
    Raise CatalogError on structural problems; return warnings for
    interactions that point outside the catalog.
    """
    products = _load(products_path)
    users = _load(users_path)

    seen = set()
    for idx, item in enumerate(products):
        for field in PRODUCT_FIELDS:
            if field not in item:
                raise CatalogError(f"Missing field '{field}' in product {idx}")
        if not isinstance(item["features"], list):
            raise CatalogError(f"features field must be a list in product {item['product_id']}")
        if not isinstance(item["price"], (int, float)) or item["price"] < 0:
            raise CatalogError(f"price must be a non-negative number in product {item['product_id']}")
        if not isinstance(item["rating"], (int, float)) or not 0 <= item["rating"] <= 5:
            raise CatalogError(f"rating must be within 0-5 in product {item['product_id']}")
        if item["product_id"] in seen:
            raise CatalogError(f"Duplicate product id '{item['product_id']}'")
        seen.add(item["product_id"])

    warnings = []
    user_ids = set()
    for idx, user in enumerate(users):
        for field in USER_FIELDS:
            if field not in user:
                raise CatalogError(f"Missing field '{field}' in user {idx}")
        if user["user_id"] in user_ids:
            raise CatalogError(f"Duplicate user id '{user['user_id']}'")
        user_ids.add(user["user_id"])
        for interaction in user["interaction_history"]:
            if interaction.get("product_id") not in seen:
                warnings.append(
                    f"user {user['user_id']} references unknown product {interaction.get('product_id')}"
                )

    for w in warnings:
        logger.warning(w)
    logger.info("Catalog validated successfully: %d products, %d users", len(products), len(users))
    return warnings


if __name__ == "__main__":
    configure_logging()
    validate_catalog()
