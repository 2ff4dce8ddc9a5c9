"""
catalog/loader.py
-----------------
Loads the product catalog and user directory (JSON) and assembles
them into a Store.
"""

import json
from pathlib import Path
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from catalog.store import Store
from reco_core.config import EngineSettings, get_settings
from reco_core.errors import CatalogError
from reco_core.types import Product, User

CATALOG_PATH = Path(__file__).parent / "catalog.json"
USERS_PATH = Path(__file__).parent / "users.json"

_products = TypeAdapter(List[Product])
_users = TypeAdapter(List[User])


def _read_json(path: Path):
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        raise CatalogError(f"Seed file not found: {path}") from None
    except json.JSONDecodeError as e:
        raise CatalogError(f"Invalid JSON in {path}: {e}") from e


def load_products(path: Path = CATALOG_PATH) -> List[Product]:
    """Return the parsed catalog as a list of Products."""
    try:
        return _products.validate_python(_read_json(path))
    except ValidationError as e:
        raise CatalogError(f"Malformed catalog {path}: {e}") from e


def load_users(path: Path = USERS_PATH) -> List[User]:
    """Return the parsed user directory as a list of Users."""
    try:
        return _users.validate_python(_read_json(path))
    except ValidationError as e:
        raise CatalogError(f"Malformed user file {path}: {e}") from e


def load_store(settings: Optional[EngineSettings] = None) -> Store:
    settings = settings or get_settings()
    return Store(load_products(settings.catalog_path), load_users(settings.users_path))
