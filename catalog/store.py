"""
catalog/store.py
----------------
In-memory catalog and user directory.

The product order given at construction is the canonical ordering used by
preference vectors and by every tie-break between equal scores.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Tuple

from reco_core.errors import CatalogError, UnknownEntity
from reco_core.types import Interaction, InteractionType, Product, User

logger = logging.getLogger(__name__)


class Store:
    def __init__(self, products: Iterable[Product], users: Iterable[User]):
        self.products: Tuple[Product, ...] = tuple(products)
        self._index: Dict[str, int] = {}
        for i, p in enumerate(self.products):
            if p.product_id in self._index:
                raise CatalogError(f"Duplicate product id '{p.product_id}'")
            self._index[p.product_id] = i

        self.users: Dict[str, User] = {}
        for u in users:
            if u.user_id in self.users:
                raise CatalogError(f"Duplicate user id '{u.user_id}'")
            self.users[u.user_id] = u

        self._session: Dict[str, List[Interaction]] = {}

    def __len__(self) -> int:
        return len(self.products)

    # === LOOKUPS ===
    def get_product(self, product_id: str) -> Product:
        idx = self._index.get(product_id)
        if idx is None:
            raise UnknownEntity("product", product_id)
        return self.products[idx]

    def find_product(self, product_id: str) -> Optional[Product]:
        """Like get_product, but None for ids outside the catalog."""
        idx = self._index.get(product_id)
        return None if idx is None else self.products[idx]

    def product_index(self, product_id: str) -> Optional[int]:
        return self._index.get(product_id)

    def get_user(self, user_id: str) -> User:
        try:
            return self.users[user_id]
        except KeyError:
            raise UnknownEntity("user", user_id) from None

    def categories(self) -> List[str]:
        """Distinct categories in first-seen catalog order."""
        return list(dict.fromkeys(p.category for p in self.products))

    def feature_tags(self) -> List[str]:
        """Distinct feature tags in first-seen catalog order."""
        return list(dict.fromkeys(f for p in self.products for f in p.features))

    # === MUTATIONS ===
    def record_interaction(
        self,
        user_id: str,
        product_id: str,
        type: InteractionType | str,
        rating: Optional[float] = None,
    ) -> Interaction:
        """
        Append an interaction to the user's history and to the session log.
        The product id is stored as given; consumers skip ids that are not
        in the catalog.
        """
        user = self.get_user(user_id)
        interaction = Interaction(
            product_id=product_id,
            type=type,
            rating=rating,
            timestamp=datetime.now(),
        )
        user.interaction_history.append(interaction)
        self._session.setdefault(user_id, []).append(interaction)
        if product_id not in self._index:
            logger.warning("Interaction for %s references unknown product %s", user_id, product_id)
        return interaction

    def set_preferences(self, user_id: str, categories: Iterable[str]) -> List[str]:
        user = self.get_user(user_id)
        user.preferences = list(categories)
        return user.preferences

    def session_interactions(self, user_id: str) -> List[Interaction]:
        self.get_user(user_id)
        return list(self._session.get(user_id, []))
