"""
catalog/stats.py
----------------
Per-user engagement counters and per-category rating summaries.
"""

from typing import Dict

import numpy as np

from catalog.store import Store
from reco_core.types import InteractionType, UserStats


def user_stats(store: Store, user_id: str) -> UserStats:
    history = store.get_user(user_id).interaction_history
    rated = [i.rating for i in history if i.rating is not None]

    def count(kind: InteractionType) -> int:
        return sum(1 for i in history if i.type == kind)

    return UserStats(
        user_id=user_id,
        total_interactions=len(history),
        purchases=count(InteractionType.PURCHASE),
        views=count(InteractionType.VIEW),
        cart_additions=count(InteractionType.ADD_TO_CART),
        ratings=len(rated),
        average_rating=float(np.mean(rated)) if rated else 0.0,
    )


def category_average_ratings(store: Store) -> Dict[str, float]:
    """Mean product rating per category, in first-seen catalog order."""
    out = {}
    for cat in store.categories():
        out[cat] = float(np.mean([p.rating for p in store.products if p.category == cat]))
    return out
