"""
recommender/vector_utils.py
---------------------------
Atomic math utilities: interaction-derived user preference vectors,
attribute-derived product feature vectors, and cosine similarity.
Used by the scoring algorithms in recommender/recommend.py.
"""

import numpy as np

from catalog.store import Store
from reco_core.types import InteractionType, Product, User

# === INTERACTION WEIGHTS ===
INTERACTION_WEIGHTS = {
    InteractionType.PURCHASE: 5.0,
    InteractionType.ADD_TO_CART: 3.0,
    InteractionType.VIEW: 1.0,
}
DEFAULT_WEIGHT = 1.0


# === CORE MATH ===
def cosine_similarity(a: np.ndarray, b: np.ndarray) -> float:
    """
    Dot product over magnitudes. Zero-magnitude input yields 0.0.
    Identical non-zero vectors yield exactly 1.0.
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    sq_a = float(np.dot(a, a))
    sq_b = float(np.dot(b, b))
    if sq_a == 0 or sq_b == 0:
        return 0.0
    return float(np.dot(a, b)) / float(np.sqrt(sq_a * sq_b))


def interaction_weight(interaction) -> float:
    weight = INTERACTION_WEIGHTS.get(interaction.type, DEFAULT_WEIGHT)
    if interaction.rating is not None:
        weight *= interaction.rating / 5
    return weight


# === VECTORS ===
def user_vector(store: Store, user: User) -> np.ndarray:
    """
    One slot per catalog product. A later interaction with the same product
    overwrites the earlier one; unknown product ids are skipped.
    """
    vec = np.zeros(len(store), dtype=np.float64)
    for interaction in user.interaction_history:
        idx = store.product_index(interaction.product_id)
        if idx is not None:
            vec[idx] = interaction_weight(interaction)
    return vec


def content_vector(store: Store, product: Product) -> np.ndarray:
    """
    [one-hot sorted categories | feature-tag flags | price / max price | rating / 5]
    """
    categories = sorted(store.categories())
    features = store.feature_tags()
    max_price = max((p.price for p in store.products), default=0.0)
    own = set(product.features)

    vec = [1.0 if product.category == c else 0.0 for c in categories]
    vec.extend(1.0 if f in own else 0.0 for f in features)
    vec.append(product.price / max_price if max_price > 0 else 0.0)
    vec.append(product.rating / 5)
    return np.asarray(vec, dtype=np.float64)

