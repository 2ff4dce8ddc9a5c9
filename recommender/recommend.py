"""
recommender/recommend.py
------------------------
Ranks catalog products a user has not interacted with yet, using one of
four scoring strategies. Scores are only comparable within one strategy.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import List, Optional

import numpy as np

from catalog.store import Store
from reco_core.types import Interaction, InteractionType, Product, Recommendation, User
from recommender.vector_utils import cosine_similarity, user_vector

logger = logging.getLogger(__name__)

# Collaborative
SIMILARITY_THRESHOLD = 0.1
IMPLICIT_RATINGS = {InteractionType.PURCHASE: 4.5, InteractionType.ADD_TO_CART: 3.5}
DEFAULT_IMPLICIT_RATING = 3.0
COLLABORATIVE_MAX_CONFIDENCE = 95.0

# Content-based
CATEGORY_BONUS = 2.0
FEATURE_WEIGHT = 0.5
RATING_PIVOT = 3.0
RATING_WEIGHT = 0.5
LIKED_RATING = 4
CONTENT_MAX_CONFIDENCE = 90.0

# Hybrid
COLLABORATIVE_SHARE = 0.6
CONTENT_SHARE = 0.4
HYBRID_BONUS = 10.0
HYBRID_MAX_CONFIDENCE = 95.0

# Popularity
POPULARITY_RATING_WEIGHT = 0.7
POPULARITY_NOISE = 2.5
POPULARITY_CONFIDENCE_PER_STAR = 18.0
POPULARITY_MAX_CONFIDENCE = 85.0


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def candidates(store: Store, user: User) -> List[Product]:
    """Catalog products the user has no recorded interaction with."""
    seen = user.interacted_product_ids()
    return [p for p in store.products if p.product_id not in seen]


def _rank(recs: List[Recommendation], limit: int) -> List[Recommendation]:
    # sorted() is stable, so equal scores keep catalog order
    if limit <= 0:
        return []
    return sorted(recs, key=lambda r: r.score, reverse=True)[:limit]


def implicit_rating(interaction: Interaction) -> float:
    if interaction.rating is not None:
        return interaction.rating
    return IMPLICIT_RATINGS.get(interaction.type, DEFAULT_IMPLICIT_RATING)


def _first_interaction(user: User, product_id: str) -> Optional[Interaction]:
    return next((i for i in user.interaction_history if i.product_id == product_id), None)


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

def collaborative_filtering(
    store: Store,
    user_id: str,
    limit: int = 3,
    threshold: float = SIMILARITY_THRESHOLD,
) -> List[Recommendation]:
    """
    User-based collaborative filtering. Each candidate is scored by the
    similarity-weighted mean of the implicit ratings given to it by
    neighbours whose preference vectors have cosine similarity > threshold.
    """
    user = store.get_user(user_id)
    target = user_vector(store, user)

    neighbours = []
    for other in store.users.values():
        if other.user_id == user_id:
            continue
        sim = cosine_similarity(target, user_vector(store, other))
        if sim > threshold:
            neighbours.append((other, sim))

    recs = []
    for product in candidates(store, user):
        sim_sum = 0.0
        weighted = 0.0
        for other, sim in neighbours:
            interaction = _first_interaction(other, product.product_id)
            if interaction is None:
                continue
            sim_sum += sim
            weighted += sim * implicit_rating(interaction)
        if sim_sum > 0:
            recs.append(Recommendation(
                product=product,
                score=weighted / sim_sum,
                # Heuristic carried over as-is; not a probability
                confidence=min(sim_sum * 100, COLLABORATIVE_MAX_CONFIDENCE),
            ))

    logger.debug("collaborative user=%s neighbours=%d scored=%d", user_id, len(neighbours), len(recs))
    return _rank(recs, limit)


def liked_feature_counts(store: Store, user: User) -> Counter:
    """Feature-tag frequency over products the user purchased or rated >= 4."""
    freq: Counter = Counter()
    for interaction in user.interaction_history:
        product = store.find_product(interaction.product_id)
        if product is None:
            continue
        liked = interaction.rating is not None and interaction.rating >= LIKED_RATING
        if interaction.type == InteractionType.PURCHASE or liked:
            freq.update(product.features)
    return freq


def content_based_filtering(store: Store, user_id: str, limit: int = 3) -> List[Recommendation]:
    user = store.get_user(user_id)
    freq = liked_feature_counts(store, user)
    preferences = set(user.preferences)

    recs = []
    for product in candidates(store, user):
        score = CATEGORY_BONUS if product.category in preferences else 0.0
        matching = 0
        for feature in product.features:
            if freq[feature]:
                score += freq[feature] * FEATURE_WEIGHT
                matching += 1
        score += (product.rating - RATING_PIVOT) * RATING_WEIGHT

        if score <= 0:
            continue
        ratio = matching / len(product.features) if product.features else 0.0
        recs.append(Recommendation(
            product=product,
            score=score,
            confidence=min(ratio * 100, CONTENT_MAX_CONFIDENCE),
        ))

    logger.debug("content_based user=%s liked_features=%d scored=%d", user_id, len(freq), len(recs))
    return _rank(recs, limit)


def hybrid_recommendation(
    store: Store,
    user_id: str,
    limit: int = 3,
    threshold: float = SIMILARITY_THRESHOLD,
) -> List[Recommendation]:
    """
    60/40 blend of collaborative and content-based scores, each source
    widened to 2x limit before merging.
    """
    collab = {r.product.product_id: r for r in collaborative_filtering(store, user_id, limit * 2, threshold)}
    content = {r.product.product_id: r for r in content_based_filtering(store, user_id, limit * 2)}

    recs = []
    # Walk the catalog so ties fall back to catalog order
    for product in store.products:
        c = collab.get(product.product_id)
        b = content.get(product.product_id)
        if c is None and b is None:
            continue
        score = (c.score * COLLABORATIVE_SHARE if c is not None else 0.0) + (
            b.score * CONTENT_SHARE if b is not None else 0.0
        )
        if c is not None and b is not None:
            confidence = (c.confidence + b.confidence) / 2
        else:
            confidence = (c if c is not None else b).confidence
        recs.append(Recommendation(
            product=product,
            score=score,
            confidence=min(confidence + HYBRID_BONUS, HYBRID_MAX_CONFIDENCE),
        ))

    logger.debug("hybrid user=%s collaborative=%d content=%d merged=%d", user_id, len(collab), len(content), len(recs))
    return _rank(recs, limit)


def popularity_recommendation(
    store: Store,
    user_id: str,
    limit: int = 3,
    rng: Optional[np.random.Generator] = None,
) -> List[Recommendation]:
    """
    Rating-weighted score plus uniform noise in [0, 2.5). Ranking varies
    between calls unless rng is seeded.
    """
    rng = rng if rng is not None else np.random.default_rng()
    user = store.get_user(user_id)

    recs = [
        Recommendation(
            product=product,
            score=product.rating * POPULARITY_RATING_WEIGHT + float(rng.uniform(0, POPULARITY_NOISE)),
            confidence=min(product.rating * POPULARITY_CONFIDENCE_PER_STAR, POPULARITY_MAX_CONFIDENCE),
        )
        for product in candidates(store, user)
    ]
    return _rank(recs, limit)
