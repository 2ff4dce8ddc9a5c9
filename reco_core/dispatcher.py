"""
reco_core/dispatcher.py
-----------------------
Engine facade: routes a request to the chosen scoring strategy and
renders explanations. Callers (UI, API, scripts) only talk to this class.
"""

from __future__ import annotations

import logging
import time
from typing import Iterable, List, Optional, Union

import numpy as np

from catalog.store import Store
from explainer.explain import generate_explanation
from explainer.templates import load_templates, merge_templates
from reco_core.config import EngineSettings, get_settings
from reco_core.context_core import build_engine_context, engine_snapshot
from reco_core.logger import log_event
from reco_core.types import (
    Algorithm,
    ExplainedRecommendation,
    Interaction,
    InteractionType,
    Product,
    Recommendation,
)
from recommender.recommend import (
    collaborative_filtering,
    content_based_filtering,
    hybrid_recommendation,
    popularity_recommendation,
)

logger = logging.getLogger(__name__)


class RecommendationEngine:
    def __init__(
        self,
        store: Store,
        settings: Optional[EngineSettings] = None,
        rng: Optional[np.random.Generator] = None,
        templates=None,
    ):
        self.store = store
        self.settings = settings or get_settings()
        self.rng = rng if rng is not None else np.random.default_rng(self.settings.random_seed)
        if templates is not None:
            self.templates = merge_templates(templates)
        else:
            self.templates = load_templates(self.settings.templates_path)

    def summary(self) -> str:
        return build_engine_context(engine_snapshot(self))

    # ────────────────────────────────────────────────────────────────
    # SCORING
    # ────────────────────────────────────────────────────────────────
    def get_recommendations(
        self,
        user_id: str,
        algorithm=None,
        limit: Optional[int] = None,
    ) -> List[Recommendation]:
        """
        Rank up to `limit` unseen products for the user. Unknown algorithm
        ids are served by the hybrid strategy.
        """
        algo = Algorithm.parse(algorithm if algorithm is not None else self.settings.default_algorithm)
        limit = self.settings.default_limit if limit is None else limit
        threshold = self.settings.similarity_threshold
        start = time.perf_counter()

        if algo is Algorithm.COLLABORATIVE:
            recs = collaborative_filtering(self.store, user_id, limit, threshold)
        elif algo is Algorithm.CONTENT_BASED:
            recs = content_based_filtering(self.store, user_id, limit)
        elif algo is Algorithm.POPULARITY:
            recs = popularity_recommendation(self.store, user_id, limit, self.rng)
        else:
            recs = hybrid_recommendation(self.store, user_id, limit, threshold)

        latency = round((time.perf_counter() - start) * 1000, 3)
        logger.debug("served %d %s recommendations to %s in %sms", len(recs), algo.value, user_id, latency)
        log_event("recommendations_served", {
            "user_id": user_id,
            "algorithm": algo.value,
            "requested": algorithm if isinstance(algorithm, str) else algo.value,
            "limit": limit,
            "product_ids": [r.product.product_id for r in recs],
            "latency_ms": latency,
        })
        return recs

    def generate_explanation(self, user_id: str, product: Union[Product, str], algorithm=None) -> str:
        user = self.store.get_user(user_id)
        if not isinstance(product, Product):
            product = self.store.get_product(product)
        algo = algorithm if algorithm is not None else self.settings.default_algorithm
        return generate_explanation(user, product, algo, self.templates)

    def explain_recommendations(
        self,
        user_id: str,
        algorithm=None,
        limit: Optional[int] = None,
    ) -> List[ExplainedRecommendation]:
        algo = Algorithm.parse(algorithm if algorithm is not None else self.settings.default_algorithm)
        return [
            ExplainedRecommendation(
                recommendation=rec,
                algorithm=algo,
                explanation=self.generate_explanation(user_id, rec.product, algorithm),
            )
            for rec in self.get_recommendations(user_id, algorithm, limit)
        ]

    # ────────────────────────────────────────────────────────────────
    # PROFILE UPDATES
    # ────────────────────────────────────────────────────────────────
    def record_interaction(
        self,
        user_id: str,
        product_id: str,
        type: Union[InteractionType, str],
        rating: Optional[float] = None,
    ) -> Interaction:
        interaction = self.store.record_interaction(user_id, product_id, type, rating)
        log_event("interaction_recorded", {
            "user_id": user_id,
            "product_id": product_id,
            "type": interaction.type.value,
            "rating": rating,
        })
        return interaction

    def edit_preferences(self, user_id: str, categories: Iterable[str]) -> List[str]:
        preferences = self.store.set_preferences(user_id, categories)
        log_event("preferences_updated", {"user_id": user_id, "preferences": preferences})
        return preferences
