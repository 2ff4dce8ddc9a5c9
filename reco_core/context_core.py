from __future__ import annotations

import platform
from datetime import datetime, timezone
from typing import Any, Dict

from reco_core.types import Algorithm, AlgorithmInfo

# Reference accuracies shown alongside each strategy
ALGORITHM_INFO: Dict[Algorithm, AlgorithmInfo] = {
    Algorithm.COLLABORATIVE: AlgorithmInfo(
        algorithm=Algorithm.COLLABORATIVE,
        description="User-based collaborative filtering using cosine similarity",
        accuracy=0.78,
    ),
    Algorithm.CONTENT_BASED: AlgorithmInfo(
        algorithm=Algorithm.CONTENT_BASED,
        description="Content-based filtering using product features",
        accuracy=0.72,
    ),
    Algorithm.HYBRID: AlgorithmInfo(
        algorithm=Algorithm.HYBRID,
        description="Hybrid approach combining collaborative and content-based",
        accuracy=0.84,
    ),
    Algorithm.POPULARITY: AlgorithmInfo(
        algorithm=Algorithm.POPULARITY,
        description="Popularity-based recommendations",
        accuracy=0.65,
    ),
}


def describe_algorithm(algorithm: Any) -> AlgorithmInfo:
    return ALGORITHM_INFO[Algorithm.parse(algorithm)]


def build_engine_context(snapshot: Dict[str, Any]) -> str:
    """
    Deterministic, compact one-line summary of a running engine.
    """
    parts = [
        f"Runtime: py{snapshot.get('python_version')}",
        f"Catalog: {snapshot.get('catalog_items', '?')} items",
        f"Users: {snapshot.get('users', '?')}",
        f"Algorithms: {', '.join(snapshot.get('algorithms', []))}",
        f"Default: {snapshot.get('default_algorithm', Algorithm.HYBRID.value)}",
        f"Seeded: {snapshot.get('seeded', False)}",
        f"UTC: {snapshot.get('utc_now')}",
    ]
    return " | ".join(parts)


def engine_snapshot(engine) -> Dict[str, Any]:
    return {
        "python_version": platform.python_version(),
        "catalog_items": len(engine.store),
        "users": len(engine.store.users),
        "algorithms": [a.value for a in Algorithm],
        "default_algorithm": Algorithm.parse(engine.settings.default_algorithm).value,
        "seeded": engine.settings.random_seed is not None,
        "utc_now": datetime.now(timezone.utc).isoformat(timespec="seconds"),
    }
