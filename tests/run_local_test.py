# run_local_test.py
import argparse
import logging

from catalog.loader import load_store
from reco_core.config import get_settings
from reco_core.dispatcher import RecommendationEngine
from reco_core.logger import configure_logging


def main(argv=None):
    parser = argparse.ArgumentParser(description="Print recommendations for one user.")
    parser.add_argument("user", type=str, help="User id, e.g. U001")
    parser.add_argument("--algorithm", default=None, help="collaborative | content_based | hybrid | popularity")
    parser.add_argument("--limit", type=int, default=None)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(logging.DEBUG if args.verbose else settings.log_level, settings.event_log_dir)
    engine = RecommendationEngine(load_store(settings), settings)

    print(engine.summary())
    for item in engine.explain_recommendations(args.user, args.algorithm, args.limit):
        rec = item.recommendation
        print(f"- {rec.product.name} [{item.algorithm.value}] score={rec.score:.3f} confidence={rec.confidence:.1f}%")
        print(f"  {item.explanation}")


if __name__ == "__main__":
    main()
