from __future__ import annotations

import argparse

from dotenv import load_dotenv

from catalog.config import get_settings
from catalog.data.offer_loader import load_json_offers
from catalog.logging_setup import setup_logging
from catalog.main import build_engine


def main() -> None:
    parser = argparse.ArgumentParser(description="Print the per-rule relevance breakdown for a search query.")
    parser.add_argument("query", help="Free-text search query")
    parser.add_argument("--offers", default=None, help="Path to offers JSON seed file")
    parser.add_argument("--top", type=int, default=10, help="How many ranked offers to show")
    args = parser.parse_args()

    load_dotenv()
    settings = get_settings()
    setup_logging(settings.log_level)

    offers = load_json_offers(args.offers or settings.offers_path)
    engine = build_engine()
    ranked = engine.rank(offers, args.query)
    if not ranked:
        print(f"No offers match {args.query!r}")
        return

    ratio = engine.tuning.threshold_ratio(engine.normalize(args.query))
    print(f"Top score {ranked[0].score}, cut-off {ranked[0].score * ratio:.1f} (ratio {ratio})")
    for item in ranked[: args.top]:
        print(f"\n{item.score:>4}  {item.offer.name} (id {item.offer.id})")
        for hit in engine.scorer.explain(item.offer, args.query):
            print(f"      +{hit.points:<3} {hit.field} / {hit.rule}")


if __name__ == "__main__":
    main()
