from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from dotenv import load_dotenv

from catalog.config import get_settings
from catalog.data.offer_loader import OfferCache
from catalog.filters.taxonomy import generate_categories
from catalog.formatters.page_formatter import format_page
from catalog.logging_setup import setup_logging
from catalog.pipeline.browse import browse
from catalog.search.search_engine import SearchEngine
from catalog.search.synonyms import DEFAULT_SYNONYM_DICTIONARY, load_synonyms
from catalog.view.codec import decode, encode
from catalog.view.debounce import QueryDebouncer
from catalog.view.state import ViewState

log = logging.getLogger(__name__)


def build_engine() -> SearchEngine:
    settings = get_settings()
    synonyms = load_synonyms(settings.synonyms_path) if settings.synonyms_path else DEFAULT_SYNONYM_DICTIONARY
    return SearchEngine(synonyms=synonyms, tuning=settings.search_tuning)


def run(query_string: str, offers_path: str | None = None, show_categories: bool = False) -> str:
    settings = get_settings()
    cache = OfferCache.from_json(offers_path or settings.offers_path)
    offers = cache.load()

    state = decode(query_string)
    result = browse(offers, state, engine=build_engine())
    if result.state != state:
        log.info("View state adjusted: ?%s -> ?%s", encode(state), encode(result.state))

    text = format_page(result)
    if show_categories:
        categories = "\n".join(f"- {c.name} ({c.id}): {c.count}" for c in generate_categories(offers))
        text = f"Categories:\n{categories}\n\n{text}"
    return text


async def interactive(query_string: str, offers_path: str | None = None) -> None:
    """Read queries from stdin, re-rendering once typing settles."""
    settings = get_settings()
    offers = OfferCache.from_json(offers_path or settings.offers_path).load()
    engine = build_engine()
    base: ViewState = decode(query_string)

    def render(query: str) -> None:
        print(format_page(browse(offers, base.with_query(query), engine=engine)), flush=True)

    debouncer: QueryDebouncer[str] = QueryDebouncer(settings.query_debounce_sec, render)
    while True:
        line = await asyncio.to_thread(sys.stdin.readline)
        if not line:
            break
        debouncer.submit(line.rstrip("\n"))
    if debouncer.pending:
        await asyncio.sleep(settings.query_debounce_sec + 0.05)


def main() -> None:
    parser = argparse.ArgumentParser(description="Browse the offer catalog from a view-state query string.")
    parser.add_argument("query_string", nargs="?", default="", help='e.g. "category=design&tags=Free+Trial&q=figma"')
    parser.add_argument("--offers", default=None, help="Path to offers JSON seed file")
    parser.add_argument("--interactive", action="store_true", help="Read search queries from stdin")
    parser.add_argument("--categories", action="store_true", help="Also print the category list with counts")
    args = parser.parse_args()

    load_dotenv()
    settings = get_settings()
    setup_logging(settings.log_level)

    if args.interactive:
        asyncio.run(interactive(args.query_string, args.offers))
        return
    print(run(args.query_string, args.offers, args.categories))


if __name__ == "__main__":
    main()
