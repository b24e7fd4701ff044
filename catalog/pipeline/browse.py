from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from catalog.filters.offer_filters import (
    CategoryPredicate,
    available_tags,
    filter_by_category,
    filter_by_tags,
)
from catalog.filters.taxonomy import ALL_CATEGORIES, offer_matches_category, subcategories_for_category
from catalog.models import Offer
from catalog.pipeline.pagination import paginate
from catalog.pipeline.sorting import sort_offers
from catalog.search.search_engine import DEFAULT_ENGINE, SearchEngine
from catalog.view.state import ViewState

log = logging.getLogger(__name__)


@dataclass(slots=True)
class BrowseResult:
    items: list[Offer]
    total_count: int
    total_pages: int
    state: ViewState
    subcategories: list[str] = field(default_factory=list)
    available_tags: list[str] = field(default_factory=list)


def browse(
    offers: list[Offer],
    state: ViewState,
    *,
    engine: SearchEngine = DEFAULT_ENGINE,
    matches_category: CategoryPredicate = offer_matches_category,
) -> BrowseResult:
    """Run category, tag, relevance, sort and page stages over ``offers``.

    The returned ``state`` carries the page actually shown; it differs from the
    input when a stale page number was clamped, and callers should re-encode it.
    """
    scoped = filter_by_category(offers, state.category, state.subcategory, matches_category)

    if state.category == ALL_CATEGORIES:
        subcategories: list[str] = []
    else:
        subcategories = subcategories_for_category(offers, state.category, matches_category)
    tag_options = available_tags(scoped, subcategories)

    results = filter_by_tags(scoped, state.tags)
    if state.has_query:
        # Relevance order is the point of a search; named sorts do not apply.
        results = engine.rank_by_relevance(results, state.query)
    else:
        results = sort_offers(results, state.sort)

    page = paginate(results, state.page, state.page_size)
    effective_state = state if page.page == state.page else replace(state, page=page.page)
    log.debug(
        "Browse %s/%s tags=%s q=%r: %s results, page %s of %s",
        state.category,
        state.subcategory,
        sorted(state.tags),
        state.query,
        len(results),
        page.page,
        page.total_pages,
    )
    return BrowseResult(
        items=page.items,
        total_count=len(results),
        total_pages=page.total_pages,
        state=effective_state,
        subcategories=subcategories,
        available_tags=tag_options,
    )
