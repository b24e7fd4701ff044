from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from catalog.filters.taxonomy import ALL_CATEGORIES, offer_matches_category, tags_from_offers
from catalog.models import Offer

CategoryPredicate = Callable[[Offer, str], bool]


@dataclass(frozen=True, slots=True)
class FilterSelection:
    category: str = ALL_CATEGORIES
    subcategory: str | None = None
    tags: frozenset[str] = field(default_factory=frozenset)


def filter_by_category(
    offers: Iterable[Offer],
    category: str,
    subcategory: str | None,
    matches_category: CategoryPredicate = offer_matches_category,
) -> list[Offer]:
    results = list(offers)
    if category == ALL_CATEGORIES:
        # Subcategories only mean something inside a chosen category.
        return results

    results = [o for o in results if matches_category(o, category)]
    if subcategory:
        wanted = subcategory.lower()
        results = [o for o in results if o.category_sub is not None and o.category_sub.lower() == wanted]
    return results


def filter_by_tags(offers: Iterable[Offer], tags: Iterable[str]) -> list[Offer]:
    """AND semantics: an offer must carry every selected tag."""
    required = set(tags)
    if not required:
        return list(offers)
    return [o for o in offers if required.issubset(o.tags)]


def apply_filters(
    offers: Iterable[Offer],
    selection: FilterSelection,
    matches_category: CategoryPredicate = offer_matches_category,
) -> list[Offer]:
    results = filter_by_category(offers, selection.category, selection.subcategory, matches_category)
    return filter_by_tags(results, selection.tags)


def available_tags(offers: Iterable[Offer], subcategories: Iterable[str]) -> list[str]:
    """Tag facet options, excluding any tag that duplicates a subcategory name."""
    hidden = {s.lower() for s in subcategories}
    return [t for t in tags_from_offers(list(offers)) if t.lower() not in hidden]
