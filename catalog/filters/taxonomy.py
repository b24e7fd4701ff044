from __future__ import annotations

from collections.abc import Callable

from catalog.models import Category, Offer
from catalog.parsers.normalize import normalize_category

ALL_CATEGORIES = "all"
GITHUB_CATEGORY = "github"


def offer_matches_category(offer: Offer, category_id: str) -> bool:
    """Category membership by slug of ``category_main``.

    ``all`` matches every offer and ``github`` matches the GitHub pack offers
    regardless of their main category.
    """
    if category_id == ALL_CATEGORIES:
        return True
    if category_id == GITHUB_CATEGORY:
        return offer.github_offer
    if not offer.category_main:
        return False
    return normalize_category(offer.category_main) == normalize_category(category_id)


def offers_in_category(
    offers: list[Offer],
    category_id: str,
    matches: Callable[[Offer, str], bool] = offer_matches_category,
) -> list[Offer]:
    if category_id == ALL_CATEGORIES:
        return list(offers)
    return [o for o in offers if matches(o, category_id)]


def subcategories_for_category(
    offers: list[Offer],
    category_id: str,
    matches: Callable[[Offer, str], bool] = offer_matches_category,
) -> list[str]:
    return sorted({o.category_sub for o in offers_in_category(offers, category_id, matches) if o.category_sub})


def tags_from_offers(offers: list[Offer]) -> list[str]:
    return sorted({tag for o in offers for tag in o.tags if tag})


def generate_categories(offers: list[Offer]) -> list[Category]:
    counts: dict[str, int] = {}
    for offer in offers:
        if offer.category_main:
            counts[offer.category_main] = counts.get(offer.category_main, 0) + 1

    by_id: dict[str, Category] = {}
    for name in sorted(counts):
        category_id = normalize_category(name)
        by_id.setdefault(category_id, Category(id=category_id, name=name, count=counts[name]))
    return list(by_id.values())
