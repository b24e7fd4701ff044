from __future__ import annotations

from typing import Literal

from catalog.models import Offer

SortStrategy = Literal["newest", "popular", "alphabetical"]
SORT_STRATEGIES: tuple[str, ...] = ("newest", "popular", "alphabetical")
DEFAULT_SORT: SortStrategy = "newest"


def sort_offers(offers: list[Offer], strategy: str) -> list[Offer]:
    """Return a new list ordered by a named strategy; unknown names sort as newest.

    Ids are assigned monotonically, so a higher id means a more recent offer.
    """
    if strategy == "alphabetical":
        return sorted(offers, key=lambda o: (o.name.casefold(), o.id))
    if strategy == "popular":
        return sorted(offers, key=lambda o: (not o.is_featured, -o.id))
    return sorted(offers, key=lambda o: -o.id)
