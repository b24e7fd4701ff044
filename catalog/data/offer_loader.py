from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path

from catalog.models import Offer

log = logging.getLogger(__name__)


def load_json_offers(path: str) -> list[Offer]:
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(raw, list):
        raise ValueError("Offers seed file must contain JSON list.")

    offers = [Offer.from_row(item) for item in raw]
    seen: set[int] = set()
    for offer in offers:
        if offer.id in seen:
            raise ValueError(f"Duplicate offer id {offer.id} in {path}")
        seen.add(offer.id)
    return offers


class OfferCache:
    """Holds the loaded offer list until explicitly invalidated."""

    def __init__(self, loader: Callable[[], list[Offer]]):
        self.loader = loader
        self._offers: list[Offer] | None = None

    @classmethod
    def from_json(cls, path: str) -> "OfferCache":
        return cls(lambda: load_json_offers(path))

    @property
    def is_loaded(self) -> bool:
        return self._offers is not None

    def load(self) -> list[Offer]:
        if self._offers is None:
            offers = list(self.loader())
            if not offers:
                log.warning("Offer loader returned no offers.")
            else:
                log.info("Loaded offers: %s", len(offers))
            self._offers = offers
        return list(self._offers)

    def invalidate(self) -> None:
        if self._offers is not None:
            log.debug("Dropping %s cached offers", len(self._offers))
        self._offers = None
