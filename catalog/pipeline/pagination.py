from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from catalog.models import Offer

log = logging.getLogger(__name__)

PAGE_SIZE_OPTIONS: tuple[int, ...] = (12, 24, 48, 96)
DEFAULT_PAGE_SIZE = 24


@dataclass(slots=True)
class Page:
    items: list[Offer]
    page: int
    total_pages: int


def total_pages(count: int, page_size: int) -> int:
    return max(1, math.ceil(count / page_size))


def paginate(offers: list[Offer], page: int, page_size: int = DEFAULT_PAGE_SIZE) -> Page:
    """Slice one page out of an ordered list.

    Out-of-range pages are clamped to the nearest valid page, so a list that
    shrank under a stale page number still renders.
    """
    if page_size < 1:
        page_size = DEFAULT_PAGE_SIZE
    pages = total_pages(len(offers), page_size)
    effective = min(max(page, 1), pages)
    if effective != page:
        log.debug("Clamped page %s to %s (total pages %s)", page, effective, pages)

    start = (effective - 1) * page_size
    return Page(items=offers[start : start + page_size], page=effective, total_pages=pages)
