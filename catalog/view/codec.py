from __future__ import annotations

import logging
from urllib.parse import parse_qs, urlencode

from catalog.filters.taxonomy import ALL_CATEGORIES
from catalog.pipeline.pagination import DEFAULT_PAGE_SIZE, PAGE_SIZE_OPTIONS
from catalog.pipeline.sorting import DEFAULT_SORT, SORT_STRATEGIES
from catalog.view.state import DEFAULT_LAYOUT, LAYOUTS, ViewState

log = logging.getLogger(__name__)


def _first(params: dict[str, list[str]], key: str) -> str:
    values = params.get(key)
    return values[0].strip() if values else ""


def _parse_positive_int(raw: str, key: str, default: int) -> int:
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        log.debug("Ignoring malformed %s=%r", key, raw)
        return default
    if value < 1:
        log.debug("Ignoring non-positive %s=%r", key, raw)
        return default
    return value


def _nearest_page_size(value: int) -> int:
    # Ties go to the smaller size.
    return min(PAGE_SIZE_OPTIONS, key=lambda size: (abs(size - value), size))


def _parse_tags(raw: str) -> frozenset[str]:
    return frozenset(t.strip() for t in raw.split(",") if t.strip())


def decode(query_string: str) -> ViewState:
    """Build a ViewState from a URL query string, never failing.

    Missing or malformed parameters fall back to their defaults and a subcategory
    without a concrete category is dropped.
    """
    params = parse_qs((query_string or "").lstrip("?"), keep_blank_values=False)

    category = _first(params, "category") or ALL_CATEGORIES
    subcategory = _first(params, "subcategory") or None
    if category == ALL_CATEGORIES:
        subcategory = None

    sort = _first(params, "sort") or DEFAULT_SORT
    if sort not in SORT_STRATEGIES:
        log.debug("Unknown sort=%r, using %s", sort, DEFAULT_SORT)
        sort = DEFAULT_SORT

    layout = _first(params, "view") or DEFAULT_LAYOUT
    if layout not in LAYOUTS:
        log.debug("Unknown view=%r, using %s", layout, DEFAULT_LAYOUT)
        layout = DEFAULT_LAYOUT

    page_size = _parse_positive_int(_first(params, "perPage"), "perPage", DEFAULT_PAGE_SIZE)
    if page_size not in PAGE_SIZE_OPTIONS:
        page_size = _nearest_page_size(page_size)

    values = params.get("q")
    query = values[0] if values else ""

    return ViewState(
        category=category,
        subcategory=subcategory,
        tags=_parse_tags(_first(params, "tags")),
        query=query,
        sort=sort,
        page=_parse_positive_int(_first(params, "page"), "page", 1),
        page_size=page_size,
        layout=layout,
    )


def encode(state: ViewState) -> str:
    """Canonical query string for a ViewState; default values are omitted."""
    pairs: list[tuple[str, str]] = []
    if state.category and state.category != ALL_CATEGORIES:
        pairs.append(("category", state.category))
        if state.subcategory:
            pairs.append(("subcategory", state.subcategory))
    if state.tags:
        pairs.append(("tags", ",".join(sorted(state.tags))))
    if state.query:
        pairs.append(("q", state.query))
    if state.sort != DEFAULT_SORT:
        pairs.append(("sort", state.sort))
    if state.page > 1:
        pairs.append(("page", str(state.page)))
    if state.page_size != DEFAULT_PAGE_SIZE:
        pairs.append(("perPage", str(state.page_size)))
    if state.layout != DEFAULT_LAYOUT:
        pairs.append(("view", state.layout))
    return urlencode(pairs)
