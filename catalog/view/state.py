from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import Literal

from catalog.filters.taxonomy import ALL_CATEGORIES
from catalog.parsers.normalize import normalize_query
from catalog.pipeline.pagination import DEFAULT_PAGE_SIZE
from catalog.pipeline.sorting import DEFAULT_SORT, SortStrategy

Layout = Literal["grid", "list"]
LAYOUTS: tuple[str, ...] = ("grid", "list")
DEFAULT_LAYOUT: Layout = "grid"


@dataclass(frozen=True, slots=True)
class ViewState:
    """Everything the user controls about the current catalog view.

    Instances are immutable; every interaction goes through one of the ``with_*``
    transitions, which also reset the page whenever the result set can change.
    """

    category: str = ALL_CATEGORIES
    subcategory: str | None = None
    tags: frozenset[str] = field(default_factory=frozenset)
    query: str = ""
    sort: SortStrategy = DEFAULT_SORT
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    layout: Layout = DEFAULT_LAYOUT

    def __post_init__(self) -> None:
        # Filter values are stored the way a query string carries them back.
        category = (self.category or "").strip() or ALL_CATEGORIES
        subcategory = (self.subcategory or "").strip() or None
        if category == ALL_CATEGORIES:
            subcategory = None
        object.__setattr__(self, "category", category)
        object.__setattr__(self, "subcategory", subcategory)
        object.__setattr__(self, "tags", frozenset(t.strip() for t in self.tags if t and t.strip()))

    @property
    def has_query(self) -> bool:
        return bool(normalize_query(self.query))

    def with_category(self, category: str) -> "ViewState":
        return replace(
            self,
            category=category or ALL_CATEGORIES,
            subcategory=None,
            tags=frozenset(),
            query="",
            page=1,
        )

    def with_subcategory(self, subcategory: str | None) -> "ViewState":
        return replace(self, subcategory=subcategory or None, page=1)

    def toggle_tag(self, tag: str) -> "ViewState":
        tags = self.tags - {tag} if tag in self.tags else self.tags | {tag}
        return replace(self, tags=frozenset(tags), page=1)

    def with_tags(self, tags: Iterable[str]) -> "ViewState":
        return replace(self, tags=frozenset(tags), page=1)

    def with_query(self, query: str) -> "ViewState":
        return replace(self, query=query, page=1)

    def with_sort(self, sort: SortStrategy) -> "ViewState":
        return replace(self, sort=sort, page=1)

    def with_page_size(self, page_size: int) -> "ViewState":
        return replace(self, page_size=page_size, page=1)

    def with_layout(self, layout: Layout) -> "ViewState":
        return replace(self, layout=layout)

    def with_page(self, page: int) -> "ViewState":
        return replace(self, page=max(page, 1))

    def clear_filters(self) -> "ViewState":
        return replace(self, subcategory=None, tags=frozenset(), page=1)

    def clear_all(self) -> "ViewState":
        return ViewState()
