from __future__ import annotations

from dataclasses import dataclass
from typing import Any

MAX_TAGS = 3


def _clean_tags(row: dict[str, Any]) -> tuple[str, ...]:
    raw = row.get("tags")
    if raw is None:
        raw = [row.get("tag1"), row.get("tag2"), row.get("tag3")]
    tags = [str(t).strip() for t in raw if t is not None and str(t).strip()]
    return tuple(tags[:MAX_TAGS])


_TRUE_STRINGS = {"true", "t", "yes", "y", "1"}
_FALSE_STRINGS = {"false", "f", "no", "n", "0", ""}


def _as_bool(value: Any, key: str) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    text = str(value).strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    raise ValueError(f"Offer field {key!r} is not a boolean: {value!r}")


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True, slots=True)
class Offer:
    id: int
    name: str
    offer: str = ""
    description: str = ""
    category_main: str | None = None
    category_sub: str | None = None
    tags: tuple[str, ...] = ()
    is_featured: bool = False
    github_offer: bool = False

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Offer":
        if row.get("id") is None or not row.get("name"):
            raise ValueError(f"Offer record requires 'id' and 'name': {row!r}")
        return cls(
            id=int(row["id"]),
            name=str(row["name"]).strip(),
            offer=str(row.get("offer") or ""),
            description=str(row.get("description") or ""),
            category_main=_optional_str(row.get("category_main")),
            category_sub=_optional_str(row.get("category_sub")),
            tags=_clean_tags(row),
            is_featured=_as_bool(row.get("is_featured"), "is_featured"),
            github_offer=_as_bool(row.get("github_offer"), "github_offer"),
        )


@dataclass(slots=True)
class ScoredOffer:
    offer: Offer
    score: int


@dataclass(frozen=True, slots=True)
class Category:
    id: str
    name: str
    count: int
