from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

from catalog.parsers.normalize import contains_word, normalize_query

log = logging.getLogger(__name__)

# Broad terms only map to generic related words, never to specific products.
DEFAULT_SYNONYMS: dict[str, list[str]] = {
    "notes": ["note", "notebook", "writing"],
    "note": ["notes", "notebook", "writing"],
    "design": ["ui", "ux", "prototype", "creative"],
    "ui": ["interface", "design", "ux"],
    "ux": ["experience", "design", "ui"],
    "code": ["coding", "development", "programming"],
    "coding": ["code", "development", "programming"],
    "cloud": ["server", "hosting", "deploy"],
    "hosting": ["server", "cloud", "deploy"],
    "chat": ["messaging", "communication"],
    "video": ["calling", "meeting", "conference"],
    "security": ["privacy", "protection", "password"],
    "ai": ["artificial intelligence", "ml", "machine learning", "bot"],
    "bot": ["ai", "automated"],
    "trial": ["free", "demo"],
    "free": ["trial", "no cost", "student"],
}


class SynonymDictionary:
    """Read-only mapping of a lowercase term to its related lowercase terms."""

    def __init__(self, entries: Mapping[str, Iterable[str]]):
        frozen: dict[str, tuple[str, ...]] = {}
        for key, values in entries.items():
            term = key.strip().lower()
            if not term:
                continue
            related: list[str] = []
            for value in values:
                v = value.strip().lower()
                if v and v not in related:
                    related.append(v)
            frozen[term] = tuple(related)
        self._entries = MappingProxyType(frozen)

    def __contains__(self, term: object) -> bool:
        return term in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, term: str) -> tuple[str, ...]:
        return self._entries.get(term, ())

    def expand(self, query: str) -> list[str]:
        """Return the primary term followed by de-duplicated synonym expansions.

        Synonyms are added for an exact dictionary hit on the whole query and for
        every dictionary key found in the query as a whole word.
        """
        primary = normalize_query(query)
        terms = [primary]
        terms.extend(self.get(primary))

        for key, related in self._entries.items():
            if key in terms:
                continue
            if contains_word(primary, key):
                terms.extend(related)

        return list(dict.fromkeys(terms))


def load_synonyms(path: str) -> SynonymDictionary:
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError("Synonyms file must contain a JSON object of term -> [terms].")
    for key, values in raw.items():
        if not isinstance(values, list):
            raise ValueError(f"Synonyms for {key!r} must be a JSON list.")
    synonyms = SynonymDictionary(raw)
    log.info("Loaded %s synonym entries from %s", len(synonyms), path)
    return synonyms


DEFAULT_SYNONYM_DICTIONARY = SynonymDictionary(DEFAULT_SYNONYMS)
