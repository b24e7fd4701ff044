from __future__ import annotations

import math
from dataclasses import dataclass

from catalog.models import Offer
from catalog.parsers.normalize import contains_word
from catalog.search.fuzzy import fuzzy_similarity
from catalog.search.synonyms import DEFAULT_SYNONYM_DICTIONARY, SynonymDictionary
from catalog.search.tuning import DEFAULT_TUNING, SearchTuning


@dataclass(frozen=True, slots=True)
class ScoreHit:
    field: str
    rule: str
    points: int


class OfferScorer:
    """Weighted multi-field relevance scoring of one offer against a query.

    Rules add up across fields. Within the name field the exact, prefix and
    contains rules are exclusive, and the two fuzzy bonuses only apply when none
    of them fired. Synonym hits add flat, lower points per field.
    """

    def __init__(
        self,
        synonyms: SynonymDictionary = DEFAULT_SYNONYM_DICTIONARY,
        tuning: SearchTuning = DEFAULT_TUNING,
    ):
        self.synonyms = synonyms
        self.tuning = tuning

    def _fuzzy(self, query: str, target: str) -> float:
        return fuzzy_similarity(
            query,
            target,
            min_similarity=self.tuning.fuzzy_min_similarity,
            substring_similarity=self.tuning.fuzzy_substring_similarity,
        )

    def explain(self, offer: Offer, query: str) -> list[ScoreHit]:
        return self.explain_terms(offer, self.synonyms.expand(query))

    def explain_terms(self, offer: Offer, terms: list[str]) -> list[ScoreHit]:
        """Rule hits for already expanded terms: the primary term, then synonyms."""
        primary, synonyms = terms[0], terms[1:]
        if not primary:
            return []

        w = self.tuning.weights
        hits: list[ScoreHit] = []

        name = offer.name.lower()
        if name == primary:
            hits.append(ScoreHit("name", "exact", w.name_exact))
        elif name.startswith(primary):
            hits.append(ScoreHit("name", "prefix", w.name_prefix))
        elif primary in name:
            hits.append(ScoreHit("name", "contains", w.name_contains))
        else:
            whole = self._fuzzy(primary, name)
            if whole > 0:
                hits.append(ScoreHit("name", "fuzzy", math.floor(whole * w.name_fuzzy)))
            best_word = max((self._fuzzy(primary, word) for word in name.split()), default=0.0)
            if best_word > 0:
                hits.append(ScoreHit("name", "word_fuzzy", math.floor(best_word * w.name_word_fuzzy)))
        hits.extend(ScoreHit("name", f"synonym:{s}", w.name_synonym) for s in synonyms if s in name)

        offer_text = offer.offer.lower()
        if primary in offer_text:
            hits.append(ScoreHit("offer", "contains", w.offer_contains))
        hits.extend(ScoreHit("offer", f"synonym:{s}", w.offer_synonym) for s in synonyms if s in offer_text)

        if offer.category_main:
            category = offer.category_main.lower()
            if primary in category:
                hits.append(ScoreHit("category_main", "contains", w.category_contains))
            hits.extend(
                ScoreHit("category_main", f"synonym:{s}", w.category_synonym) for s in synonyms if s in category
            )

        if offer.category_sub:
            subcategory = offer.category_sub.lower()
            if primary in subcategory:
                hits.append(ScoreHit("category_sub", "contains", w.subcategory_contains))
            hits.extend(
                ScoreHit("category_sub", f"synonym:{s}", w.subcategory_synonym) for s in synonyms if s in subcategory
            )

        for tag in offer.tags:
            tag_lower = tag.lower()
            field = f"tag:{tag}"
            if tag_lower == primary:
                hits.append(ScoreHit(field, "exact", w.tag_exact))
            elif primary in tag_lower:
                hits.append(ScoreHit(field, "contains", w.tag_contains))
            elif contains_word(primary, tag_lower):
                hits.append(ScoreHit(field, "word_in_query", w.tag_word_in_query))
            hits.extend(ScoreHit(field, f"synonym:{s}", w.tag_synonym) for s in synonyms if s in tag_lower)

        if offer.description:
            description = offer.description.lower()
            if primary in description:
                hits.append(ScoreHit("description", "contains", w.description_contains))
            hits.extend(
                ScoreHit("description", f"synonym:{s}", w.description_synonym) for s in synonyms if s in description
            )

        return hits

    def score(self, offer: Offer, query: str) -> int:
        return self.score_terms(offer, self.synonyms.expand(query))

    def score_terms(self, offer: Offer, terms: list[str]) -> int:
        return sum(hit.points for hit in self.explain_terms(offer, terms))


DEFAULT_SCORER = OfferScorer()


def score(offer: Offer, query: str) -> int:
    return DEFAULT_SCORER.score(offer, query)


def explain(offer: Offer, query: str) -> list[ScoreHit]:
    return DEFAULT_SCORER.explain(offer, query)
