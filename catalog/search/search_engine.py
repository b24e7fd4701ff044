from __future__ import annotations

import logging

from catalog.models import Offer, ScoredOffer
from catalog.parsers.normalize import normalize_query
from catalog.search.scoring import OfferScorer
from catalog.search.synonyms import DEFAULT_SYNONYM_DICTIONARY, SynonymDictionary
from catalog.search.tuning import DEFAULT_TUNING, SearchTuning

log = logging.getLogger(__name__)


class SearchEngine:
    def __init__(
        self,
        synonyms: SynonymDictionary = DEFAULT_SYNONYM_DICTIONARY,
        tuning: SearchTuning = DEFAULT_TUNING,
    ):
        self.tuning = tuning
        self.scorer = OfferScorer(synonyms, tuning)

    def normalize(self, text: str) -> str:
        return normalize_query(text)

    def rank(self, offers: list[Offer], query: str) -> list[ScoredOffer]:
        """Score, sort and threshold-cut offers. Empty queries yield no scores."""
        qn = self.normalize(query)
        if not qn:
            return []

        terms = self.scorer.synonyms.expand(query)
        ranked: list[ScoredOffer] = []
        for offer in offers:
            points = self.scorer.score_terms(offer, terms)
            if points > 0:
                ranked.append(ScoredOffer(offer=offer, score=points))

        # Equal scores: shorter, more specific names first.
        ranked.sort(key=lambda x: (-x.score, len(x.offer.name)))
        if not ranked:
            log.debug("Query %r matched nothing among %s offers", qn, len(offers))
            return []

        top_score = ranked[0].score
        threshold = top_score * self.tuning.threshold_ratio(qn)
        kept = [x for x in ranked if x.score >= threshold]
        log.debug(
            "Query %r: %s scored, %s kept at threshold %.1f (top %s)",
            qn,
            len(ranked),
            len(kept),
            threshold,
            top_score,
        )
        return kept

    def rank_by_relevance(self, offers: list[Offer], query: str) -> list[Offer]:
        if not self.normalize(query):
            return list(offers)
        return [x.offer for x in self.rank(offers, query)]


DEFAULT_ENGINE = SearchEngine()


def rank_by_relevance(offers: list[Offer], query: str) -> list[Offer]:
    return DEFAULT_ENGINE.rank_by_relevance(offers, query)
