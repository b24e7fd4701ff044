from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ScoreWeights(BaseModel):
    """Points awarded per field rule when scoring an offer against a query."""

    model_config = ConfigDict(frozen=True)

    name_exact: int = Field(default=100, ge=0)
    name_prefix: int = Field(default=80, ge=0)
    name_contains: int = Field(default=60, ge=0)
    name_fuzzy: int = Field(default=50, ge=0)
    name_word_fuzzy: int = Field(default=55, ge=0)
    name_synonym: int = Field(default=25, ge=0)

    offer_contains: int = Field(default=45, ge=0)
    offer_synonym: int = Field(default=20, ge=0)

    category_contains: int = Field(default=40, ge=0)
    category_synonym: int = Field(default=20, ge=0)

    subcategory_contains: int = Field(default=35, ge=0)
    subcategory_synonym: int = Field(default=18, ge=0)

    tag_exact: int = Field(default=35, ge=0)
    tag_contains: int = Field(default=30, ge=0)
    tag_word_in_query: int = Field(default=25, ge=0)
    tag_synonym: int = Field(default=15, ge=0)

    description_contains: int = Field(default=10, ge=0)
    description_synonym: int = Field(default=5, ge=0)


class SearchTuning(BaseModel):
    model_config = ConfigDict(frozen=True)

    weights: ScoreWeights = Field(default_factory=ScoreWeights)
    fuzzy_min_similarity: float = Field(default=0.7, ge=0.0, le=1.0)
    fuzzy_substring_similarity: float = Field(default=0.9, ge=0.0, le=1.0)
    short_query_length: int = Field(default=3, ge=0)
    short_query_ratio: float = Field(default=0.10, ge=0.0, le=1.0)
    long_query_ratio: float = Field(default=0.25, ge=0.0, le=1.0)

    def threshold_ratio(self, normalized_query: str) -> float:
        if len(normalized_query) < self.short_query_length:
            return self.short_query_ratio
        return self.long_query_ratio


DEFAULT_TUNING = SearchTuning()
