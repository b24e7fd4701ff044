from __future__ import annotations

from rapidfuzz.distance import Levenshtein


def fuzzy_similarity(
    query: str,
    target: str,
    *,
    min_similarity: float = 0.7,
    substring_similarity: float = 0.9,
) -> float:
    """Similarity in [0, 1] between a query and a candidate string.

    Equality scores 1 and containment scores ``substring_similarity``. Otherwise
    the length-normalized Levenshtein similarity is returned when it exceeds
    ``min_similarity``; anything at or below that counts as noise and scores 0.
    """
    if query == target:
        return 1.0
    if query in target:
        return substring_similarity

    # 1 - distance / max(len(query), len(target))
    similarity = Levenshtein.normalized_similarity(query, target)
    return similarity if similarity > min_similarity else 0.0
