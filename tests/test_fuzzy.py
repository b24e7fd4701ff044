import pytest

from catalog.search.fuzzy import fuzzy_similarity


def test_equal_strings_score_one():
    assert fuzzy_similarity("figma", "figma") == 1.0


def test_substring_is_inflated():
    assert fuzzy_similarity("fig", "figma") == 0.9


def test_typo_within_threshold():
    assert fuzzy_similarity("mircosoft", "microsoft") == pytest.approx(1 - 2 / 9)
    assert fuzzy_similarity("abcd", "abce") == pytest.approx(0.75)


def test_below_threshold_is_noise():
    assert fuzzy_similarity("abc", "abd") == 0.0
    assert fuzzy_similarity("github", "figma") == 0.0


def test_custom_threshold():
    assert fuzzy_similarity("abc", "abd", min_similarity=0.5) == pytest.approx(2 / 3)


def test_arbitrary_unicode_does_not_raise():
    assert 0.0 <= fuzzy_similarity("日本語", "日本人") <= 1.0
    assert fuzzy_similarity("café", "cafe") == pytest.approx(0.75)
