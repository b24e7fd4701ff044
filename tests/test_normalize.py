from catalog.parsers.normalize import contains_word, normalize_category, normalize_query


def test_normalize_query_lowercases_strips_and_collapses():
    assert normalize_query("  GitHub   Student!! Pack ") == "github student pack"


def test_normalize_query_keeps_hyphens_and_word_chars():
    assert normalize_query("C++ & e-mail") == "c e-mail"


def test_normalize_query_punctuation_only_is_empty():
    assert normalize_query("?!…🙂") == ""
    assert normalize_query(None) == ""


def test_normalize_category_builds_slug():
    assert normalize_category("Design & UI/UX") == "design-and-uiux"
    assert normalize_category("  Cloud  &  Hosting ") == "cloud-and-hosting"


def test_contains_word_respects_word_boundaries():
    assert contains_word("ai tools", "ai")
    assert not contains_word("email tools", "ai")
    assert not contains_word("anything", "")
