import pytest

from catalog.view.codec import decode, encode
from catalog.view.state import ViewState


def test_defaults_encode_to_empty_string():
    assert encode(ViewState()) == ""
    assert decode("") == ViewState()
    assert decode("?") == ViewState()


def test_encode_is_canonical_and_ordered():
    state = ViewState(
        category="design",
        subcategory="Prototyping",
        tags=frozenset({"Student Discount", "Free Trial"}),
        query="figma pro",
        sort="popular",
        page=2,
        page_size=48,
        layout="list",
    )
    assert encode(state) == (
        "category=design&subcategory=Prototyping&tags=Free+Trial%2CStudent+Discount"
        "&q=figma+pro&sort=popular&page=2&perPage=48&view=list"
    )


@pytest.mark.parametrize(
    "state",
    [
        ViewState(),
        ViewState(category="developer-tools"),
        ViewState(category="design", subcategory="Graphics", tags=frozenset({"Free Trial"})),
        ViewState(query="github student pack", sort="alphabetical"),
        ViewState(query="c++ & rust?", page=3, page_size=12),
        ViewState(tags=frozenset({"AI", "Free"}), page_size=96, layout="list"),
        ViewState(category="design", subcategory=" Graphics", tags=frozenset({" Free Trial"})),
    ],
)
def test_decode_encode_round_trip(state):
    assert decode(encode(state)) == state


def test_default_values_are_never_emitted():
    encoded = encode(ViewState(sort="newest", page=1, page_size=24, layout="grid", category="all"))
    assert encoded == ""


def test_malformed_values_fall_back_to_defaults():
    state = decode("sort=bogus&page=abc&view=tiles&perPage=lots")
    assert state == ViewState()


def test_non_positive_page_becomes_first_page():
    assert decode("page=-3").page == 1
    assert decode("page=0").page == 1


def test_unsupported_page_size_snaps_to_nearest():
    assert decode("perPage=30").page_size == 24
    assert decode("perPage=36").page_size == 24
    assert decode("perPage=100").page_size == 96
    assert decode("perPage=1").page_size == 12


def test_subcategory_requires_a_category():
    assert decode("subcategory=Graphics").subcategory is None
    assert decode("category=design&subcategory=Graphics").subcategory == "Graphics"


def test_tags_are_split_on_commas():
    state = decode("?tags=Free+Trial,Student%20Discount,,")
    assert state.tags == frozenset({"Free Trial", "Student Discount"})
