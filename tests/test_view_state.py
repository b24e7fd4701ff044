from catalog.view.state import ViewState


def _busy() -> ViewState:
    return ViewState(
        category="design",
        subcategory="Graphics",
        tags=frozenset({"Free Trial"}),
        query="canva",
        sort="popular",
        page=4,
        page_size=48,
        layout="list",
    )


def test_changing_category_resets_dependent_fields():
    state = _busy().with_category("productivity")
    assert state == ViewState(category="productivity", sort="popular", page_size=48, layout="list")
    assert _busy().with_category("").category == "all"


def test_result_changing_transitions_reset_page():
    busy = _busy()
    assert busy.with_subcategory("Prototyping").page == 1
    assert busy.toggle_tag("Student Discount").page == 1
    assert busy.with_tags(["AI"]).page == 1
    assert busy.with_query("figma").page == 1
    assert busy.with_sort("newest").page == 1
    assert busy.with_page_size(12).page == 1


def test_layout_change_keeps_page():
    assert _busy().with_layout("grid").page == 4


def test_toggle_tag_adds_and_removes():
    state = ViewState().toggle_tag("Free")
    assert state.tags == frozenset({"Free"})
    assert state.toggle_tag("Free").tags == frozenset()


def test_clear_filters_and_clear_all():
    cleared = _busy().clear_filters()
    assert cleared.subcategory is None
    assert cleared.tags == frozenset()
    assert cleared.query == "canva"
    assert cleared.page == 1
    assert _busy().clear_all() == ViewState()


def test_has_query_uses_normalized_text():
    assert ViewState(query="figma").has_query
    assert not ViewState(query="  ?! ").has_query


def test_filter_fields_are_stripped_on_construction():
    state = ViewState(category=" design ", subcategory=" Graphics", tags=frozenset({" Free Trial ", " "}))
    assert state.category == "design"
    assert state.subcategory == "Graphics"
    assert state.tags == frozenset({"Free Trial"})
    assert ViewState(category="  ").category == "all"


def test_subcategory_needs_a_concrete_category():
    assert ViewState(subcategory="Graphics").subcategory is None
    assert ViewState().with_subcategory("Graphics").subcategory is None
