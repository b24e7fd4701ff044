import json

import pytest

from catalog.data.offer_loader import OfferCache, load_json_offers
from catalog.models import Offer


def _row(offer_id: int, **fields) -> dict:
    row = {
        "id": offer_id,
        "name": f"Offer {offer_id}",
        "offer": "Free for students",
        "description": "",
        "category_main": "Design",
        "category_sub": None,
        "tag1": "Free",
        "tag2": None,
        "tag3": "",
        "is_featured": False,
    }
    row.update(fields)
    return row


def test_from_row_collects_tag_columns():
    offer = Offer.from_row(_row(1, tag2="Student Discount", tag3="Design"))
    assert offer.tags == ("Free", "Student Discount", "Design")


def test_from_row_prefers_tag_list_and_caps_it():
    offer = Offer.from_row(_row(1, tags=["A", "", "B", "C", "D"]))
    assert offer.tags == ("A", "B", "C")


def test_from_row_requires_id_and_name():
    with pytest.raises(ValueError):
        Offer.from_row({"name": "No id"})
    with pytest.raises(ValueError):
        Offer.from_row({"id": 3, "name": ""})


def test_from_row_blank_categories_become_none():
    offer = Offer.from_row(_row(1, category_main="  ", category_sub=""))
    assert offer.category_main is None
    assert offer.category_sub is None


def test_from_row_reads_text_and_numeric_booleans():
    assert not Offer.from_row(_row(1, is_featured="false")).is_featured
    assert not Offer.from_row(_row(1, is_featured="0")).is_featured
    assert Offer.from_row(_row(1, is_featured="TRUE")).is_featured
    assert Offer.from_row(_row(1, github_offer=1)).github_offer
    assert not Offer.from_row(_row(1, github_offer=None)).github_offer


def test_from_row_rejects_unknown_boolean_text():
    with pytest.raises(ValueError):
        Offer.from_row(_row(1, is_featured="sometimes"))


def test_load_json_offers(tmp_path):
    path = tmp_path / "offers.json"
    path.write_text(json.dumps([_row(1), _row(2, is_featured=True)]), encoding="utf-8")
    offers = load_json_offers(path.as_posix())
    assert [o.id for o in offers] == [1, 2]
    assert offers[1].is_featured


def test_load_json_offers_rejects_bad_files(tmp_path):
    path = tmp_path / "offers.json"
    path.write_text(json.dumps({"id": 1}), encoding="utf-8")
    with pytest.raises(ValueError):
        load_json_offers(path.as_posix())

    path.write_text(json.dumps([_row(1), _row(1)]), encoding="utf-8")
    with pytest.raises(ValueError):
        load_json_offers(path.as_posix())


def test_cache_loads_once_until_invalidated():
    calls = []

    def loader() -> list[Offer]:
        calls.append(1)
        return [Offer(id=len(calls), name="x")]

    cache = OfferCache(loader)
    assert not cache.is_loaded
    assert cache.load()[0].id == 1
    assert cache.load()[0].id == 1
    assert len(calls) == 1

    cache.invalidate()
    assert not cache.is_loaded
    assert cache.load()[0].id == 2
    assert len(calls) == 2


def test_cache_returns_copies():
    cache = OfferCache(lambda: [Offer(id=1, name="x")])
    first = cache.load()
    first.clear()
    assert len(cache.load()) == 1
