from pathlib import Path

from catalog.main import run

SEED = (Path(__file__).resolve().parent.parent / "data" / "offers_seed.json").as_posix()


def test_run_renders_filtered_page_from_seed():
    text = run("category=design-and-uiux&tags=Free+Trial,Student+Discount", offers_path=SEED)
    assert "- Canva Pro | Free Trial for 30 days" in text
    assert "Figma" in text
    assert "Notion" not in text
    assert text.endswith("?category=design-and-uiux&tags=Free+Trial%2CStudent+Discount")


def test_run_search_and_category_list():
    text = run("q=mircosoft&page=4", offers_path=SEED, show_categories=True)
    assert text.startswith("Categories:\n- AI Tools (ai-tools): 1")
    assert "- Microsoft 365 | Office apps at no cost" in text
    assert text.endswith("?q=mircosoft")
