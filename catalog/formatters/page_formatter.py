from __future__ import annotations

from catalog.models import Offer
from catalog.pipeline.browse import BrowseResult
from catalog.view.codec import encode


def _grid_line(offer: Offer) -> str:
    star = "★ " if offer.is_featured else ""
    return f"- {star}{offer.name} | {offer.offer}"


def _list_lines(offer: Offer) -> list[str]:
    star = "★ " if offer.is_featured else ""
    lines = [f"- {star}{offer.name}", f"  {offer.offer}"]
    if offer.description:
        lines.append(f"  {offer.description[:160]}")
    if offer.tags:
        lines.append(f"  tags: {', '.join(offer.tags)}")
    return lines


def format_page(result: BrowseResult) -> str:
    state = result.state
    if not result.items:
        lines = ["No offers match the current filters."]
    else:
        start = (state.page - 1) * state.page_size + 1
        end = start + len(result.items) - 1
        lines = [
            f"Offers {start}-{end} of {result.total_count} (page {state.page}/{result.total_pages})",
            "",
        ]
        for offer in result.items:
            if state.layout == "list":
                lines.extend(_list_lines(offer))
            else:
                lines.append(_grid_line(offer))

    if result.subcategories:
        lines.extend(["", f"Subcategories: {', '.join(result.subcategories)}"])
    if result.available_tags:
        lines.extend(["", f"Tags: {', '.join(result.available_tags)}"])

    lines.extend(["", f"?{encode(state)}"])
    return "\n".join(lines)
