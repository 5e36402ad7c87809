# SPDX-License-Identifier: MIT

from typing import Iterable

from dayslice.model.category_summary import CategorySummary
from dayslice.model.time_entry import TimeEntry

UNCATEGORIZED_ID = "uncategorized"
DEFAULT_CATEGORY_COLOR = "#CBD5E1"


def aggregate_by_category(
    entries: Iterable[TimeEntry],
    uncategorized_name: str = "Uncategorized",
    default_color: str = DEFAULT_CATEGORY_COLOR,
) -> dict[str, CategorySummary]:
    """
    Sum clipped minutes per category.

    Entries without a category_id are grouped under "uncategorized". The name
    and color of a category are taken from the first entry seen for it.
    """
    by_category: dict[str, CategorySummary] = {}

    for entry in entries:
        key = entry["category_id"] or UNCATEGORIZED_ID
        minutes = max(0, entry["duration_minutes"] or 0)

        if key in by_category:
            by_category[key]["minutes"] += minutes
            continue

        if entry["category_id"]:
            name = entry["category_name"] or key
        else:
            name = uncategorized_name
        by_category[key] = {
            "id": key,
            "name": name,
            "color": entry["category_color"] or default_color,
            "minutes": minutes,
        }

    return by_category


def sorted_category_summaries(
    by_category: dict[str, CategorySummary],
) -> list[CategorySummary]:
    return sorted(by_category.values(), key=lambda c: c["minutes"], reverse=True)
