# SPDX-License-Identifier: MIT

import pendulum

from dayslice.model.category_summary import DayTotal
from dayslice.model.time_entry import ClippedTimeEntry
from dayslice.service.split import calculate_total_minutes
from dayslice.time import date_key, days_in_month


def month_day_totals(
    grouped: dict[str, list[ClippedTimeEntry]],
    month: pendulum.DateTime | pendulum.Date,
) -> list[DayTotal]:
    """
    Daily totals for every local day of the month containing month.

    Args:
        grouped: Result of split_cross_day_entries
        month: Any instant or date within the month

    Returns:
        One DayTotal per day of the month, in order; empty days report zero
    """
    totals: list[DayTotal] = []
    for day in days_in_month(month):
        key = date_key(day)
        day_entries = grouped.get(key, [])
        totals.append(
            {
                "date_key": key,
                "minutes": calculate_total_minutes(day_entries),
                "entry_count": len(day_entries),
            }
        )
    return totals
