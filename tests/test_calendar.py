"""Tests for month grid totals."""

import pendulum

from dayslice.service.calendar import month_day_totals
from dayslice.service.split import split_cross_day_entries

NOW = pendulum.datetime(2024, 6, 1, 12, 0, tz="UTC")


def local(*args):
    return pendulum.datetime(*args, tz="local")


def test_every_day_of_month_is_reported(make_entry):
    entries = [
        make_entry("a", local(2024, 2, 28, 23), local(2024, 3, 1, 1)),
        make_entry("b", local(2024, 2, 3, 9), local(2024, 2, 3, 9, 45)),
    ]

    totals = month_day_totals(split_cross_day_entries(entries, now=NOW), local(2024, 2, 10))

    assert len(totals) == 29
    by_key = {total["date_key"]: total for total in totals}
    assert by_key["2024-02-03"] == {"date_key": "2024-02-03", "minutes": 45, "entry_count": 1}
    assert by_key["2024-02-28"]["minutes"] == 60
    assert by_key["2024-02-29"]["minutes"] == 1440
    assert by_key["2024-02-01"] == {"date_key": "2024-02-01", "minutes": 0, "entry_count": 0}
    # The March segment belongs to the next month's grid
    assert "2024-03-01" not in by_key
