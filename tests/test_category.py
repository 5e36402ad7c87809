"""Tests for per-category minute totals."""

from dayslice.service.category import (
    UNCATEGORIZED_ID,
    aggregate_by_category,
    sorted_category_summaries,
)


def test_minutes_are_summed_per_category(make_entry):
    entries = [
        make_entry("a", None, None, duration_minutes=30, category_id="work",
                   category_name="Work", category_color="#FF0000"),
        make_entry("b", None, None, duration_minutes=45, category_id="rest",
                   category_name="Rest", category_color="#00FF00"),
        make_entry("c", None, None, duration_minutes=15, category_id="work",
                   category_name="Renamed", category_color="#0000FF"),
    ]

    by_category = aggregate_by_category(entries)

    assert list(by_category) == ["work", "rest"]
    assert by_category["work"] == {
        "id": "work",
        "name": "Work",
        "color": "#FF0000",
        "minutes": 45,
    }
    assert by_category["rest"]["minutes"] == 45


def test_entries_without_category_are_uncategorized(make_entry):
    entries = [
        make_entry("a", None, None, duration_minutes=20),
        make_entry("b", None, None, duration_minutes=10, category_name="ignored"),
    ]

    by_category = aggregate_by_category(entries, uncategorized_name="Sans catégorie")

    assert by_category == {
        UNCATEGORIZED_ID: {
            "id": UNCATEGORIZED_ID,
            "name": "Sans catégorie",
            "color": "#CBD5E1",
            "minutes": 30,
        }
    }


def test_negative_and_missing_minutes_count_as_zero(make_entry):
    entries = [
        make_entry("a", None, None, duration_minutes=-5, category_id="work"),
        make_entry("b", None, None, category_id="work"),
    ]

    assert aggregate_by_category(entries)["work"]["minutes"] == 0


def test_sorted_summaries_put_largest_first(make_entry):
    entries = [
        make_entry("a", None, None, duration_minutes=10, category_id="x"),
        make_entry("b", None, None, duration_minutes=50, category_id="y"),
        make_entry("c", None, None, duration_minutes=10, category_id="z"),
    ]

    ordered = sorted_category_summaries(aggregate_by_category(entries))

    assert [c["id"] for c in ordered] == ["y", "x", "z"]
