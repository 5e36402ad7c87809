"""Tests for timeline lane assignment."""

import pendulum
import pytest

from dayslice.service.lane import (
    assign_lanes,
    assign_lanes_by_group,
    group_overlapping,
    max_concurrency,
)
from dayslice.service.split import process_day_entries

NOW = pendulum.datetime(2024, 6, 1, 12, 0, tz="UTC")


def local(*args):
    return pendulum.datetime(*args, tz="local")


@pytest.fixture
def clip(make_entry):
    def _clip(*spans):
        """Clip (id, start_hour_minute, end_hour_minute) spans to 2024-01-01."""
        entries = [
            make_entry(id, local(2024, 1, 1, *start), local(2024, 1, 1, *end))
            for id, start, end in spans
        ]
        return process_day_entries(entries, local(2024, 1, 1), now=NOW)

    return _clip


def lanes_by_id(laid_out):
    return {entry["id"]: entry["lane"] for entry in laid_out}


def test_freed_lane_is_reused(clip):
    entries = clip(("A", (9, 0), (10, 0)), ("B", (9, 30), (9, 45)), ("C", (10, 0), (11, 0)))

    laid_out = assign_lanes(entries)

    assert lanes_by_id(laid_out) == {"A": 0, "B": 1, "C": 0}
    assert {entry["lane_count"] for entry in laid_out} == {2}


def test_sequential_entries_share_one_lane(clip):
    entries = clip(("A", (9, 0), (10, 0)), ("B", (10, 0), (11, 0)), ("C", (12, 0), (13, 0)))

    laid_out = assign_lanes(entries)

    assert lanes_by_id(laid_out) == {"A": 0, "B": 0, "C": 0}
    assert laid_out[0]["lane_count"] == 1


def test_concurrent_entries_take_lowest_free_lane(clip):
    entries = clip(
        ("A", (9, 0), (12, 0)),
        ("B", (9, 0), (10, 0)),
        ("C", (9, 30), (11, 0)),
        ("D", (10, 15), (10, 45)),
    )

    laid_out = assign_lanes(entries)

    assert lanes_by_id(laid_out) == {"A": 0, "B": 1, "C": 2, "D": 1}
    assert laid_out[0]["lane_count"] == 3


def test_unsorted_input_is_laid_out_in_start_order(clip):
    entries = clip(("A", (9, 0), (10, 0)), ("B", (9, 30), (9, 45)))

    laid_out = assign_lanes(list(reversed(entries)))

    assert [entry["id"] for entry in laid_out] == ["A", "B"]
    assert lanes_by_id(laid_out) == {"A": 0, "B": 1}


def test_empty_input():
    assert assign_lanes([]) == []
    assert max_concurrency([]) == 0


def test_lanes_never_overlap_and_count_is_minimal(clip):
    entries = clip(
        ("A", (0, 30), (3, 0)),
        ("B", (1, 0), (1, 30)),
        ("C", (1, 15), (2, 45)),
        ("D", (2, 0), (4, 0)),
        ("E", (3, 0), (3, 30)),
        ("F", (8, 0), (9, 0)),
        ("G", (8, 30), (8, 40)),
    )

    laid_out = assign_lanes(entries)

    for first in laid_out:
        for second in laid_out:
            if first is second or first["lane"] != second["lane"]:
                continue
            assert first["end_at"] <= second["start_at"] or second["end_at"] <= first["start_at"]
    assert laid_out[0]["lane_count"] == max_concurrency(entries) == 3


def test_lanes_do_not_mutate_clipped_entries(clip):
    entries = clip(("A", (9, 0), (10, 0)))

    assign_lanes(entries)

    assert "lane" not in entries[0]


def test_group_lane_count_is_width_of_own_group(clip):
    entries = clip(("A", (9, 0), (10, 0)), ("B", (9, 30), (9, 45)), ("C", (10, 0), (11, 0)))

    laid_out = assign_lanes_by_group(entries)

    assert [[e["id"] for e in group] for group in group_overlapping(entries)] == [
        ["A", "B"],
        ["C"],
    ]
    assert {e["id"]: (e["lane"], e["lane_count"]) for e in laid_out} == {
        "A": (0, 2),
        "B": (1, 2),
        "C": (0, 1),
    }
