# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Iterable, Optional, cast

import pendulum

from dayslice.model.skipped_entry import SkippedEntry, SkipReason
from dayslice.model.time_entry import ClippedTimeEntry, TimeEntry
from dayslice.service.clamp import clamp_to_day
from dayslice.time import date_key, days_between, end_of_day, now_utc, start_of_day

logger = logging.getLogger(__name__)


def effective_end(entry: TimeEntry, now: pendulum.DateTime) -> pendulum.DateTime:
    """End of the entry, or now when the entry is still running."""
    if entry["end_at"] is None:
        return now
    return entry["end_at"]


def last_covered_instant(
    start: pendulum.DateTime, end: pendulum.DateTime
) -> pendulum.DateTime:
    # The end instant is exclusive: an entry ending at 00:00 does not touch that day
    if end > start:
        return end.subtract(microseconds=1)
    return start


def is_cross_day(start: pendulum.DateTime, end: pendulum.DateTime) -> bool:
    return date_key(start) != date_key(last_covered_instant(start, end))


def validate_time_entries(
    entries: Iterable[TimeEntry], now: pendulum.DateTime
) -> tuple[list[TimeEntry], list[SkippedEntry]]:
    """
    Split entries into those usable for day clipping and those that are not.

    Running entries are checked against now, so a running entry that starts in
    the future is skipped as an inverted interval.

    Returns:
        Tuple of (valid entries, skipped entries with a SkipReason)
    """
    valid: list[TimeEntry] = []
    skipped: list[SkippedEntry] = []

    for entry in entries:
        start = entry["start_at"]
        reason: Optional[str] = None
        if start is None:
            reason = SkipReason.MISSING_START
        elif effective_end(entry, now) < start:
            reason = SkipReason.INVERTED_INTERVAL

        if reason is None:
            valid.append(entry)
            continue

        logger.warning("Skipping time entry %s: %s", entry["id"], reason)
        skipped.append({"entry": cast(dict[str, Any], dict(entry)), "reason": reason})

    return valid, skipped


def _clip_entry(
    entry: TimeEntry,
    clipped_start: pendulum.DateTime,
    clipped_end: pendulum.DateTime,
    minutes: int,
    cross_day: bool,
) -> ClippedTimeEntry:
    clipped = cast(ClippedTimeEntry, deepcopy(entry))
    clipped["original_id"] = entry["id"]
    clipped["is_cross_day_segment"] = cross_day
    clipped["start_at"] = clipped_start.in_tz("UTC")
    clipped["end_at"] = clipped_end.in_tz("UTC")
    clipped["duration_minutes"] = minutes
    return clipped


def _sort_by_start(entries: list[ClippedTimeEntry]) -> None:
    entries.sort(key=lambda e: cast(pendulum.DateTime, e["start_at"]))


def process_day_entries(
    entries: list[TimeEntry],
    target_date: pendulum.DateTime | pendulum.Date,
    now: Optional[pendulum.DateTime] = None,
) -> list[ClippedTimeEntry]:
    """
    Clip entries to a single local calendar day.

    Every entry overlapping the day yields exactly one clipped copy that keeps
    the original id. Entries that miss the day, and malformed entries, are left
    out.

    Args:
        entries: Time entries with parsed timestamps
        target_date: Any instant or date within the target day
        now: Substitute end for running entries (defaults to the current instant)

    Returns:
        Clipped entries sorted ascending by clipped start
    """
    if now is None:
        now = now_utc()

    valid, _ = validate_time_entries(entries, now)
    return _clip_valid_entries_to_day(valid, target_date, now)


def _clip_valid_entries_to_day(
    valid: list[TimeEntry],
    target_date: pendulum.DateTime | pendulum.Date,
    now: pendulum.DateTime,
) -> list[ClippedTimeEntry]:
    day_start = start_of_day(target_date)
    day_end = end_of_day(target_date)

    day_entries: list[ClippedTimeEntry] = []
    for entry in valid:
        start = cast(pendulum.DateTime, entry["start_at"])
        end = effective_end(entry, now)

        clamp = clamp_to_day(start, end, day_start, day_end)
        if not clamp.overlaps:
            continue

        day_entries.append(
            _clip_entry(
                entry,
                clamp.clipped_start,
                clamp.clipped_end,
                clamp.minutes,
                is_cross_day(start, end),
            )
        )

    _sort_by_start(day_entries)
    return day_entries


def split_cross_day_entries(
    entries: list[TimeEntry],
    now: Optional[pendulum.DateTime] = None,
) -> dict[str, list[ClippedTimeEntry]]:
    """
    Split entries into one clipped copy per local day they touch.

    The copy on the start day keeps the original id; copies on later days get
    "{id}-day-{YYYY-MM-DD}" so ids stay unique within every day.

    Args:
        entries: Time entries with parsed timestamps
        now: Substitute end for running entries (defaults to the current instant)

    Returns:
        Dict keyed by 'YYYY-MM-DD' in chronological order, each list sorted by
        clipped start
    """
    if now is None:
        now = now_utc()

    valid, _ = validate_time_entries(entries, now)

    grouped: dict[str, list[ClippedTimeEntry]] = {}
    for entry in valid:
        start = cast(pendulum.DateTime, entry["start_at"])
        end = effective_end(entry, now)
        cross_day = is_cross_day(start, end)

        touched_days = days_between(start, last_covered_instant(start, end))
        for index, day in enumerate(touched_days):
            clamp = clamp_to_day(start, end, day, end_of_day(day))
            if not clamp.overlaps:
                continue

            key = date_key(day)
            clipped = _clip_entry(
                entry,
                clamp.clipped_start,
                clamp.clipped_end,
                clamp.minutes,
                cross_day,
            )
            if index > 0:
                clipped["id"] = f"{entry['id']}-day-{key}"
            grouped.setdefault(key, []).append(clipped)

    for day_entries in grouped.values():
        _sort_by_start(day_entries)

    logger.debug("Split %d entries across %d day(s)", len(valid), len(grouped))
    return {key: grouped[key] for key in sorted(grouped)}


def process_range_entries(
    entries: list[TimeEntry],
    start_date: pendulum.DateTime | pendulum.Date,
    end_date: pendulum.DateTime | pendulum.Date,
    now: Optional[pendulum.DateTime] = None,
) -> dict[str, list[ClippedTimeEntry]]:
    """Clip entries to every local day of an inclusive range, keeping empty days."""
    if now is None:
        now = now_utc()

    valid, _ = validate_time_entries(entries, now)
    return {
        date_key(day): _clip_valid_entries_to_day(valid, day, now)
        for day in days_between(start_date, end_date)
    }


def calculate_total_minutes(entries: Iterable[TimeEntry]) -> int:
    return sum(max(0, entry["duration_minutes"] or 0) for entry in entries)
