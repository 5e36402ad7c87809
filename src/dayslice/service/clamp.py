# SPDX-License-Identifier: MIT

import math
from typing import NamedTuple

import pendulum


class ClampResult(NamedTuple):
    clipped_start: pendulum.DateTime
    clipped_end: pendulum.DateTime
    minutes: int
    overlaps: bool


def round_minutes(seconds: float) -> int:
    """Round seconds to whole minutes, halves up, never below zero."""
    return max(0, math.floor(seconds / 60 + 0.5))


def entry_minutes(start: pendulum.DateTime, end: pendulum.DateTime) -> int:
    return round_minutes((end - start).total_seconds())


def clamp_to_day(
    start: pendulum.DateTime,
    end: pendulum.DateTime,
    day_start: pendulum.DateTime,
    day_end: pendulum.DateTime,
) -> ClampResult:
    """
    Clip [start, end) to the day window [day_start, day_end].

    Args:
        start: Start of the tracked interval
        end: End of the tracked interval (callers substitute now for running entries)
        day_start: First instant of the day
        day_end: Last instant of the day

    Returns:
        ClampResult with the clipped bounds and the clipped duration in minutes.
        overlaps is False, and minutes 0, when the interval misses the day or
        the clipped interval is empty.
    """
    clipped_start = max(start, day_start)
    clipped_end = min(end, day_end)

    if (
        clipped_start >= day_end
        or clipped_end <= day_start
        or clipped_start >= clipped_end
    ):
        return ClampResult(clipped_start, clipped_end, 0, False)

    return ClampResult(
        clipped_start,
        clipped_end,
        entry_minutes(clipped_start, clipped_end),
        True,
    )
