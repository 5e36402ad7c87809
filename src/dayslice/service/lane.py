# SPDX-License-Identifier: MIT

from typing import cast

import pendulum

from dayslice.model.time_entry import ClippedTimeEntry, LaidOutEntry


def _start(entry: ClippedTimeEntry) -> pendulum.DateTime:
    return cast(pendulum.DateTime, entry["start_at"])


def _end(entry: ClippedTimeEntry) -> pendulum.DateTime:
    return cast(pendulum.DateTime, entry["end_at"])


def assign_lanes(entries: list[ClippedTimeEntry]) -> list[LaidOutEntry]:
    """
    Assign each entry the lowest lane that is free at its start.

    A lane is free once the end of its last entry is at or before the start of
    the next one. The whole input is treated as one group, so every entry gets
    the same lane_count: the number of lanes used, which equals the maximum
    number of entries active at any instant.

    Args:
        entries: Clipped entries with start and end set

    Returns:
        Annotated copies in start order
    """
    lane_ends: list[pendulum.DateTime] = []
    laid_out: list[LaidOutEntry] = []

    for entry in sorted(entries, key=_start):
        for lane, lane_end in enumerate(lane_ends):
            if lane_end <= _start(entry):
                lane_ends[lane] = _end(entry)
                break
        else:
            lane = len(lane_ends)
            lane_ends.append(_end(entry))

        laid_out.append(
            cast(LaidOutEntry, {**entry, "lane": lane, "lane_count": 0})
        )

    lane_count = max(1, len(lane_ends))
    for laid_out_entry in laid_out:
        laid_out_entry["lane_count"] = lane_count

    return laid_out


def group_overlapping(entries: list[ClippedTimeEntry]) -> list[list[ClippedTimeEntry]]:
    """Split entries into connected groups of transitively overlapping entries."""
    groups: list[list[ClippedTimeEntry]] = []
    group_end: pendulum.DateTime | None = None

    for entry in sorted(entries, key=_start):
        if group_end is not None and _start(entry) < group_end:
            groups[-1].append(entry)
            group_end = max(group_end, _end(entry))
        else:
            groups.append([entry])
            group_end = _end(entry)

    return groups


def assign_lanes_by_group(entries: list[ClippedTimeEntry]) -> list[LaidOutEntry]:
    """Like assign_lanes, but lane_count is the width of each entry's own group."""
    laid_out: list[LaidOutEntry] = []
    for group in group_overlapping(entries):
        laid_out.extend(assign_lanes(group))
    return laid_out


def max_concurrency(entries: list[ClippedTimeEntry]) -> int:
    # Ends sort before starts at the same instant: touching entries do not overlap
    events = sorted(
        [(_start(entry), 1) for entry in entries]
        + [(_end(entry), -1) for entry in entries],
        key=lambda event: (event[0], event[1]),
    )

    active = 0
    peak = 0
    for _, delta in events:
        active += delta
        peak = max(peak, active)
    return peak
