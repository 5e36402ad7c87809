# SPDX-License-Identifier: MIT

from typing import cast

import pendulum

from dayslice.model.time_entry import ClippedTimeEntry
from dayslice.time import start_of_day

SEGMENT_MINUTES = 20
SEGMENTS = 24 * 60 // SEGMENT_MINUTES


def entry_minute_span(entry: ClippedTimeEntry) -> tuple[int, int]:
    """
    Minutes since local midnight of the entry's start day for its start and end.

    A clipped entry ending at 23:59:59.999999 reports 1439; an entry ending at
    the following midnight reports 1440.
    """
    start = cast(pendulum.DateTime, entry["start_at"]).in_tz("local")
    end = cast(pendulum.DateTime, entry["end_at"]).in_tz("local")
    day_start = start_of_day(start)

    start_minutes = int((start - day_start).total_seconds() // 60)
    end_minutes = int((end - day_start).total_seconds() // 60)
    return start_minutes, end_minutes


def entry_segments(entry: ClippedTimeEntry) -> tuple[int, int]:
    """
    Inclusive first and last 20-minute segment covered by a clipped entry.

    An end exactly on a segment boundary (e.g. 10:00) stays in the segment
    before it.
    """
    start_minutes, end_minutes = entry_minute_span(entry)
    start_segment = min(SEGMENTS - 1, start_minutes // SEGMENT_MINUTES)
    end_segment = min(SEGMENTS - 1, (end_minutes - 1) // SEGMENT_MINUTES)
    return start_segment, max(start_segment, end_segment)


def segment_occupancy(entries: list[ClippedTimeEntry]) -> list[int]:
    occupancy = [0] * SEGMENTS
    for entry in entries:
        start_segment, end_segment = entry_segments(entry)
        for segment in range(start_segment, end_segment + 1):
            occupancy[segment] += 1
    return occupancy


def _overlaps(first: tuple[int, int], second: tuple[int, int]) -> bool:
    return not (first[1] <= second[0] or first[0] >= second[1])


def stack_layers(entries: list[ClippedTimeEntry]) -> list[list[ClippedTimeEntry]]:
    """
    Place every entry in the first layer where it overlaps nothing, at minute
    granularity, opening a new layer when none fits.
    """
    layers: list[list[ClippedTimeEntry]] = []
    layer_spans: list[list[tuple[int, int]]] = []

    for entry in entries:
        span = entry_minute_span(entry)
        for layer, spans in zip(layers, layer_spans):
            if not any(_overlaps(span, existing) for existing in spans):
                layer.append(entry)
                spans.append(span)
                break
        else:
            layers.append([entry])
            layer_spans.append([span])

    return layers
