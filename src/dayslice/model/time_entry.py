# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from dayslice.model.entity_id import EntityId


class TimeEntry(TypedDict):
    id: EntityId
    start_at: Optional[pendulum.DateTime]
    end_at: Optional[pendulum.DateTime]  # None while the timer is still running
    duration_minutes: Optional[int]  # Recomputed, never trusted
    category_id: Optional[str]
    category_name: Optional[str]
    category_color: Optional[str]
    note: Optional[str]
    task_title: Optional[str]
    source: Optional[str]


class ClippedTimeEntry(TimeEntry):
    original_id: EntityId
    is_cross_day_segment: bool


class LaidOutEntry(ClippedTimeEntry):
    lane: int
    lane_count: int
