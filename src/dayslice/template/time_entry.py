# SPDX-License-Identifier: MIT

from dayslice.model.entity_id import generate_entity_id
from dayslice.model.time_entry import TimeEntry


def get_time_entry_template() -> TimeEntry:
    return {
        "id": generate_entity_id(),
        "start_at": None,
        "end_at": None,
        "duration_minutes": None,
        "category_id": None,
        "category_name": None,
        "category_color": None,
        "note": None,
        "task_title": None,
        "source": None,
    }
