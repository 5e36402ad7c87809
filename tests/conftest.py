# SPDX-License-Identifier: MIT

from typing import Any, Callable, Optional

import pendulum
import pytest

from dayslice.model.time_entry import TimeEntry

# Asia/Tokyo has no DST and sits far from UTC, so local and UTC days differ
LOCAL_TIMEZONE = "Asia/Tokyo"


@pytest.fixture(autouse=True)
def local_timezone():
    pendulum.set_local_timezone(pendulum.timezone(LOCAL_TIMEZONE))
    yield
    pendulum.set_local_timezone()


@pytest.fixture
def make_entry() -> Callable[..., TimeEntry]:
    def _make_entry(
        id: str,
        start_at: Optional[pendulum.DateTime],
        end_at: Optional[pendulum.DateTime],
        **fields: Any,
    ) -> TimeEntry:
        entry: TimeEntry = {
            "id": id,
            "start_at": start_at,
            "end_at": end_at,
            "duration_minutes": None,
            "category_id": None,
            "category_name": None,
            "category_color": None,
            "note": None,
            "task_title": None,
            "source": None,
        }
        entry.update(fields)  # type: ignore[typeddict-item]
        return entry

    return _make_entry
