# SPDX-License-Identifier: MIT

import datetime
import logging
from copy import deepcopy
from pathlib import Path
from typing import Any, Optional

import pendulum
from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from dayslice import time
from dayslice.model.skipped_entry import SkippedEntry, SkipReason
from dayslice.model.time_entry import TimeEntry
from dayslice.template.time_entry import get_time_entry_template

logger = logging.getLogger(__name__)

CARRIED_FIELDS = (
    "category_id",
    "category_name",
    "category_color",
    "note",
    "task_title",
    "source",
)


class EntriesFileError(ValueError):
    pass


class TimeEntryRepository:
    """
    Read-only access to a YAML or JSON export of time entries.

    The export is either a list of records or a mapping with an "entries" list,
    as returned by the time tracking API.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._time_entries: Optional[list[TimeEntry]] = None
        self._skipped: list[SkippedEntry] = []

    @property
    def time_entries(self) -> list[TimeEntry]:
        if self._time_entries is None:
            self.__load_data()
        if self._time_entries is None:
            raise ValueError()
        return self._time_entries

    def __load_data(self) -> None:
        if not self.path.is_file():
            raise EntriesFileError(f"entries file not found: {self.path}")

        try:
            document = load(self.path.read_text(), Loader=Loader)
        except YAMLError as e:
            raise EntriesFileError(f"entries file is not valid YAML or JSON: {e}")

        if isinstance(document, dict):
            document = document.get("entries")
        if document is None:
            document = []
        if not isinstance(document, list):
            raise EntriesFileError(
                f"expected a list of entries or an 'entries' list in {self.path}"
            )

        self._time_entries = []
        self._skipped = []
        for raw_entry in document:
            try:
                self._time_entries.append(
                    self.__convert_time_entry_for_deserialization(raw_entry)
                )
            except ValueError as e:
                logger.warning("Skipping unreadable time entry %r: %s", raw_entry, e)
                self._skipped.append(
                    {
                        "entry": raw_entry if isinstance(raw_entry, dict) else {},
                        "reason": SkipReason.UNPARSABLE_RECORD,
                    }
                )

        logger.debug(
            "Loaded %d time entries from %s (%d skipped)",
            len(self._time_entries),
            self.path,
            len(self._skipped),
        )

    def __convert_time_entry_for_deserialization(self, raw_entry: Any) -> TimeEntry:
        if not isinstance(raw_entry, dict):
            raise ValueError("record is not a mapping")

        time_entry = get_time_entry_template()
        if raw_entry.get("id") is not None:
            time_entry["id"] = str(raw_entry["id"])
        time_entry["start_at"] = _coerce_datetime(raw_entry.get("start_at"))
        time_entry["end_at"] = _coerce_datetime(raw_entry.get("end_at"))

        duration = raw_entry.get("duration_minutes")
        if isinstance(duration, (int, float)) and not isinstance(duration, bool):
            time_entry["duration_minutes"] = int(duration)

        for field in CARRIED_FIELDS:
            if raw_entry.get(field) is not None:
                time_entry[field] = str(raw_entry[field])  # type: ignore[literal-required]

        # API responses nest the category and task objects
        category = raw_entry.get("category")
        if isinstance(category, dict):
            if category.get("id") is not None:
                time_entry["category_id"] = str(category["id"])
            if category.get("name") is not None:
                time_entry["category_name"] = str(category["name"])
            if category.get("color") is not None:
                time_entry["category_color"] = str(category["color"])
        if (
            time_entry["category_id"] is None
            and raw_entry.get("category_id_snapshot") is not None
        ):
            time_entry["category_id"] = str(raw_entry["category_id_snapshot"])

        task = raw_entry.get("task")
        if isinstance(task, dict) and task.get("title") is not None:
            time_entry["task_title"] = str(task["title"])

        return time_entry

    def get_all_time_entries(self) -> list[TimeEntry]:
        return deepcopy(self.time_entries)

    def get_skipped_entries(self) -> list[SkippedEntry]:
        if self._time_entries is None:
            self.__load_data()
        return deepcopy(self._skipped)


def _coerce_datetime(value: Any) -> Optional[pendulum.DateTime]:
    # YAML resolves unquoted timestamps to datetime objects before we see them
    if value is None:
        return None
    if isinstance(value, datetime.datetime):
        return time.python_to_pendulum_utc(value)
    if isinstance(value, str):
        return time.datetime_from_str(value)
    raise ValueError(f"unsupported timestamp value {value!r}")
