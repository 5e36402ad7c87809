# SPDX-License-Identifier: MIT

import datetime
from typing import Optional, cast

import pendulum


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def python_to_pendulum_utc(python_value: datetime.datetime) -> pendulum.DateTime:
    # Naive values are read as UTC, matching pendulum.parse
    pendulum_value = pendulum.instance(python_value, tz="UTC")
    return pendulum_value.in_tz("UTC")


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_to_iso_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_iso_str(datetime)


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    parsed = pendulum.parse(datetime)
    if not isinstance(parsed, pendulum.DateTime):
        raise ValueError(f"not a date and time: {datetime!r}")
    return parsed


def datetime_from_str_optional(datetime: Optional[str]) -> Optional[pendulum.DateTime]:
    if datetime is None:
        return None
    return datetime_from_str(datetime)


def datetime_to_display_local_date_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("YYYY-MM-DD ddd")


def datetime_to_display_local_time_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("HH:mm")


def datetime_to_display_local_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("MMM-DD ddd HH:mm")


def datetime_to_display_local_datetime_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_display_local_datetime_str(datetime)


def minutes_to_str(minutes: int) -> str:
    return f"{minutes // 60}:{minutes % 60:02d}"


def datetime_from_local_date_str(date_str: str) -> pendulum.DateTime:
    """Parse a local date string in 'YYYY-MM-DD' format to a pendulum.DateTime at midnight local time."""
    return cast(pendulum.DateTime, pendulum.parse(date_str, tz="local"))


def _as_local_datetime(d: pendulum.DateTime | pendulum.Date) -> pendulum.DateTime:
    if isinstance(d, pendulum.DateTime):
        return d.in_tz("local")
    return pendulum.datetime(d.year, d.month, d.day, tz="local")


def start_of_day(d: pendulum.DateTime | pendulum.Date) -> pendulum.DateTime:
    """First instant (00:00:00.000000) of the local calendar day containing d."""
    return _as_local_datetime(d).start_of("day")


def end_of_day(d: pendulum.DateTime | pendulum.Date) -> pendulum.DateTime:
    """Last instant (23:59:59.999999) of the local calendar day containing d."""
    return _as_local_datetime(d).end_of("day")


def date_key(d: pendulum.DateTime | pendulum.Date) -> str:
    """Canonical 'YYYY-MM-DD' key of the local calendar date of d."""
    return _as_local_datetime(d).format("YYYY-MM-DD")


def start_of_month(d: pendulum.DateTime | pendulum.Date) -> pendulum.DateTime:
    return _as_local_datetime(d).start_of("month")


def end_of_month(d: pendulum.DateTime | pendulum.Date) -> pendulum.DateTime:
    return _as_local_datetime(d).end_of("month")


def days_between(
    start: pendulum.DateTime | pendulum.Date,
    end: pendulum.DateTime | pendulum.Date,
) -> list[pendulum.DateTime]:
    """
    Return the start of every local day from the day of start through the day of
    end, both inclusive. Returns an empty list when end falls on an earlier day.
    """
    days: list[pendulum.DateTime] = []
    current = start_of_day(start)
    last = start_of_day(end)
    while current <= last:
        days.append(current)
        # Adding days in local time keeps midnight across DST changes
        current = current.add(days=1).start_of("day")
    return days


def days_in_month(d: pendulum.DateTime | pendulum.Date) -> list[pendulum.DateTime]:
    return days_between(start_of_month(d), end_of_month(d))
