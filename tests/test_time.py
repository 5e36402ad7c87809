"""Tests for local-day boundaries and date keys."""

import pendulum

from dayslice.time import (
    date_key,
    datetime_from_str,
    days_between,
    days_in_month,
    end_of_day,
    minutes_to_str,
    start_of_day,
)


def local(*args):
    return pendulum.datetime(*args, tz="local")


def test_start_and_end_of_day_use_local_calendar_date():
    instant = local(2024, 3, 10, 15, 42, 7)

    assert start_of_day(instant) == local(2024, 3, 10)
    assert end_of_day(instant) == local(2024, 3, 10, 23, 59, 59, 999999)


def test_utc_instant_maps_to_local_day():
    # 20:00 UTC is 05:00 the next morning in Tokyo
    instant = pendulum.datetime(2024, 1, 1, 20, 0, tz="UTC")

    assert date_key(instant) == "2024-01-02"
    assert start_of_day(instant) == local(2024, 1, 2)


def test_date_key_accepts_plain_dates():
    assert date_key(pendulum.date(2024, 2, 29)) == "2024-02-29"
    assert start_of_day(pendulum.date(2024, 2, 29)) == local(2024, 2, 29)


def test_days_between_is_inclusive_and_crosses_months():
    days = days_between(local(2024, 1, 30, 22), local(2024, 2, 2, 1))

    assert [date_key(day) for day in days] == [
        "2024-01-30",
        "2024-01-31",
        "2024-02-01",
        "2024-02-02",
    ]
    assert all(day == start_of_day(day) for day in days)


def test_days_between_returns_nothing_for_reversed_range():
    assert days_between(local(2024, 1, 3), local(2024, 1, 1)) == []


def test_days_in_month_handles_leap_february():
    days = days_in_month(local(2024, 2, 14))

    assert len(days) == 29
    assert date_key(days[0]) == "2024-02-01"
    assert date_key(days[-1]) == "2024-02-29"


def test_datetime_from_str_reads_naive_strings_as_utc():
    parsed = datetime_from_str("2024-01-01T09:00:00")

    assert parsed == pendulum.datetime(2024, 1, 1, 9, 0, tz="UTC")


def test_minutes_to_str():
    assert minutes_to_str(0) == "0:00"
    assert minutes_to_str(90) == "1:30"
    assert minutes_to_str(1440) == "24:00"
