# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from dayslice.time import datetime_from_local_date_str


def parse_date(date_param: Optional[str | int]) -> Optional[pendulum.DateTime]:
    """
    Parse a day option to the start of that day in local time.

    Accepts YYYY-MM-DD, today (t), yesterday (y), tomorrow (o), or a day offset
    from today such as 1 or -1.
    """
    if date_param is None:
        return None

    date = str(date_param)

    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        try:
            return datetime_from_local_date_str(date)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date '{date}': {e}")

    if re.match(r"^-?\d+$", date):
        return pendulum.today("local").add(days=int(date))

    if date == "today" or date == "t":
        return pendulum.today("local")
    if date == "yesterday" or date == "y":
        return pendulum.yesterday("local")
    if date == "tomorrow" or date == "o":
        return pendulum.tomorrow("local")
    raise typer.BadParameter("Incorrect date format")


def parse_month(month_param: Optional[str]) -> Optional[pendulum.DateTime]:
    """Parse YYYY-MM, or 'this'/'last'/'next', to the start of that month in local time."""
    if month_param is None:
        return None

    month_match = re.match(r"^(\d{4})-(\d{2})$", month_param)
    if month_match:
        month = int(month_match.group(2))
        if month < 1 or month > 12:
            raise typer.BadParameter(f"Month must be between 1 and 12, got {month}")
        return pendulum.datetime(int(month_match.group(1)), month, 1, tz="local")

    this_month = pendulum.today("local").start_of("month")
    if month_param == "this":
        return this_month
    if month_param == "last":
        return this_month.subtract(months=1)
    if month_param == "next":
        return this_month.add(months=1)
    raise typer.BadParameter("Month must be YYYY-MM, this, last or next")
