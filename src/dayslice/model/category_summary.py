# SPDX-License-Identifier: MIT

from typing import TypedDict


class CategorySummary(TypedDict):
    id: str
    name: str
    color: str
    minutes: int


class DayTotal(TypedDict):
    date_key: str
    minutes: int
    entry_count: int
