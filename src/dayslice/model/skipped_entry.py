# SPDX-License-Identifier: MIT

from typing import Any, TypedDict


class SkipReason:
    MISSING_START = "missing_start"
    INVERTED_INTERVAL = "inverted_interval"
    UNPARSABLE_RECORD = "unparsable_record"


class SkippedEntry(TypedDict):
    entry: dict[str, Any]
    reason: str
