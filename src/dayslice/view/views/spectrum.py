# SPDX-License-Identifier: MIT

import pendulum
from rich.console import Console
from rich.text import Text

from dayslice.service.spectrum import SEGMENT_MINUTES
from dayslice.view.views.header import header

OCCUPANCY_BLOCKS = " ▁▃▅▇█"


def spectrum_view(
    day: pendulum.DateTime, occupancy: list[int], layer_count: int
) -> None:
    """
    Display the tracked time of a day as one block per 20-minute segment,
    taller where more entries overlap.
    """
    header(f"spectrum {day.in_tz('local').format('YYYY-MM-DD ddd')}")

    segments_per_hour = 60 // SEGMENT_MINUTES
    hours = Text()
    for hour in range(24):
        hours.append(f"{hour:<{segments_per_hour}}", style="bright_black")

    bars = Text()
    for count in occupancy:
        block = OCCUPANCY_BLOCKS[min(count, len(OCCUPANCY_BLOCKS) - 1)]
        bars.append(block, style="cyan" if count > 0 else "bright_black")

    console = Console()
    console.print(bars)
    console.print(hours)
    console.print(f"[bright_black]{layer_count} layer(s)[/bright_black]")
