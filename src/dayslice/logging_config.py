# SPDX-License-Identifier: MIT

import logging

from rich.console import Console
from rich.logging import RichHandler

from dayslice.configuration import APP_NAME


def configure_logging(level: str | int = logging.WARNING) -> None:
    """Route the package loggers to stderr through rich, at the given level."""
    logger = logging.getLogger(APP_NAME)
    logger.setLevel(level)

    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            show_time=False,
        )
        logger.addHandler(handler)
