"""Logging setup shared by the command line entry points."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from rebalance_engine.config import LoggingConfig

_console = Console(stderr=True)


def configure_logging(config: LoggingConfig) -> None:
    logging.basicConfig(
        level=config.level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_console, markup=False, show_path=False)],
        force=True,
    )
