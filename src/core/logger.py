"""Logging setup (Rich).

Log records go to stderr through `RichHandler` so that the demo output on
stdout stays a literal, comparable text.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_ROOT_LOGGERS = ("cli", "core", "patterns")

_stderr_console = Console(stderr=True)


def configure_logging(level: str = "WARNING") -> None:
    """Attach a single `RichHandler` to the project loggers.

    Calling it again only updates the level.
    """

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    for name in _ROOT_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(numeric_level)
        if not any(isinstance(h, RichHandler) for h in logger.handlers):
            handler = RichHandler(
                console=_stderr_console,
                show_path=False,
                rich_tracebacks=False,
                markup=False,
            )
            handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
            logger.addHandler(handler)
        logger.propagate = False
