"""Logging utilities for puzzle construction."""

from __future__ import annotations

import logging
from typing import Optional

PACKAGE_LOGGER = "wordfind"
# Placement, builder and validator loggers live under this namespace.
ENGINE_LOGGER = f"{PACKAGE_LOGGER}.engine"


def configure_logging(level: int = logging.INFO, engine_level: Optional[int] = None) -> None:
    """Configure root logging with the package formatter.

    Builds retry and regrow the grid many times; attempt-level messages are
    emitted at DEBUG so INFO only reports growth and dropped words. Passing
    ``engine_level`` tunes the ``wordfind.engine`` loggers apart from the rest,
    e.g. DEBUG to trace attempts or WARNING to silence growth messages.
    """

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    engine = logging.getLogger(ENGINE_LOGGER)
    engine.setLevel(engine_level if engine_level is not None else logging.NOTSET)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger inside the ``wordfind`` namespace, configuring defaults if needed."""

    if not logging.getLogger().handlers:
        configure_logging()
    if not name:
        return logging.getLogger(PACKAGE_LOGGER)
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
