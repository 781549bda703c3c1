"""Logging helpers shared by the deck modules."""

from __future__ import annotations

import logging
import os
from typing import Optional

# LOG_LEVEL=DEBUG / INFO / WARNING / ERROR
DEFAULT_LOG_LEVEL = "INFO"


def setup_logging(level: Optional[str] = None) -> None:
    """Call once at program start; the library never configures handlers itself.

    Without ``level`` the ``LOG_LEVEL`` environment variable is used.
    """
    name = (level or os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)).upper()
    numeric = getattr(logging, name, logging.INFO)
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    # basicConfig leaves the level alone when handlers already exist.
    logging.getLogger().setLevel(numeric)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
