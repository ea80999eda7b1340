"""
Logging helpers
===============

Library code only ever asks for a logger:

    from episeries.log import get_logger
    logger = get_logger(__name__)

Applications that want to see episeries output on stderr call
`configure_logging()` once. The library never touches the root logger.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Union

DEFAULT_FMT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d:%(funcName)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

PACKAGE_LOGGER = "episeries"


def configure_logging(
    level: Optional[Union[str, int]] = None,
    *,
    fmt: Optional[str] = None,
    datefmt: Optional[str] = None,
    force: bool = False,
) -> None:
    """Attach a stderr handler to the episeries logger (never root).

    level defaults to the EPISERIES_LOG_LEVEL env var, or INFO.
    With force=True existing handlers are removed first; otherwise a second
    call is a no-op.
    """
    if level is None:
        level = os.environ.get("EPISERIES_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    formatter = logging.Formatter(fmt=fmt or DEFAULT_FMT, datefmt=datefmt or DEFAULT_DATEFMT)

    if force:
        for h in logger.handlers[:]:
            h.close()
            logger.removeHandler(h)
    else:
        for h in logger.handlers:
            if isinstance(h, logging.StreamHandler) and h.stream is sys.stderr:
                return

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(formatter)
    logger.addHandler(console)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return `logging.getLogger(name)`, or the package logger when name is None."""
    return logging.getLogger(name or PACKAGE_LOGGER)
