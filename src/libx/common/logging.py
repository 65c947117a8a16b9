"""Opt-in log output for the ``libx`` logger hierarchy."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import TextIO

LIBRARY_LOGGER = "libx"
HANDLER_NAME = "libx.console"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(
    *, level: int = logging.INFO, stream: TextIO | None = None, force: bool = False
) -> logging.Logger:
    """Attach a console handler to the ``libx`` logger and return that logger.

    The root logger is left alone. Calling this again only adjusts the level
    unless ``force`` is set, in which case the handler is rebuilt (for example
    to point it at another ``stream``). Reconciliation decisions are logged at
    DEBUG.
    """

    logger = logging.getLogger(LIBRARY_LOGGER)
    logger.setLevel(level)
    owned = [handler for handler in logger.handlers if handler.name == HANDLER_NAME]
    if owned and not force:
        return logger
    for handler in owned:
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(stream)
    console.name = HANDLER_NAME
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(console)
    return logger
