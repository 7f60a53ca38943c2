# gridcollage/common/logging.py
from __future__ import annotations

import logging


def get_logger(name: str = "gridcollage", level: int | str | None = None) -> logging.Logger:
    """
    Return a logger that plays nice with Uvicorn if running under it.
    If the root logger has no handlers yet, basicConfig is applied once.
    Passing `level` (an int or a name like "DEBUG") adjusts the logger.
    """
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers and not logger.handlers:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if level is not None:
        logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
