from __future__ import annotations

import logging
import sys

from .config import LoggingConfig


FORMATTER = logging.Formatter(
    fmt="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)


def configure_logging(config: LoggingConfig) -> logging.Logger:
    """
    Attach a single handler to the ``pbt_frame`` logger.

    Library modules only create child loggers; handlers are installed here,
    from the CLI, and only once.
    """
    logger = logging.getLogger("pbt_frame")
    logger.setLevel(config.level.upper())
    if not logger.handlers:
        if config.log_file is not None:
            handler: logging.Handler = logging.FileHandler(config.log_file, encoding="utf-8")
        else:
            handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(FORMATTER)
        logger.addHandler(handler)
    return logger
