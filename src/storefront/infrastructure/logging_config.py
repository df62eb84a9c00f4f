"""Logging configuration for the storefront.

All modules log through children of the ``storefront`` logger
(``storefront.cart``, ``storefront.catalog``, ...). ``setup_logging``
attaches a console handler at the configured level and, when asked, a
DEBUG file handler that captures everything.
"""

import logging
import sys
from pathlib import Path

from storefront.infrastructure.settings import Settings

_DETAILED_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | %(module)s:%(funcName)s:%(lineno)d | "
    "%(message)s"
)

_CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str | None = None, log_file: Path | None = None) -> logging.Logger:
    """Initialise the root ``storefront`` logger.

    Repeated calls (e.g. one per CLI invocation in tests) are no-ops once
    handlers are installed.
    """
    root_logger = logging.getLogger("storefront")
    root_logger.setLevel(logging.DEBUG)

    if root_logger.handlers:
        return root_logger

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level or Settings.LOG_LEVEL)
    console_handler.setFormatter(
        logging.Formatter(_CONSOLE_FORMAT, datefmt=_DATE_FORMAT)
    )
    root_logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(_DETAILED_FORMAT, datefmt=_DATE_FORMAT)
        )
        root_logger.addHandler(file_handler)

    root_logger.debug("Logging initialised")
    return root_logger
