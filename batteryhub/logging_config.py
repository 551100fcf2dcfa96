"""Console logging for the ``batteryhub`` logger tree.

Every module logs through ``logging.getLogger(__name__)``, so configuring the
package logger once on startup routes all of them through one handler.
"""

import logging
import sys

from batteryhub.config import settings

_CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str | None = None) -> logging.Logger:
    """Attach a stderr handler to the ``batteryhub`` logger.

    Safe to call repeatedly; a logger that already has handlers only gets
    its level updated.
    """
    root_logger = logging.getLogger("batteryhub")
    level_name = (level or settings.log_level).upper()
    root_logger.setLevel(getattr(logging, level_name, logging.INFO))

    if root_logger.handlers:
        return root_logger

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT, datefmt=_DATE_FORMAT))
    root_logger.addHandler(console_handler)

    root_logger.debug("Logging initialised at %s", level_name)
    return root_logger
