"""Logging setup for front-ends.

Library modules only create ``logging.getLogger(__name__)`` loggers; the CLI
and the Streamlit app call :func:`setup_logging` once to attach handlers to
the package logger.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

PACKAGE_LOGGER = "grid_texture"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(
    level: int = logging.INFO, log_file: Optional[Union[str, Path]] = None
) -> logging.Logger:
    """Route ``grid_texture`` records to stdout and, optionally, a log file.

    Calling it again replaces the previous handlers, so Streamlit reruns do
    not print every record twice. A log file is appended to, keeping the
    history of earlier runs next to the textures they produced.

    Returns:
        logging.Logger: The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"Logging at {logging.getLevelName(level)}")
    return logger
