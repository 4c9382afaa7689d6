"""
Logging configuration for the EDmin dashboard.

Sets up a stdout handler and an optional file handler on the root logger so
that both the Flask app logger and the service module loggers share one format.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(
    component_name: str = 'edmin',
    level='INFO',
    log_file: Optional[str] = None,
    format_string: Optional[str] = None
):
    """
    Configure logging for the dashboard process.

    Args:
        component_name: Identifier shown in every log line
        level: Logging level name or number (DEBUG, INFO, WARNING, ...)
        log_file: Optional file path for log output
        format_string: Custom format string (default provided)
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    if format_string is None:
        format_string = f'[%(asctime)s] [{component_name.upper()}] %(levelname)s - %(message)s'

    logging.basicConfig(
        level=level,
        format=format_string,
        datefmt=DATE_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    if log_file:
        log_path = Path(os.path.abspath(log_file))
        root = logging.getLogger()
        already_attached = any(
            isinstance(handler, logging.FileHandler) and handler.baseFilename == str(log_path)
            for handler in root.handlers
        )
        if not already_attached:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path)
            file_handler.setFormatter(logging.Formatter(format_string, datefmt=DATE_FORMAT))
            root.addHandler(file_handler)

    logger = logging.getLogger(component_name)
    logger.info(f"{component_name.upper()} logging initialized (level={logging.getLevelName(level)})")

    return logger
