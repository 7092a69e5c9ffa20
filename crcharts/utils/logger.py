"""
Logging utilities for the chart builders and scripts.
"""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logger(
    name: str = 'crcharts',
    log_dir: Optional[str] = None,
    log_file: Optional[str] = None,
    level: str = 'INFO',
    console_output: bool = True
) -> logging.Logger:
    """
    Setup and configure a logger with console and file handlers.

    Parameters
    ----------
    name : str
        Logger name; classes using ``LoggerMixin`` log under
        ``crcharts.<module>.<Class>``
    log_dir : str, optional
        Directory to store log files
    log_file : str, optional
        Log file name (auto-generated if not provided)
    level : str
        Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    console_output : bool
        Whether to output to stdout

    Returns
    -------
    logging.Logger
        Configured logger instance
    """
    log_level = getattr(logging, level.upper())

    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    # Re-running setup must not stack handlers
    logger.handlers = []

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        if log_file is None:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = f"{name or 'crcharts'}_{timestamp}.log"

        file_handler = logging.FileHandler(log_path / log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


class LoggerMixin:
    """
    Mixin giving a class a ``logger`` named after its module and class,
    so everything in the package logs under ``crcharts``.
    """

    @property
    def logger(self) -> logging.Logger:
        """Get or create logger for the class."""
        if not hasattr(self, '_logger'):
            cls = self.__class__
            self._logger = logging.getLogger(f"{cls.__module__}.{cls.__name__}")
        return self._logger
