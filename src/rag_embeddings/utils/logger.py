"""Logging system setup."""

import os
import logging
from datetime import datetime
from typing import Optional
import colorlog


DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

COLOR_FORMAT = (
    "%(log_color)s%(levelname)-8s%(reset)s "
    "%(blue)s%(name)s%(reset)s - %(message)s"
)

LOG_COLORS = {
    'DEBUG': 'cyan',
    'INFO': 'green',
    'WARNING': 'yellow',
    'ERROR': 'red',
    'CRITICAL': 'red,bg_white',
}


def setup_logging(
    log_level: str = "INFO",
    log_dir: Optional[str] = "./logs",
    log_format: Optional[str] = None,
    file_prefix: str = "rag_embeddings"
) -> Optional[str]:
    """
    Setup logging system with console and file output.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_dir: Directory for log files (None disables the file handler)
        log_format: Custom log format string for the file handler
        file_prefix: Log file name prefix

    Returns:
        Path of the log file, or None when file logging is disabled
    """
    level = getattr(logging, log_level.upper())

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Console handler with colors
    console_handler = colorlog.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(
        colorlog.ColoredFormatter(COLOR_FORMAT, log_colors=LOG_COLORS)
    )
    root_logger.addHandler(console_handler)

    log_file = None
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = os.path.join(log_dir, f"{file_prefix}_{timestamp}.log")

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)  # Always log DEBUG to file
        file_handler.setFormatter(logging.Formatter(log_format or DEFAULT_LOG_FORMAT))
        root_logger.addHandler(file_handler)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging initialized. Log file: {log_file}")
    return log_file


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
