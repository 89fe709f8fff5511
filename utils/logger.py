"""
Logging configuration for cartotopo.

Console output carries INFO-level progress messages, while the log file
captures DEBUG-level detail such as every ring split and frame dispatch
decision.

Functions:
    setup_logging: Initialize logging handlers and return log file path
    get_logger: Get a logger instance for a specific module

Example:
    >>> from utils.logger import setup_logging, get_logger
    >>> log_file = setup_logging()
    >>> logger = get_logger(__name__)
    >>> logger.info("Splitting rings")
"""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional

ROOT_LOGGER_NAME = 'cartotopo'


def setup_logging(log_dir: Optional[Path] = None,
                  console_level: int = logging.INFO) -> Path:
    """
    Setup logging to console and file.

    Creates two handlers:
    - Console: INFO level (configurable) with clean formatting
    - File: DEBUG level with timestamps and module names

    Parameters:
    -----------
    log_dir : Optional[Path]
        Directory for log files. Defaults to PROJECT_ROOT/logs
    console_level : int
        Threshold for the console handler

    Returns:
    --------
    Path
        Path to the created log file
    """
    if log_dir is None:
        log_dir = Path(__file__).parent.parent / 'logs'
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = log_dir / f'cartotopo_{timestamp}.log'

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    # Remove existing handlers to avoid duplicates
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter('%(message)s'))

    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))

    logger.addHandler(console)
    logger.addHandler(file_handler)

    logger.debug(f"Logging initialized: {log_file}")

    return log_file


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Parameters:
    -----------
    name : str
        Module name (typically __name__)

    Returns:
    --------
    logging.Logger
        Logger nested under the cartotopo root logger
    """
    return logging.getLogger(f'{ROOT_LOGGER_NAME}.{name}')
