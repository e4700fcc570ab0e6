"""
Logging configuration module.

This module provides centralized logging setup for the library,
configuring console output and optional file output with a shared format.
"""

import logging
from config.settings import Settings


def setup_logger() -> None:
    """
    Configure and initialize the root logger.

    Sets up console logging and, when Settings.LOG_TO_FILE is enabled,
    a UTF-8 log file under Settings.LOGS_DIR. Handlers installed by a
    previous call are removed first so the function can be re-run safely.

    Args:
        None

    Returns:
        None

    Raises:
        OSError: If the logs directory cannot be created (file logging only)

    Example:
        >>> setup_logger()
        >>> logging.info("Datagram client opened")
        2016-07-26 11:04:57 - root - INFO - Datagram client opened

    Note:
        - Level comes from Settings.LOG_LEVEL (unknown names fall back to INFO)
        - Log file is Settings.LOG_FILE, directory created on demand
    """
    level = logging.getLevelName(Settings.LOG_LEVEL)
    if not isinstance(level, int):
        level = logging.INFO

    # Clear any existing handlers to prevent duplicates on re-initialization
    logging.root.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    if Settings.LOG_TO_FILE:
        Settings.LOGS_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(Settings.LOG_FILE, encoding='utf-8')
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        root_logger.addHandler(file_handler)
