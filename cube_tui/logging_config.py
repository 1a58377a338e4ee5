"""
Logging Configuration
Sets up the logger for the 'cube_tui' namespace.
"""
import logging
import sys
from typing import Optional


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configures the logger for the 'cube_tui' namespace.

    curses owns the terminal while the app runs, so the CLI passes a log
    file; without one, records go to stderr.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to write logs to.
    """
    logger = logging.getLogger("cube_tui")
    logger.setLevel(level)

    # Check if handlers already exist to avoid duplicate logs on re-setup
    if logger.hasHandlers():
        logger.handlers.clear()

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    if log_file:
        handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    logger.info("Logging initialized.")
