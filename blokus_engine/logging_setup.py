"""
Logging setup utilities.

Configures console output and, optionally, a log file with one shared format.
"""

import logging
from pathlib import Path
from typing import Optional

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    format_string: Optional[str] = None
) -> Optional[Path]:
    """
    Set up logging with a console handler and an optional file handler.

    Existing root handlers are removed so repeated calls do not duplicate
    output.

    Args:
        level: Logging level (default: logging.INFO)
        log_file: Optional path of a log file; parent directories are created
        format_string: Optional custom format string. If None, uses default format.

    Returns:
        Path to the log file, or None when logging only to the console

    Example:
        >>> setup_logging(logging.DEBUG)
        >>> logger = logging.getLogger(__name__)
        >>> logger.info("This will be logged to the console")
    """
    formatter = logging.Formatter(
        format_string or DEFAULT_FORMAT,
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _attach(root_logger, logging.FileHandler(log_file, mode="w", encoding="utf-8"), level, formatter)

    _attach(root_logger, logging.StreamHandler(), level, formatter)

    return log_file


def _attach(root_logger: logging.Logger, handler: logging.Handler, level: int,
            formatter: logging.Formatter) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
