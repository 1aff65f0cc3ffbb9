### Description ###
# OrderDesk - Local-first Order Intake
# - Custom Logger Setup -
# Author: Bailey Dixon
# Date: 10/18/2026
# Python: 3.11
####################

# Standard Imports
import logging
from datetime import datetime
from pathlib import Path

from orderdesk.config import get_app_settings

_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}


class CustomFormatter(logging.Formatter):
    """Custom formatter for OrderDesk logging with specific time format"""

    def format(self, record):
        """
        Format log record with custom time format: HH:MM:SS AM/PM - name - LEVEL:

        Args:
            record: LogRecord instance

        Returns:
            Formatted log string
        """
        timestamp = datetime.fromtimestamp(record.created).strftime("%I:%M:%S %p")

        formatted_msg = f"{timestamp} - {record.name} - {record.levelname}: {record.getMessage()}"

        if record.exc_info:
            formatted_msg += "\n" + self.formatException(record.exc_info)

        return formatted_msg


def level_from_name(name: str | None, default: int = logging.INFO) -> int:
    """Map a level name such as "debug" to its logging constant"""
    if not name:
        return default
    return _LEVELS.get(str(name).strip().upper(), default)


def setup_logger(
    name: str,
    level: int | None = None,
    log_to_file: bool | None = None,
    log_to_console: bool | None = None,
) -> logging.Logger:
    """
    Set up a custom logger for OrderDesk

    Args:
        name: Logger name (typically __name__)
        level: Logging level (default: application settings)
        log_to_file: Whether to log to file (default: application settings)
        log_to_console: Whether to log to console (default: application settings)

    Returns:
        Configured logger instance

    Example:
        logger = setup_logger(__name__)
        logger.info("This is an info message")
    """
    # Environment variables win over config.yaml (see get_app_settings)
    settings = get_app_settings()
    if level is None:
        level = level_from_name(settings.log_level)
    if log_to_file is None:
        log_to_file = settings.log_to_file
    if log_to_console is None:
        log_to_console = settings.log_to_console

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Prevent duplicate handlers if logger already exists
    if logger.handlers:
        return logger

    formatter = CustomFormatter()

    if log_to_file:
        logs_dir = Path("logs")
        logs_dir.mkdir(exist_ok=True)

        log_filename = f"orderdesk_{datetime.now().strftime('%Y-%m-%d')}.log"
        log_filepath = logs_dir / log_filename

        file_handler = logging.FileHandler(log_filepath, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if log_to_console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get an existing logger or create a new one with default settings

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return setup_logger(name)
