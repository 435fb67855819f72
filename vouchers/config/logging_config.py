# vouchers/config/logging_config.py
import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from vouchers.config.settings import LoggingSettings

PACKAGE_LOGGER = "vouchers"


def configure_logging(
    logging_settings: LoggingSettings,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the package logger from logging settings

    Existing handlers are replaced, so this can be called again after the
    settings change.

    Args:
        logging_settings: Level, format and handler switches
        log_file: Path of the log file, used when file logging is enabled

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    log_level = getattr(logging, logging_settings.level.upper(), logging.INFO)
    logger.setLevel(log_level)

    simple_formatter = logging.Formatter(logging_settings.format)
    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
    )

    # 1. Console handler, kept off stdout so CLI output stays parseable
    if logging_settings.console_enabled:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(simple_formatter)
        console_handler.setLevel(log_level)
        logger.addHandler(console_handler)

    # 2. Rotating file handler
    if logging_settings.file_enabled and log_file:
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10485760,  # 10MB
            backupCount=5
        )
        file_handler.setFormatter(detailed_formatter)
        file_handler.setLevel(log_level)
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    logger.propagate = True
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger in the package hierarchy, configuring the package logger on first use

    Args:
        name: Logger name, normally the calling module's __name__

    Returns:
        Logger instance
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)

    # If package logger is already configured, just hand out the child
    if not package_logger.handlers:
        from vouchers.config import settings

        log_file = None
        if settings.logging.file_enabled:
            settings.logs_dir.mkdir(parents=True, exist_ok=True)
            log_file = str(settings.get_log_path(PACKAGE_LOGGER))
        configure_logging(settings.logging, log_file)

    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return package_logger.getChild(name)


def set_level(level: str) -> None:
    """
    Change the level of the package logger and all of its handlers

    Args:
        level: Logging level name
    """
    logger = get_logger(PACKAGE_LOGGER)
    log_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(log_level)
    for handler in logger.handlers:
        handler.setLevel(log_level)
