"""Logging configuration for the command line interface."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def setup_logging(level: str = "WARNING", logger_name: str = "bankaccount") -> logging.Handler:
    """Attach a stderr handler to the package logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        logger_name: Name of the logger

    Returns:
        The installed handler, so the caller can remove it again
    """
    logger = logging.getLogger(logger_name)

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper()))

    return handler


def get_logger(name: str = "bankaccount") -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)


def teardown_logging(
    handler: logging.Handler, level: int, logger_name: str = "bankaccount"
) -> None:
    """Remove a handler installed by setup_logging and restore the logger level.

    Args:
        handler: Handler returned by setup_logging
        level: Level the logger had before setup_logging
        logger_name: Name of the logger
    """
    logger = logging.getLogger(logger_name)
    logger.removeHandler(handler)
    logger.setLevel(level)
