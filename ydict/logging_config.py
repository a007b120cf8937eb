"""Logging configuration for the Youdao dictionary tool"""

import logging
import sys


def setup_logging(level: str = "INFO", log_file: str | None = None) -> logging.Logger:
    """Setup logging configuration

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file to write logs to

    Returns:
        Configured logger instance
    """
    # Children (ydict.core.*, ydict.models.*) propagate to this logger
    logger = logging.getLogger("ydict")
    logger.setLevel(getattr(logging, level.upper()))

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    detailed = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if level.upper() == "DEBUG":
        console_fmt = detailed
    else:
        console_fmt = logging.Formatter(fmt="%(levelname)s - %(message)s")

    # Console output goes to stderr so rendered text on stdout stays clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(console_fmt)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(detailed)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = "ydict") -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)
