#!/usr/bin/env python3
"""
Logging utilities for tridinspect
"""

import logging
import sys
from pathlib import Path

PACKAGE_LOGGERS = ("tridinspect", "tridinspect.core", "tridinspect.application")


def setup_logger(name: str = "tridinspect", level: int = logging.INFO) -> logging.Logger:
    """Setup logger with console and file handlers"""

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    try:
        log_dir = Path.home() / ".tridinspect" / "logs"
        log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_dir / "tridinspect.log")
        file_handler.setLevel(logging.DEBUG)

        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

        console_handler.setFormatter(formatter)
        file_handler.setFormatter(formatter)

        logger.addHandler(console_handler)
        logger.addHandler(file_handler)

    except OSError:
        # Fallback to console only
        formatter = logging.Formatter("%(levelname)s - %(message)s")
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger


def get_logger(name: str = "tridinspect") -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)


def configure_logging_levels(verbose: bool, quiet: bool, console: bool = True) -> None:
    """Configure package logging levels based on verbosity settings.

    With ``console=False`` the console handler is silenced so that stdout
    only carries machine-readable output; the file log is unaffected.
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    for name in PACKAGE_LOGGERS:
        logging.getLogger(name).setLevel(level)
    for handler in logging.getLogger("tridinspect").handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(
            handler, logging.FileHandler
        ):
            handler.setLevel(level if console else logging.CRITICAL + 1)
