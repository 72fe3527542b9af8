"""
Logging Configuration
=====================
Handlers for the 'unlearnviz' logger tree. Modules only call
``logging.getLogger(__name__)``; this is the single place that decides where
those records end up.
"""
import logging
import sys
from types import TracebackType
from typing import Optional, Type

PACKAGE_LOGGER = "unlearnviz"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Send package log records to stdout and, optionally, to a file.

    Calling it again replaces the previous handlers instead of stacking them.

    Args:
        level: Threshold for the package logger and its handlers.
        log_file: Path of a log file to (over)write, or None for stdout only.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info("Logging initialized.")


def install_excepthook() -> None:
    """Report uncaught exceptions as CRITICAL records instead of bare tracebacks."""
    logger = logging.getLogger(PACKAGE_LOGGER)

    def _hook(
        exc_type: Type[BaseException],
        exc_value: BaseException,
        exc_tb: Optional[TracebackType],
    ) -> None:
        # Ctrl+C keeps the default behaviour
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_tb)
            return
        logger.critical("Uncaught exception", exc_info=(exc_type, exc_value, exc_tb))

    sys.excepthook = _hook
