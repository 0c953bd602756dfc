"""
Unified logging helper for consistent logging across the package.

This module provides a centralized logging system so the table engine,
the Flask glue and the example routes share one formatting and one set of
handlers.

Usage:
    from logging_helper import LoggingHelper, LogType

    # Get a logger instance
    logger = LoggingHelper.get_logger(LogType.MAIN)
    logger.info("Standard logging")

    # Use helper methods for common patterns
    LoggingHelper.log_error_with_trace("Render failed", exception)
    LoggingHelper.log_request("searchable", "display only")
"""

import logging
import os
from enum import Enum
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional


class LogType(Enum):
    """Enum for different log types in the package."""
    MAIN = "data_table"
    REQUEST = "data_table.requests"


class LoggingHelper:
    """
    Unified logging helper for consistent logging across the package.

    File handlers are only attached when a log directory is configured
    (``DATA_TABLE_LOG_DIR`` or an explicit ``initialize(log_dir=...)``);
    otherwise everything goes to the console.
    """

    _loggers = {}
    _initialized = False
    _log_dir: Optional[Path] = None

    @classmethod
    def initialize(cls, log_dir: Optional[str] = None):
        """
        Initialize all loggers. Called lazily by get_logger().

        Args:
            log_dir: Directory where log files will be stored. Falls back to
                the DATA_TABLE_LOG_DIR environment variable.
        """
        if cls._initialized:
            return

        log_dir = log_dir or os.getenv('DATA_TABLE_LOG_DIR')
        if log_dir:
            cls._log_dir = Path(log_dir)
            try:
                cls._log_dir.mkdir(parents=True, exist_ok=True)
            except OSError:
                cls._log_dir = None

        cls._loggers[LogType.MAIN] = cls._setup_main_logger()
        cls._loggers[LogType.REQUEST] = cls._setup_request_logger()

        cls._initialized = True

    @classmethod
    def get_logger(cls, log_type: LogType = LogType.MAIN) -> logging.Logger:
        """
        Get a logger instance by type.

        Args:
            log_type: The type of logger to retrieve

        Returns:
            The requested logger instance
        """
        if not cls._initialized:
            cls.initialize()
        return cls._loggers.get(log_type, cls._loggers[LogType.MAIN])

    # =============================================================================
    # Helper methods for common logging patterns
    # =============================================================================

    @classmethod
    def log_error_with_trace(cls, message: str, exception: Exception,
                             log_type: LogType = LogType.MAIN):
        """
        Log an error with full traceback in a single call.

        Args:
            message: Error message to log
            exception: The exception that occurred
            log_type: Which logger to use
        """
        logger = cls.get_logger(log_type)
        logger.error(f"{message}: {exception}", exc_info=True)

    @classmethod
    def log_operation(cls, operation: str, status: str = "started",
                      log_type: LogType = LogType.MAIN):
        """
        Log operation start/completion with consistent formatting.

        Args:
            operation: Name of the operation
            status: Status - "started" or "completed"
            log_type: Which logger to use
        """
        logger = cls.get_logger(log_type)
        marker = "▶" if status == "started" else "✓"
        logger.info(f"{marker} {operation.capitalize()} {status}")

    @classmethod
    def log_request(cls, form_name: str, details: Optional[str] = None):
        """
        Log an incoming form submission on the request logger.

        Args:
            form_name: Name of the form the payload belongs to
            details: Optional additional details
        """
        logger = cls.get_logger(LogType.REQUEST)
        message = f"Form '{form_name}'"
        if details:
            message += f" - {details}"
        logger.info(message)

    # =============================================================================
    # Private logger setup methods
    # =============================================================================

    @classmethod
    def _file_formatter(cls) -> logging.Formatter:
        return logging.Formatter('%(asctime)s | %(levelname)s | %(message)s',
                                 datefmt='%Y-%m-%d %H:%M:%S')

    @classmethod
    def _setup_main_logger(cls) -> logging.Logger:
        """Configure and return the main package logger."""
        log_level = os.getenv('LOG_LEVEL', 'INFO').upper()

        logger = logging.getLogger(LogType.MAIN.value)
        logger.setLevel(getattr(logging, log_level, logging.INFO))
        logger.handlers = []
        logger.propagate = False

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter('[%(levelname)s] %(message)s'))
        logger.addHandler(console_handler)

        if cls._log_dir is None:
            return logger

        try:
            # File handler for all logs (with timestamp)
            file_handler = RotatingFileHandler(
                cls._log_dir / 'data_table.log',
                maxBytes=10*1024*1024,  # 10MB
                backupCount=3,
                encoding='utf-8'
            )
            file_handler.setFormatter(cls._file_formatter())
            logger.addHandler(file_handler)

            # Separate error file handler
            error_handler = RotatingFileHandler(
                cls._log_dir / 'errors.log',
                maxBytes=10*1024*1024,  # 10MB
                backupCount=3,
                encoding='utf-8'
            )
            error_handler.setLevel(logging.ERROR)
            error_handler.setFormatter(cls._file_formatter())
            logger.addHandler(error_handler)

        except OSError as e:
            logger.warning(f"Could not create file handlers: {e}")

        return logger

    @classmethod
    def _setup_request_logger(cls) -> logging.Logger:
        """Configure the request logger used by the Flask glue."""
        logger = logging.getLogger(LogType.REQUEST.value)
        logger.setLevel(logging.INFO)
        logger.handlers = []
        logger.propagate = False

        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter('[REQUEST] %(message)s'))
        logger.addHandler(handler)

        return logger
