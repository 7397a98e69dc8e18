"""
Logging configuration for HttpTerm-Py

Provides structured logging with file output and optional console output.
The curses interface owns the terminal, so interactive sessions log to file only.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path


class HttpTermLogger:
    """Centralized logger for the application"""

    def __init__(
        self, name: str = "httpterm", log_file: Path | None = None, console_output: bool = True
    ):
        """
        Initialize logger

        Args:
            name: Logger name (usually "httpterm" for main logger)
            log_file: Path to log file (optional)
            console_output: Whether to print to console
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG)

        # Clear existing handlers
        self.logger.handlers = []

        # Format: timestamp - module - level - message
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )

        if console_output:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(logging.INFO)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if log_file:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

        # Nothing configured: keep records away from the terminal
        if not self.logger.handlers:
            self.logger.addHandler(logging.NullHandler())

    def get_logger(self) -> logging.Logger:
        """Get the underlying logger instance"""
        return self.logger


def setup_logging(log_file: Path | None = None, console_output: bool = False) -> logging.Logger:
    """
    Setup logging for a client run

    Args:
        log_file: Log file path (e.g., logs/httpterm.log)
        console_output: Whether to also print to console

    Returns:
        Configured logger instance
    """
    logger_wrapper = HttpTermLogger(name="httpterm", log_file=log_file, console_output=console_output)

    logger = logger_wrapper.get_logger()

    logger.debug("=" * 70)
    logger.debug(f"HttpTerm-Py Started: {datetime.now().isoformat()}")
    if log_file:
        logger.debug(f"Log file: {log_file}")
    logger.debug("=" * 70)

    return logger


def get_module_logger(module_name: str) -> logging.Logger:
    """
    Get logger for a specific module

    Args:
        module_name: Name of the module (e.g., 'dispatcher', 'session')

    Returns:
        Logger instance
    """
    return logging.getLogger(f"httpterm.{module_name}")
