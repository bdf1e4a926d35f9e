"""
Logging System for the Single-Page Archiver

Console diagnostics go to stderr so stdout stays free for the archived
document. An optional rotating log file can be configured.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional, Dict, Any, TextIO

from archiver.core.base import ConfigurationError


LEVEL_COLORS = {
    logging.DEBUG: "\x1b[2m",
    logging.INFO: "\x1b[32m",
    logging.WARNING: "\x1b[33m",
    logging.ERROR: "\x1b[31m",
    logging.CRITICAL: "\x1b[1;31m",
}
RESET = "\x1b[0m"


def parse_size(size_str: str) -> int:
    """
    Parse size string like '10MB' to bytes

    Raises:
        ValueError: If the string is not a number with an optional KB/MB/GB suffix
    """
    size_str = str(size_str).upper().strip()

    multiplier = 1
    for suffix, factor in (('KB', 1024), ('MB', 1024 ** 2), ('GB', 1024 ** 3)):
        if size_str.endswith(suffix):
            size_str = size_str[:-2].strip()
            multiplier = factor
            break

    if not (size_str.isascii() and size_str.isdigit()):
        raise ValueError(f"invalid size: {size_str!r}")
    return int(size_str) * multiplier


class ColorFormatter(logging.Formatter):
    """Formatter that wraps the level name in ANSI color codes"""

    def format(self, record: logging.LogRecord) -> str:
        color = LEVEL_COLORS.get(record.levelno)
        if not color:
            return super().format(record)
        original = record.levelname
        record.levelname = f"{color}{original}{RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


class LoggingManager:
    """
    Centralized logging manager with optional file rotation
    """

    def __init__(self):
        self.logger: Optional[logging.Logger] = None
        self.file_handler: Optional[logging.handlers.RotatingFileHandler] = None
        self.console_handler: Optional[logging.StreamHandler] = None
        self._setup_complete = False

    def setup_logging(self, level: str = "INFO", log_file: Optional[str] = None,
                      max_size: str = "10MB", backup_count: int = 3,
                      no_color: bool = True, silent: bool = False,
                      stream: Optional[TextIO] = None) -> None:
        """
        Set up logging with console output and an optional rotating file

        Args:
            level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_file: Path to log file, or None for console only
            max_size: Maximum size before rotation (e.g., "10MB")
            backup_count: Number of backup files to keep
            no_color: Disable ANSI colors on the console
            silent: Only report warnings and errors on the console
            stream: Console stream, defaults to stderr
        """
        self.close()

        self.logger = logging.getLogger('archiver')
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False
        self.logger.handlers.clear()

        console_level = getattr(logging, level.upper())
        if silent:
            console_level = max(console_level, logging.WARNING)

        console_format = '%(levelname)s: %(message)s'
        console_formatter = (
            logging.Formatter(console_format) if no_color else ColorFormatter(console_format)
        )

        self.console_handler = logging.StreamHandler(stream or sys.stderr)
        self.console_handler.setLevel(console_level)
        self.console_handler.setFormatter(console_formatter)
        self.logger.addHandler(self.console_handler)

        if log_file:
            log_path = Path(log_file).expanduser()
            try:
                max_bytes = parse_size(max_size)
            except ValueError as e:
                raise ConfigurationError(f"Invalid log max_size {max_size!r}: {e}")

            detailed_formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(funcName)s:%(lineno)d - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            try:
                log_path.parent.mkdir(parents=True, exist_ok=True)
                self.file_handler = logging.handlers.RotatingFileHandler(
                    log_path, maxBytes=max_bytes,
                    backupCount=backup_count, encoding='utf-8'
                )
            except OSError as e:
                raise ConfigurationError(f"Cannot open log file {log_path}: {e}")
            self.file_handler.setLevel(logging.DEBUG)
            self.file_handler.setFormatter(detailed_formatter)
            self.logger.addHandler(self.file_handler)

        self._setup_complete = True
        self.logger.debug("Logging system initialized")

    def get_logger(self) -> logging.Logger:
        """Get the configured logger instance"""
        if not self._setup_complete or not self.logger:
            raise RuntimeError("Logging not set up. Call setup_logging() first.")
        return self.logger

    def log_options(self, options: Dict[str, Any]) -> None:
        """Log the resolved options, one per line"""
        if not self.logger:
            return

        for name in sorted(options):
            self.logger.debug(f"  {name} = {options[name]!r}")

    def close(self) -> None:
        """Close logging handlers"""
        for handler in (self.file_handler, self.console_handler):
            if handler is None:
                continue
            if self.logger:
                self.logger.removeHandler(handler)
            handler.close()
        self.file_handler = None
        self.console_handler = None
        self._setup_complete = False


# Global logging manager instance
logging_manager = LoggingManager()


def get_logger() -> logging.Logger:
    """Get the global logger instance"""
    return logging_manager.get_logger()


def setup_logging(level: str = "INFO", log_file: Optional[str] = None,
                  max_size: str = "10MB", backup_count: int = 3,
                  no_color: bool = True, silent: bool = False,
                  stream: Optional[TextIO] = None) -> None:
    """Set up global logging system"""
    logging_manager.setup_logging(level, log_file, max_size, backup_count,
                                  no_color, silent, stream)
