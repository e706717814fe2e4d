"""
Structured logging utilities for decimal-units.

The library never configures handlers on import: the package logger only
carries a NullHandler. Applications opt in with ``setup_logging``.
"""

import logging
import logging.handlers
import os
import sys
import json
import threading
from datetime import datetime, timezone
from typing import Optional, Dict, Any
from pathlib import Path
from dataclasses import dataclass
from enum import Enum

PACKAGE_LOGGER = "decimal_units"


class LogLevel(Enum):
    """Log levels, including a TRACE level below DEBUG."""
    TRACE = 5        # Per-operation traces (conversions, rounding)
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50


class LogCategory(Enum):
    """Log categories for classification."""
    CONVERSION = "conversion"
    ROUNDING = "rounding"
    CONTRACT = "contract"
    SYSTEM = "system"


for _level in LogLevel:
    logging.addLevelName(_level.value, _level.name)


@dataclass
class LogConfig:
    """Configuration for the logging system."""
    level: str = "INFO"
    format_type: str = "text"
    log_file: Optional[Path] = None
    max_file_size: int = 10_000_000  # 10MB
    backup_count: int = 5
    console_output: bool = True
    structured_metadata: bool = True

    @classmethod
    def from_settings(cls, settings) -> 'LogConfig':
        """Build a LogConfig from a settings object."""
        return cls(
            level=settings.log_level,
            format_type=settings.log_format,
            log_file=Path(settings.log_file) if settings.log_file else None,
        )


def _resolve_level(level: str) -> int:
    level = level.upper()
    if level == LogLevel.TRACE.name:
        return LogLevel.TRACE.value
    return getattr(logging, level, logging.INFO)


def setup_logging(config: Optional[LogConfig] = None, settings=None) -> logging.Logger:
    """
    Install handlers on the package logger.

    Args:
        config: LogConfig object; built from ``settings`` when omitted
        settings: Settings object; the cached settings are used when both
            arguments are omitted

    Returns:
        The configured package logger
    """
    if config is None:
        if settings is None:
            from decimal_units.configs import get_settings
            settings = get_settings()
        config = LogConfig.from_settings(settings)

    if config.format_type == "json":
        formatter = EnhancedJsonFormatter(config)
    else:
        formatter = EnhancedTextFormatter()

    level = _resolve_level(config.level)
    package_logger = logging.getLogger(PACKAGE_LOGGER)

    # Replace handlers from an earlier call
    for handler in list(package_logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            package_logger.removeHandler(handler)
            handler.close()

    if config.console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        package_logger.addHandler(console_handler)

    if config.log_file:
        log_file = Path(config.log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    package_logger.setLevel(level)
    return package_logger


class EnhancedJsonFormatter(logging.Formatter):
    """JSON formatter with structured metadata."""

    def __init__(self, config: LogConfig):
        super().__init__()
        self.config = config

    def format(self, record):
        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'thread_id': threading.get_ident(),
            'process_id': os.getpid()
        }

        if self.config.structured_metadata:
            if hasattr(record, 'category'):
                log_entry['category'] = record.category

            if hasattr(record, 'error_context'):
                log_entry['error'] = record.error_context

            if hasattr(record, 'extra_fields'):
                log_entry.update(record.extra_fields)

        if record.exc_info:
            log_entry['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': self.formatException(record.exc_info)
            }

        return json.dumps(log_entry, default=str)


class EnhancedTextFormatter(logging.Formatter):
    """Text formatter that prefixes the log category."""

    def __init__(self):
        super().__init__(
            fmt='%(asctime)s [%(levelname)s] %(name)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    def format(self, record):
        formatted = super().format(record)
        if hasattr(record, 'category'):
            formatted = f"[{record.category}] {formatted}"
        return formatted


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger
    """
    return logging.getLogger(name)


def get_enhanced_logger(name: str, category: Optional[LogCategory] = None) -> 'EnhancedLogger':
    """
    Get an enhanced logger instance.

    Args:
        name: Logger name (typically __name__)
        category: Default log category

    Returns:
        Enhanced logger instance
    """
    return EnhancedLogger(name, category)


class EnhancedLogger:
    """Logger wrapper that attaches a category and structured fields."""

    def __init__(self, name: str, default_category: Optional[LogCategory] = None):
        self.logger = logging.getLogger(name)
        self.default_category = default_category

    def is_enabled_for(self, level: LogLevel) -> bool:
        return self.logger.isEnabledFor(level.value)

    def _log(
        self,
        level: int,
        message: str,
        category: Optional[LogCategory] = None,
        error_context: Optional[Dict[str, Any]] = None,
        **extra_fields
    ):
        if not self.logger.isEnabledFor(level):
            return

        record = self.logger.makeRecord(
            name=self.logger.name,
            level=level,
            fn="",
            lno=0,
            msg=message,
            args=(),
            exc_info=None
        )

        if category or self.default_category:
            record.category = (category or self.default_category).value

        if error_context:
            record.error_context = error_context

        if extra_fields:
            record.extra_fields = extra_fields

        self.logger.handle(record)

    def trace(self, message: str, **kwargs):
        """Log trace level message."""
        self._log(LogLevel.TRACE.value, message, **kwargs)

    def debug(self, message: str, **kwargs):
        """Log debug level message."""
        self._log(LogLevel.DEBUG.value, message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info level message."""
        self._log(LogLevel.INFO.value, message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning level message."""
        self._log(LogLevel.WARNING.value, message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error level message."""
        self._log(LogLevel.ERROR.value, message, **kwargs)

    def critical(self, message: str, **kwargs):
        """Log critical level message."""
        self._log(LogLevel.CRITICAL.value, message, **kwargs)

    def log_conversion(self, amount, source, target, result):
        """Log a unit conversion at trace level."""
        if not self.is_enabled_for(LogLevel.TRACE):
            return
        self.trace(
            f"Converted {amount} {source} to {result} {target}",
            category=LogCategory.CONVERSION,
            source_unit=str(source),
            target_unit=str(target),
            amount=str(amount),
            result=str(result)
        )

    def log_rounding(self, amount, precision, result):
        """Log a rounding at trace level."""
        if not self.is_enabled_for(LogLevel.TRACE):
            return
        self.trace(
            f"Rounded {amount} to {result} at precision {precision}",
            category=LogCategory.ROUNDING,
            amount=str(amount),
            precision=precision,
            result=str(result)
        )

    def log_contract_violation(self, error: Exception):
        """Log a broken precondition before it is raised."""
        error_context = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            'context': getattr(error, 'metadata', {}),
            'timestamp': datetime.now(timezone.utc).isoformat()
        }

        self.error(
            f"Contract violation: {error}",
            category=LogCategory.CONTRACT,
            error_context=error_context
        )
