"""
Unified logging system for AlfredChat application.

The terminal belongs to curses while the chat runs, so nothing here writes to
stdout. Console records go to stderr and are only enabled by the testing
preset; file records are written only when a log directory is configured.

Usage:
    from AlfredChat.core.logging import get_logger

    logger = get_logger(__name__)
    logger.info("Application started")

Configuration:
    from AlfredChat.core.logging import configure_logging, LogConfig

    config = LogConfig(level="DEBUG", log_dir="./logs")
    configure_logging(config)
"""

import json
import logging
import logging.handlers
import os
import sys
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Union


@dataclass
class LogConfig:
    """
    Configuration for the logging system.

    Attributes:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for log files; None disables file output
        console_output: Whether to output to stderr
        json_output: Whether file records are written as JSON lines
        max_bytes: Maximum size of log file before rotation (bytes)
        backup_count: Number of backup files to keep
        format_string: Custom format string for log messages
        date_format: Custom date format string
        component_levels: Dict mapping component names to log levels
    """
    level: str = "INFO"
    log_dir: Optional[str] = None
    console_output: bool = False
    json_output: bool = False
    max_bytes: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5
    format_string: Optional[str] = None
    date_format: str = "%Y-%m-%d %H:%M:%S"
    component_levels: Dict[str, str] = field(default_factory=dict)

    @property
    def file_output(self) -> bool:
        return self.log_dir is not None


class ColoredFormatter(logging.Formatter):
    """
    Formatter that adds color to console output.
    """

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'        # Reset
    }

    def __init__(self, fmt: str, datefmt: str = None, use_colors: bool = True):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors and sys.platform != 'win32'

    def format(self, record: logging.LogRecord) -> str:
        levelname = record.levelname
        if self.use_colors and levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.COLORS['RESET']}"
        try:
            return super().format(record)
        finally:
            # Other handlers share the record
            record.levelname = levelname


class JsonFormatter(logging.Formatter):
    """
    Formatter that outputs log records as JSON.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def get_default_format() -> str:
    """Get the default log format string."""
    return "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_detailed_format() -> str:
    """Get a detailed log format string with more context."""
    return (
        "%(asctime)s - %(name)s - %(levelname)s - "
        "[%(filename)s:%(lineno)d - %(funcName)s] - %(message)s"
    )


class LoggingManager:
    """
    Centralized logging manager for the application.

    Handles configuration, setup, and management of loggers across
    all components.
    """

    _instance: Optional['LoggingManager'] = None
    _initialized: bool = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._config: Optional[LogConfig] = None
        self._handlers: List[logging.Handler] = []
        self._initialized = True

    @property
    def handlers(self) -> List[logging.Handler]:
        """Get the handlers installed by the last configuration."""
        return list(self._handlers)

    def configure(self, config: LogConfig) -> None:
        """
        Configure the logging system.

        Args:
            config: Logging configuration
        """
        self._config = config
        level = getattr(logging, config.level.upper())

        if config.file_output:
            Path(config.log_dir).mkdir(parents=True, exist_ok=True)

        root_logger = logging.getLogger()
        root_logger.setLevel(level)

        # Only drop what we installed; pytest and friends keep theirs
        for handler in self._handlers:
            root_logger.removeHandler(handler)
            handler.close()

        self._handlers = []

        if config.console_output:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(level)

            fmt = config.format_string or get_default_format()
            console_handler.setFormatter(ColoredFormatter(fmt, config.date_format))

            root_logger.addHandler(console_handler)
            self._handlers.append(console_handler)

        if config.file_output:
            if config.json_output:
                formatter = JsonFormatter()
            else:
                fmt = config.format_string or get_detailed_format()
                formatter = logging.Formatter(fmt, config.date_format)

            file_handler = logging.handlers.RotatingFileHandler(
                os.path.join(config.log_dir, "alfred.log"),
                maxBytes=config.max_bytes,
                backupCount=config.backup_count,
                encoding='utf-8'
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)

            root_logger.addHandler(file_handler)
            self._handlers.append(file_handler)

            error_handler = logging.handlers.RotatingFileHandler(
                os.path.join(config.log_dir, "alfred_errors.log"),
                maxBytes=config.max_bytes,
                backupCount=config.backup_count,
                encoding='utf-8'
            )
            error_handler.setLevel(logging.ERROR)
            error_handler.setFormatter(formatter)

            root_logger.addHandler(error_handler)
            self._handlers.append(error_handler)

        if not self._handlers:
            # Keeps the last-resort handler from printing over the screen
            null_handler = logging.NullHandler()
            root_logger.addHandler(null_handler)
            self._handlers.append(null_handler)

        for component, component_level in config.component_levels.items():
            logging.getLogger(component).setLevel(getattr(logging, component_level.upper()))

        logging.getLogger(__name__).info("Logging system configured with level: %s", config.level)

    def get_logger(self, name: str) -> logging.Logger:
        """
        Get a logger instance.

        Args:
            name: Logger name (typically __name__)

        Returns:
            Configured logger instance
        """
        return logging.getLogger(name)

    def set_level(self, level: Union[str, int]) -> None:
        """
        Set the global log level.

        Args:
            level: Log level (string or logging constant)
        """
        if isinstance(level, str):
            level = getattr(logging, level.upper())

        logging.getLogger().setLevel(level)

        for handler in self._handlers:
            # The error file stays at ERROR
            if handler.level != logging.ERROR:
                handler.setLevel(level)

    def shutdown(self) -> None:
        """Flush and close the installed handlers."""
        root_logger = logging.getLogger()
        for handler in self._handlers:
            handler.flush()
            root_logger.removeHandler(handler)
            handler.close()
        self._handlers = []


# Global logging manager instance
_logging_manager = LoggingManager()


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return _logging_manager.get_logger(name)


def configure_logging(config: LogConfig) -> None:
    """
    Configure the logging system.

    Args:
        config: Logging configuration
    """
    _logging_manager.configure(config)


def get_logging_manager() -> LoggingManager:
    """Get the global logging manager instance."""
    return _logging_manager


def create_development_config(log_dir: Optional[str] = None) -> LogConfig:
    """
    Create a logging configuration for development environment.

    Returns:
        Development logging configuration
    """
    return LogConfig(
        level="DEBUG",
        log_dir=log_dir,
        console_output=False,
        max_bytes=5 * 1024 * 1024,  # 5MB
        backup_count=3,
        format_string=get_detailed_format(),
        component_levels={
            "asyncio": "WARNING",
        }
    )


def create_production_config(log_dir: Optional[str] = None) -> LogConfig:
    """
    Create a logging configuration for production environment.

    Returns:
        Production logging configuration
    """
    return LogConfig(
        level="INFO",
        log_dir=log_dir,
        console_output=False,
        json_output=True,
        max_bytes=50 * 1024 * 1024,  # 50MB
        backup_count=10,
        component_levels={
            "asyncio": "ERROR",
        }
    )


def create_testing_config(log_dir: Optional[str] = None) -> LogConfig:
    """
    Create a logging configuration for testing environment.

    Returns:
        Testing logging configuration
    """
    return LogConfig(
        level="DEBUG",
        log_dir=log_dir,
        console_output=True,
        format_string="%(levelname)s - %(message)s",
    )


def auto_configure(
    env: Optional[str] = None,
    level: Optional[str] = None,
    log_dir: Optional[str] = None
) -> LogConfig:
    """
    Configure logging from a named environment preset.

    Args:
        env: Environment name (development, production, testing).
             If None, taken from the application config.
        level: Overrides the preset's level when given
        log_dir: Directory for log files; None keeps file output off

    Returns:
        The configuration that was applied
    """
    from AlfredChat.config import config as app_config

    if env is None:
        env = app_config.ENV

    factories = {
        "development": create_development_config,
        "dev": create_development_config,
        "production": create_production_config,
        "prod": create_production_config,
        "testing": create_testing_config,
        "test": create_testing_config,
    }

    factory = factories.get(env.lower(), create_development_config)
    log_config = factory(log_dir)
    if level:
        log_config.level = level.upper()

    configure_logging(log_config)

    get_logger(__name__).info("Logging auto-configured for environment: %s", env)
    return log_config


__all__ = [
    'LogConfig',
    'LoggingManager',
    'ColoredFormatter',
    'JsonFormatter',
    'get_logger',
    'configure_logging',
    'get_logging_manager',
    'create_development_config',
    'create_production_config',
    'create_testing_config',
    'auto_configure',
    'get_default_format',
    'get_detailed_format',
]
