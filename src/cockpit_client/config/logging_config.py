"""Centralized logging configuration for cockpit-client.

Library modules only create module-level loggers; applications opt in to this
configuration by calling ``setup_logging()`` once at startup.
"""

import logging
import logging.config
import os
from enum import Enum
from typing import Any, Dict, Optional


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogVerbosity(str, Enum):
    """Log verbosity modes."""
    QUIET = "QUIET"      # Only errors and critical
    NORMAL = "NORMAL"    # Standard logging (warnings and above)
    VERBOSE = "VERBOSE"  # Info level logging
    DEBUG = "DEBUG"      # Full debug logging


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


def get_log_level_from_verbosity(verbosity: str) -> str:
    """Map verbosity mode to log level."""
    verbosity_map = {
        LogVerbosity.QUIET: LogLevel.ERROR.value,
        LogVerbosity.NORMAL: LogLevel.WARNING.value,
        LogVerbosity.VERBOSE: LogLevel.INFO.value,
        LogVerbosity.DEBUG: LogLevel.DEBUG.value,
    }
    try:
        return verbosity_map[LogVerbosity(verbosity.upper())]
    except ValueError:
        return LogLevel.WARNING.value


def get_verbosity_from_log_level(log_level: Optional[str]) -> Optional[str]:
    """Map an explicit log level to the matching verbosity mode (None if unknown)."""
    level_map = {
        LogLevel.DEBUG: LogVerbosity.DEBUG.value,
        LogLevel.INFO: LogVerbosity.VERBOSE.value,
        LogLevel.WARNING: LogVerbosity.NORMAL.value,
        LogLevel.ERROR: LogVerbosity.QUIET.value,
        LogLevel.CRITICAL: LogVerbosity.QUIET.value,
    }
    if not log_level:
        return None
    try:
        return level_map[LogLevel(log_level.upper())]
    except ValueError:
        return None


def resolve_verbosity(log_level: Optional[str], log_verbosity: Optional[str]) -> str:
    """Pick the effective verbosity; a known ``LOG_LEVEL`` wins over ``LOG_VERBOSITY``."""
    return get_verbosity_from_log_level(log_level) or (log_verbosity or LogVerbosity.NORMAL.value).upper()


class LoggingConfig:
    """Centralized logging configuration manager."""
    
    # Modules that should only log errors
    ERROR_ONLY_MODULES = [
        "httpx",
        "httpcore",
        "asyncio",
    ]
    
    @classmethod
    def build(cls, verbosity: str = "NORMAL", log_format: str = "simple") -> Dict[str, Any]:
        """Build a ``dictConfig`` mapping for the given verbosity and format."""
        effective_log_level = get_log_level_from_verbosity(verbosity)
        
        if log_format == LogFormat.JSON.value:
            format_string = '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}'
        elif log_format == LogFormat.DETAILED.value:
            format_string = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
        else:  # simple
            format_string = "%(asctime)s - %(levelname)s - %(message)s"
        
        logging_config: Dict[str, Any] = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": format_string,
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": effective_log_level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {
                "level": effective_log_level,
                "handlers": ["console"],
            },
            "loggers": {
                "cockpit_client": {
                    "level": effective_log_level,
                },
            },
        }
        
        for module in cls.ERROR_ONLY_MODULES:
            logging_config["loggers"][module] = {
                "level": "ERROR",
                "handlers": ["console"],
                "propagate": False,
            }
        
        return logging_config
    
    @classmethod
    def configure(cls) -> None:
        """Configure logging based on environment variables."""
        log_verbosity = resolve_verbosity(os.getenv("LOG_LEVEL"), os.getenv("LOG_VERBOSITY"))
        log_format = os.getenv("LOG_FORMAT", "simple").lower()
        
        logging.config.dictConfig(cls.build(log_verbosity, log_format))
        
        logger = logging.getLogger(__name__)
        logger.debug(f"Logging configured: verbosity={log_verbosity}, format={log_format}")
    
    @classmethod
    def set_module_level(cls, module_name: str, level: str) -> None:
        """Set log level for a specific module.
        
        Args:
            module_name: Name of the module
            level: Log level to set
        """
        logging.getLogger(module_name).setLevel(getattr(logging, level.upper()))


def setup_logging() -> None:
    """Setup logging configuration from environment variables.
    
    This is the main entry point for configuring logging in an application.
    It should be called once at application startup.
    """
    LoggingConfig.configure()


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name."""
    return logging.getLogger(name)
