"""
Core components for the Single-Page Archiver

This package contains:
- Base types and the exception hierarchy
- The Options record and its resolver
- Configuration management
- Logging system
"""

from archiver.core.base import (
    Cookie,
    ArchiverError,
    ConfigurationError,
    OptionsError,
    MissingRequiredArgumentError,
    MalformedNumericOptionError
)

from archiver.core.options import (
    Options,
    OptionsResolver,
    resolve_no_color,
    parse_timeout,
    DEFAULT_NETWORK_TIMEOUT,
    DEFAULT_OUTPUT_FALLBACK,
    DEFAULT_USER_AGENT
)

from archiver.core.config import (
    ConfigManager,
    LoggingConfig
)

from archiver.core.logging import (
    LoggingManager,
    get_logger,
    setup_logging
)

__all__ = [
    # Base types
    'Cookie',
    'ArchiverError',
    'ConfigurationError',
    'OptionsError',
    'MissingRequiredArgumentError',
    'MalformedNumericOptionError',

    # Options
    'Options',
    'OptionsResolver',
    'resolve_no_color',
    'parse_timeout',
    'DEFAULT_NETWORK_TIMEOUT',
    'DEFAULT_OUTPUT_FALLBACK',
    'DEFAULT_USER_AGENT',

    # Configuration
    'ConfigManager',
    'LoggingConfig',

    # Logging
    'LoggingManager',
    'get_logger',
    'setup_logging'
]
