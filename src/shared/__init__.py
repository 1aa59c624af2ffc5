"""
Shared module - Cross-cutting concerns / Shared Layer

This module provides shared utilities, constants, and enums that are used
across multiple layers of the application.

Its primary responsibilities include:
- Defining cross-layer constants (environment names, log levels, order status)
- Configuring structured logging
- Resolving secrets mounted as files

It must not depend on Infrastructure or Frameworks.
"""

from .consts import (
    CANCELLED_ORDER_STATUS,
    ORDER_STORE_DEPENDENCY,
    EnumEnvironment,
    EnumLogLevel,
)
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "CANCELLED_ORDER_STATUS",
    "ORDER_STORE_DEPENDENCY",
    "EnumEnvironment",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
