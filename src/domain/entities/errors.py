"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidForecastPeriodError(DomainError):
    """Raised when a forecast is requested for an unsupported period."""

    def __init__(self, period: str, details: Optional[Dict[str, Any]] = None):
        message = f"Invalid forecast period: {period}"
        super().__init__(message, details)


class OrderStoreError(DomainError):
    """Raised when the order store cannot provide the order history."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
