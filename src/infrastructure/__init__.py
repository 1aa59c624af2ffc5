"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer, dealing with external concerns such as the order store
and dependency health checks.
"""

from src.infrastructure import gateways, services

__all__ = ["gateways", "services"]
