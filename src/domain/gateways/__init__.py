"""
Gateways Package - Domain Layer

This package contains interfaces defining gateway contracts
for external service communications. Specific implementations
are provided by the infrastructure layer.
"""

from .order_store_gateway import IOrderStoreGateway

__all__ = ["IOrderStoreGateway"]
