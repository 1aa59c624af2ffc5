"""
Gateways Package - Infrastructure Layer

This package contains concrete implementations of the gateway
interfaces defined in the domain layer. These implementations
handle the details of external service communications.
"""

from .supabase_order_gateway import SupabaseOrderGateway

__all__ = ["SupabaseOrderGateway"]
