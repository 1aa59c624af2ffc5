"""
Domain Gateway - Order Store

This module defines the gateway interface for reading the order history
that feeds the sales forecast.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List

from src.domain.entities.orders import OrderRecord


class IOrderStoreGateway(ABC):
    """Interface for the order store gateway."""

    @abstractmethod
    async def fetch_orders(
        self,
        since: datetime,
        excluded_status: str = "Cancelled",
    ) -> List[OrderRecord]:
        """
        Fetch orders created at or after ``since``, oldest first.

        Args:
            since: Start of the look-back window (inclusive)
            excluded_status: Order status to leave out (e.g. "Cancelled")

        Returns:
            Orders ordered ascending by creation time

        Raises:
            OrderStoreError: When the order store cannot be queried
        """
        pass

    @abstractmethod
    async def ping(self) -> None:
        """
        Check that the order store answers requests.

        Raises:
            OrderStoreError: When the order store is unreachable
        """
        pass
