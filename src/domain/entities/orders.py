"""Domain entities for order history and its monthly aggregation."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union


@dataclass(frozen=True, slots=True)
class OrderRecord:
    """A completed order as returned by the order store.

    ``occurred_at`` is kept as received; parsing happens during aggregation
    so that a single corrupt timestamp does not fail the whole request.
    """

    amount: float
    occurred_at: Optional[Union[datetime, str]]


@dataclass(frozen=True, slots=True)
class MonthlyObservation:
    """Sales totals for one calendar month that had at least one order."""

    month_key: str
    year: int
    month: int
    total_sales: float
    order_count: int
    average_order_value: float

    @property
    def month_index(self) -> int:
        """Zero-based calendar month (0 = January)."""
        return self.month - 1
