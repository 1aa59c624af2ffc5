from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, List, Optional, Sequence

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.domain.entities.errors import OrderStoreError  # noqa: E402
from src.domain.entities.orders import MonthlyObservation, OrderRecord  # noqa: E402
from src.domain.gateways.order_store_gateway import IOrderStoreGateway  # noqa: E402


def make_observation(
    year: int, month: int, total_sales: float, order_count: int = 10
) -> MonthlyObservation:
    return MonthlyObservation(
        month_key=f"{year:04d}-{month:02d}",
        year=year,
        month=month,
        total_sales=total_sales,
        order_count=order_count,
        average_order_value=total_sales / order_count if order_count else 0.0,
    )


def monthly_orders(
    start_year: int,
    start_month: int,
    monthly_totals: Sequence[float],
    orders_per_month: int = 1,
) -> List[OrderRecord]:
    """Spread each month's total evenly over ``orders_per_month`` orders."""
    records: List[OrderRecord] = []
    for offset, total in enumerate(monthly_totals):
        index = start_year * 12 + (start_month - 1) + offset
        year, month = index // 12, index % 12 + 1
        for day in range(orders_per_month):
            records.append(
                OrderRecord(
                    amount=total / orders_per_month,
                    occurred_at=datetime(year, month, day + 1, 12, tzinfo=timezone.utc),
                )
            )
    return records


class StubOrderStoreGateway(IOrderStoreGateway):
    def __init__(
        self,
        records: Optional[List[OrderRecord]] = None,
        error: Optional[OrderStoreError] = None,
    ):
        self.records = records or []
        self.error = error
        self.calls: List[dict] = []
        self.pings = 0

    async def fetch_orders(
        self, since: datetime, excluded_status: str = "Cancelled"
    ) -> List[OrderRecord]:
        self.calls.append({"since": since, "excluded_status": excluded_status})
        if self.error:
            raise self.error
        return list(self.records)

    async def ping(self) -> None:
        self.pings += 1
        if self.error:
            raise self.error


@pytest.fixture()
def observation_factory() -> Callable[..., MonthlyObservation]:
    return make_observation


@pytest.fixture()
def linear_sales_observations() -> List[MonthlyObservation]:
    """Twelve months with sales growing from 10,000 to 120,000."""
    return [
        make_observation(2024, month, 10_000.0 * month, order_count=40 * month)
        for month in range(1, 13)
    ]


@pytest.fixture()
def linear_sales_orders() -> List[OrderRecord]:
    return monthly_orders(
        2024, 1, [10_000.0 * step for step in range(1, 13)], orders_per_month=4
    )


@pytest.fixture()
def fixed_now() -> datetime:
    return datetime(2024, 12, 15, 9, 30, tzinfo=timezone.utc)


@pytest.fixture()
def orders_factory() -> Callable[..., List[OrderRecord]]:
    return monthly_orders


@pytest.fixture()
def gateway_factory() -> Callable[..., StubOrderStoreGateway]:
    return StubOrderStoreGateway
