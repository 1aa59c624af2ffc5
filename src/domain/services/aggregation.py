"""Domain service grouping order records into calendar-month observations."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, List, Optional, Tuple

import pandas as pd
import structlog

from src.domain.entities.orders import MonthlyObservation, OrderRecord

logger = structlog.get_logger(__name__)


def parse_order_timestamp(value: object) -> Optional[datetime]:
    """Return ``value`` as an aware UTC datetime, or None if it cannot be parsed.

    Naive timestamps are treated as UTC.
    """
    if isinstance(value, datetime):
        timestamp = value
    elif isinstance(value, str) and value.strip():
        try:
            timestamp = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None

    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=timezone.utc)
    return timestamp.astimezone(timezone.utc)


def _month_rows(records: Iterable[OrderRecord]) -> List[Tuple[int, int, float]]:
    rows: List[Tuple[int, int, float]] = []
    discarded = 0

    for record in records:
        timestamp = parse_order_timestamp(record.occurred_at)
        if timestamp is None:
            discarded += 1
            logger.warning(
                "aggregation.invalid_timestamp",
                occurred_at=repr(record.occurred_at),
            )
            continue
        rows.append((timestamp.year, timestamp.month, float(record.amount)))

    if discarded:
        logger.info("aggregation.records_discarded", count=discarded)
    return rows


def aggregate_monthly(records: Iterable[OrderRecord]) -> List[MonthlyObservation]:
    """Group orders into one observation per calendar month with orders.

    Months without orders are left out rather than reported as zero, and
    the result is sorted by month key.
    """
    rows = _month_rows(records)
    if not rows:
        return []

    frame = pd.DataFrame(rows, columns=["year", "month", "amount"])
    grouped = frame.groupby(["year", "month"], sort=True)["amount"].agg(
        ["sum", "size"]
    )

    observations: List[MonthlyObservation] = []
    for (year, month), row in grouped.iterrows():
        year, month = int(year), int(month)
        total_sales = float(row["sum"])
        order_count = int(row["size"])
        observations.append(
            MonthlyObservation(
                month_key=f"{year:04d}-{month:02d}",
                year=year,
                month=month,
                total_sales=total_sales,
                order_count=order_count,
                average_order_value=(
                    total_sales / order_count if order_count > 0 else 0.0
                ),
            )
        )

    logger.debug("aggregation.completed", months=len(observations))
    return observations
