from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from src.domain.entities.orders import OrderRecord
from src.domain.services.aggregation import aggregate_monthly, parse_order_timestamp


def test_aggregate_monthly_groups_by_calendar_month() -> None:
    records = [
        OrderRecord(amount=100.0, occurred_at="2024-01-05"),
        OrderRecord(amount=200.0, occurred_at="2024-01-20"),
        OrderRecord(amount=50.0, occurred_at="2024-02-01"),
    ]

    observations = aggregate_monthly(records)

    assert [obs.month_key for obs in observations] == ["2024-01", "2024-02"]
    january, february = observations
    assert january.total_sales == 300
    assert january.order_count == 2
    assert january.average_order_value == 150
    assert january.year == 2024
    assert february.total_sales == 50
    assert february.order_count == 1
    assert february.average_order_value == 50


def test_aggregate_monthly_skips_unparseable_timestamps() -> None:
    records = [
        OrderRecord(amount=10.0, occurred_at="not-a-date"),
        OrderRecord(amount=20.0, occurred_at=None),
        OrderRecord(amount=30.0, occurred_at=""),
        OrderRecord(amount=40.0, occurred_at="2024-03-10T08:00:00Z"),
    ]

    observations = aggregate_monthly(records)

    assert len(observations) == 1
    assert observations[0].month_key == "2024-03"
    assert observations[0].total_sales == 40
    assert observations[0].order_count == 1


def test_aggregate_monthly_sorts_and_leaves_gaps() -> None:
    records = [
        OrderRecord(amount=5.0, occurred_at="2024-03-02T00:00:00Z"),
        OrderRecord(amount=7.0, occurred_at="2023-12-31T10:00:00Z"),
        OrderRecord(amount=1.0, occurred_at="2024-01-15T00:00:00Z"),
    ]

    observations = aggregate_monthly(records)

    assert [obs.month_key for obs in observations] == [
        "2023-12",
        "2024-01",
        "2024-03",
    ]


def test_aggregate_monthly_buckets_in_utc() -> None:
    local = timezone(timedelta(hours=8))
    records = [
        OrderRecord(amount=10.0, occurred_at="2024-02-01T02:00:00+08:00"),
        OrderRecord(amount=10.0, occurred_at=datetime(2024, 2, 1, 2, tzinfo=local)),
        OrderRecord(amount=10.0, occurred_at=datetime(2024, 2, 1, 2)),
    ]

    observations = aggregate_monthly(records)

    assert [(obs.month_key, obs.order_count) for obs in observations] == [
        ("2024-01", 2),
        ("2024-02", 1),
    ]


def test_aggregate_monthly_zero_amounts_keep_zero_average() -> None:
    records = [
        OrderRecord(amount=0.0, occurred_at="2024-05-01"),
        OrderRecord(amount=0.0, occurred_at="2024-05-02"),
    ]

    observations = aggregate_monthly(records)

    assert observations[0].total_sales == 0
    assert observations[0].average_order_value == 0


def test_aggregate_monthly_empty_input() -> None:
    assert aggregate_monthly([]) == []


@pytest.mark.parametrize(
    "value",
    ["", "   ", "2024-13-01", "yesterday", 12345, None],
)
def test_parse_order_timestamp_rejects_invalid_values(value) -> None:
    assert parse_order_timestamp(value) is None


def test_parse_order_timestamp_accepts_postgres_format() -> None:
    parsed = parse_order_timestamp("2024-06-30T23:59:59.123456+00:00")

    assert parsed == datetime(2024, 6, 30, 23, 59, 59, 123456, tzinfo=timezone.utc)
