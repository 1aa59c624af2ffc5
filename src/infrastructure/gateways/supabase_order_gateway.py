"""
Infrastructure Gateway - Supabase Order Store

This module reads the order history from the Supabase REST API
(PostgREST) of the e-commerce backend.
"""

import math
from datetime import datetime
from typing import Any, Dict, List

import httpx
import structlog

from src.domain.entities.errors import OrderStoreError
from src.domain.entities.orders import OrderRecord
from src.domain.gateways.order_store_gateway import IOrderStoreGateway

logger = structlog.get_logger(__name__)

DEFAULT_PAGE_SIZE = 1000


class SupabaseOrderGateway(IOrderStoreGateway):
    """Implementation of the order store gateway over PostgREST."""

    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        table: str = "orders",
        timeout: float = 30.0,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        """
        Initialize the Supabase order gateway.

        Args:
            base_url: Supabase project URL (e.g., "https://xyz.supabase.co")
            api_key: Service or anon key sent as ``apikey`` and bearer token
            table: Name of the orders table
            timeout: Request timeout in seconds
            page_size: Rows requested per page (``limit``)
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.table = table
        self.timeout = timeout
        self.page_size = max(1, page_size)

    @property
    def table_url(self) -> str:
        return f"{self.base_url}/rest/v1/{self.table}"

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["apikey"] = self.api_key
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def fetch_orders(
        self,
        since: datetime,
        excluded_status: str = "Cancelled",
    ) -> List[OrderRecord]:
        """Fetch orders created since ``since`` that are not ``excluded_status``.

        PostgREST caps each response at the server's ``max-rows``, which may
        be below ``page_size``, so pages are read until one comes back empty.
        """

        params = {
            "select": "amount,created_at",
            "created_at": f"gte.{since.isoformat()}",
            "order_status": f"neq.{excluded_status}",
            "order": "created_at.asc",
        }

        logger.info(
            "order_store.fetch",
            url=self.table_url,
            since=since.isoformat(),
            excluded_status=excluded_status,
            page_size=self.page_size,
        )

        rows: List[Any] = []
        pages = 0
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                while True:
                    page = await self._fetch_page(client, params, offset=len(rows))
                    if not page:
                        break
                    rows.extend(page)
                    pages += 1

        except httpx.HTTPStatusError as e:
            logger.error(
                "order_store.http_error",
                status_code=e.response.status_code,
                response_text=e.response.text,
                url=self.table_url,
                offset=len(rows),
            )
            raise OrderStoreError(
                f"Order store HTTP error {e.response.status_code}: {e.response.text}",
                details={"status_code": e.response.status_code},
            ) from e

        except httpx.RequestError as e:
            logger.error("order_store.request_error", error=str(e), url=self.table_url)
            raise OrderStoreError(f"Order store request failed: {str(e)}") from e

        except ValueError as e:
            logger.error("order_store.invalid_json", error=str(e), url=self.table_url)
            raise OrderStoreError(f"Order store returned invalid JSON: {e}") from e

        logger.debug("order_store.pages_read", pages=pages, rows=len(rows))
        return self._parse_orders(rows)

    async def _fetch_page(
        self, client: httpx.AsyncClient, params: Dict[str, str], offset: int
    ) -> List[Any]:
        response = await client.get(
            self.table_url,
            params={**params, "limit": str(self.page_size), "offset": str(offset)},
            headers=self._headers(),
        )
        response.raise_for_status()

        data = response.json()
        if not isinstance(data, list):
            logger.error(
                "order_store.unexpected_payload",
                payload_type=type(data).__name__,
                offset=offset,
            )
            raise OrderStoreError(
                "Order store returned an unexpected payload",
                details={"payload_type": type(data).__name__},
            )
        return data

    async def ping(self) -> None:
        """Run a one-row query against the orders table."""

        params = {"select": "created_at", "limit": "1"}
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(
                    self.table_url, params=params, headers=self._headers()
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise OrderStoreError(
                f"Order store HTTP error {e.response.status_code}",
                details={"status_code": e.response.status_code},
            ) from e
        except httpx.RequestError as e:
            raise OrderStoreError(f"Order store request failed: {str(e)}") from e

    def _parse_orders(self, rows: List[Any]) -> List[OrderRecord]:
        """Map PostgREST rows to order records.

        Timestamps are passed through untouched; amounts that are missing or
        not numeric count as zero.
        """

        records: List[OrderRecord] = []
        for row in rows:
            if not isinstance(row, dict):
                logger.warning("order_store.row_skipped", row=repr(row))
                continue
            records.append(
                OrderRecord(
                    amount=self._coerce_amount(row.get("amount")),
                    occurred_at=row.get("created_at"),
                )
            )

        logger.info("order_store.orders_parsed", count=len(records))
        return records

    @staticmethod
    def _coerce_amount(value: Any) -> float:
        try:
            amount = float(value)
        except (TypeError, ValueError):
            logger.warning("order_store.amount_conversion_failed", value=repr(value))
            return 0.0
        if math.isnan(amount) or math.isinf(amount):
            return 0.0
        return amount
