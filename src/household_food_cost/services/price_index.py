"""Price index lookups backed by the BLS consumer price index series."""

import asyncio
import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from household_food_cost.adapters.bls_client import (
    FOOD_AT_HOME_SERIES,
    FOOD_AWAY_FROM_HOME_SERIES,
    BlsClient,
)
from household_food_cost.domain.regions import PriceIndex, PriceIndices
from household_food_cost.errors import RefreshFailure
from household_food_cost.services.cache import Cache

_logger = logging.getLogger(__name__)

_SUCCESS_STATUS = "REQUEST_SUCCEEDED"

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


@dataclass
class PriceIndexService:
    """Fetch grocery and restaurant price indices with caching."""

    client: BlsClient
    cache: Cache
    ttl_seconds: int = 86400
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    async def fetch_latest(self, now: datetime | None = None) -> PriceIndices:
        """Return the latest food at home and food away from home indices."""
        fetched_at = now or datetime.now(tz=UTC)
        cache_key = f"bls:food:{fetched_at.year}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, PriceIndices):
            return cached

        payload = await self._call_with_retry(
            lambda: self.client.fetch_series(
                [FOOD_AT_HOME_SERIES, FOOD_AWAY_FROM_HOME_SERIES],
                start_year=fetched_at.year - 1,
                end_year=fetched_at.year,
            )
        )
        indices = parse_price_indices(payload, fetched_at)
        self.cache.set(cache_key, indices, ttl_seconds=self.ttl_seconds)
        _logger.info(
            "Fetched price indices: groceries=%s restaurant=%s",
            indices.groceries.base_value,
            indices.restaurant.base_value,
        )
        return indices

    async def _call_with_retry(
        self, func: "Callable[[], Awaitable[dict[str, object]]]"
    ) -> dict[str, object]:
        """Call an async function with a short retry."""
        attempt = 0
        while True:
            try:
                return await func()
            except Exception as exc:
                attempt += 1
                _logger.warning(
                    "Price index fetch failed (attempt %s/%s): %s",
                    attempt,
                    self.retry_attempts + 1,
                    exc,
                )
                if attempt > self.retry_attempts:
                    raise RefreshFailure("Price index fetch failed") from exc
                await asyncio.sleep(self.retry_delay_seconds)


def parse_price_indices(
    payload: dict[str, object], fetched_at: datetime
) -> PriceIndices:
    """Convert a BLS time series payload into price indices."""
    status = payload.get("status")
    if status != _SUCCESS_STATUS:
        raise RefreshFailure(f"BLS request failed with status {status!r}")
    results = payload.get("Results") or {}
    series_list = results.get("series", []) if isinstance(results, dict) else []
    by_id = {series.get("seriesID"): series for series in series_list}
    return PriceIndices(
        groceries=_parse_series(by_id.get(FOOD_AT_HOME_SERIES), fetched_at),
        restaurant=_parse_series(by_id.get(FOOD_AWAY_FROM_HOME_SERIES), fetched_at),
    )


def _parse_series(series: dict[str, object] | None, fetched_at: datetime) -> PriceIndex:
    """Build a price index from the newest observation in a series."""
    if not series:
        raise RefreshFailure("BLS response is missing a requested series")
    data = [row for row in series.get("data", []) if _is_monthly(row)]
    if not data:
        raise RefreshFailure(f"No observations for series {series.get('seriesID')}")
    data.sort(key=lambda row: (int(row["year"]), row["period"]), reverse=True)
    latest = data[0]
    base_value = float(latest["value"])

    pct_changes = (latest.get("calculations") or {}).get("pct_changes") or {}
    monthly_change = _as_float(pct_changes.get("1"))
    if monthly_change is None:
        monthly_change = _percent_change(base_value, data[1] if len(data) > 1 else None)
    yearly_change = _as_float(pct_changes.get("12"))
    if yearly_change is None:
        year_ago = next(
            (
                row
                for row in data
                if int(row["year"]) == int(latest["year"]) - 1
                and row["period"] == latest["period"]
            ),
            None,
        )
        yearly_change = _percent_change(base_value, year_ago)

    return PriceIndex(
        timestamp=fetched_at,
        base_value=base_value,
        monthly_change=monthly_change,
        year_over_year_change=yearly_change,
    )


def _is_monthly(row: dict[str, object]) -> bool:
    """Return True for monthly observations (M01-M12), skipping annual averages."""
    period = str(row.get("period", ""))
    return period.startswith("M") and period != "M13"


def _percent_change(current: float, previous_row: dict[str, object] | None) -> float:
    if previous_row is None:
        raise RefreshFailure("Not enough observations to compute a percent change")
    previous = float(previous_row["value"])
    return (current - previous) / previous * 100


def _as_float(value: object) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None
