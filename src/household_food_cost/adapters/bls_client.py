"""Bureau of Labor Statistics public API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

FOOD_AT_HOME_SERIES = "CUSR0000SAF11"
FOOD_AWAY_FROM_HOME_SERIES = "CUSR0000SEFV"


class BlsClient(Protocol):
    """Interface for BLS time series lookups."""

    async def fetch_series(
        self, series_ids: list[str], start_year: int, end_year: int
    ) -> dict[str, object]:
        """Fetch time series data and return the raw API payload."""


@dataclass
class HttpxBlsClient(BlsClient):
    """HTTPX-backed BLS client."""

    base_url: str
    http_client: httpx.AsyncClient
    api_key: str | None = None
    timeout_seconds: float = 15

    @classmethod
    def create(cls, base_url: str, api_key: str | None = None) -> "HttpxBlsClient":
        """Create a BLS client with a managed httpx session."""
        return cls(base_url=base_url, http_client=httpx.AsyncClient(), api_key=api_key)

    async def fetch_series(
        self, series_ids: list[str], start_year: int, end_year: int
    ) -> dict[str, object]:
        """Fetch series data with month-over-month and yearly percent changes."""
        payload: dict[str, object] = {
            "seriesid": series_ids,
            "startyear": str(start_year),
            "endyear": str(end_year),
            "calculations": True,
        }
        if self.api_key:
            payload["registrationkey"] = self.api_key
        response = await self.http_client.post(
            f"{self.base_url}/timeseries/data/",
            json=payload,
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
