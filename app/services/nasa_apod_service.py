"""
NASA APOD (Astronomy Picture of the Day) Service
Fetches daily astronomy images and descriptions via NASA API
"""

import logging
from datetime import date
from typing import Any

import httpx

from app.core.errors import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)

NASA_APOD_URL = "https://api.nasa.gov/planetary/apod"


class NASAAPODService:
    """
    Fetch NASA's Astronomy Picture of the Day.

    Every public method makes exactly one upstream request and returns the
    decoded JSON unmodified. Failures raise UpstreamError; the caller only
    ever sees a generic message.
    """

    def __init__(
        self,
        api_key: str | None,
        base_url: str = NASA_APOD_URL,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize NASA APOD service."""
        if not api_key:
            raise ConfigurationError("NASA API key not configured")

        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.transport = transport

    async def _get(self, params: dict[str, str]) -> Any:
        """Issue one GET against the APOD endpoint."""
        query = {"api_key": self.api_key, **params}

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(self.base_url, params=query)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"❌ NASA APOD returned {e.response.status_code} for {params or 'today'}: {e.response.text[:500]}"
            )
            raise UpstreamError("Failed to fetch NASA data") from e
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"❌ Error fetching NASA APOD for {params or 'today'}: {e}")
            raise UpstreamError("Failed to fetch NASA data") from e

    async def get_image_of_the_day(self) -> dict[str, Any]:
        """Fetch today's APOD (NASA decides what 'today' is)."""
        logger.info("🌌 Fetching NASA APOD for today")
        data = await self._get({})
        return self._expect_record(data)

    async def get_image_by_date(self, target_date: date) -> dict[str, Any]:
        """Fetch the APOD for one calendar date."""
        logger.info(f"🌌 Fetching NASA APOD for {target_date.isoformat()}")
        data = await self._get({"date": target_date.isoformat()})
        return self._expect_record(data)

    async def get_images_in_range(self, start_date: date, end_date: date) -> list[dict[str, Any]]:
        """
        Fetch every APOD between two dates, inclusive.

        NASA supports ranges natively, so this is one request regardless of
        the span. Order is whatever NASA returns (ascending by date).
        """
        logger.info(f"🌌 Fetching NASA APOD range {start_date.isoformat()} → {end_date.isoformat()}")
        data = await self._get(
            {"start_date": start_date.isoformat(), "end_date": end_date.isoformat()}
        )
        if not isinstance(data, list):
            logger.error(f"❌ NASA APOD range returned {type(data).__name__}, expected list")
            raise UpstreamError("Failed to fetch NASA data")
        return data

    @staticmethod
    def _expect_record(data: Any) -> dict[str, Any]:
        if not isinstance(data, dict):
            logger.error(f"❌ NASA APOD returned {type(data).__name__}, expected object")
            raise UpstreamError("Failed to fetch NASA data")
        return data
