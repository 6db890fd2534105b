"""
HTTP client for the APOD Explorer gateways.
"""

import logging
from datetime import date
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from app.models.schemas import ExplanationRecord, ImageRecord

logger = logging.getLogger(__name__)


class GatewayRequestError(Exception):
    """Any non-success outcome of a gateway call."""


class GatewayClient:
    """Talks to /api/nasa, /api/explain and /api/summary."""

    def __init__(
        self,
        base_url: str,
        api_prefix: str = "/api",
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/") + api_prefix
        self.timeout = timeout
        self.transport = transport

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url, timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.request(method, path, **kwargs)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"❌ {method} {path} -> {e.response.status_code}: {e.response.text[:200]}")
            raise GatewayRequestError(f"{method} {path} failed with {e.response.status_code}") from e
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"❌ {method} {path} failed: {e}")
            raise GatewayRequestError(f"{method} {path} failed") from e

    async def get_images_in_range(self, start_date: date, end_date: date) -> list[ImageRecord]:
        """Fetch a date range; a single object response is treated as a one-item list."""
        data = await self._request(
            "GET",
            "/nasa",
            params={"start_date": start_date.isoformat(), "end_date": end_date.isoformat()},
        )
        items = data if isinstance(data, list) else [data]
        return [self._parse(ImageRecord, item) for item in items]

    async def get_image_of_the_day(self) -> ImageRecord:
        data = await self._request("GET", "/nasa")
        return self._parse(ImageRecord, data)

    async def get_image_by_date(self, target_date: date) -> ImageRecord:
        data = await self._request("GET", "/nasa", params={"date": target_date.isoformat()})
        return self._parse(ImageRecord, data)

    async def explain(self, image: ImageRecord) -> ExplanationRecord:
        data = await self._request("POST", "/explain", json={"image": image.to_wire()})
        return self._parse(ExplanationRecord, data)

    async def summarize(self, images: list[ImageRecord]) -> str:
        data = await self._request(
            "POST", "/summary", json={"images": [image.to_wire() for image in images]}
        )
        if not isinstance(data, dict) or not isinstance(data.get("summary"), str):
            raise GatewayRequestError("POST /summary returned an unexpected body")
        return data["summary"]

    @staticmethod
    def _parse(model: Any, data: Any) -> Any:
        try:
            return model.model_validate(data)
        except PydanticValidationError as e:
            logger.error(f"❌ Gateway returned an unexpected {model.__name__}: {e}")
            raise GatewayRequestError(f"Unexpected {model.__name__} payload") from e
