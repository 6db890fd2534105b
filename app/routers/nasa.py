"""
Image fetch gateway: proxies NASA APOD so the API key stays on the server.
"""

import logging
from datetime import date
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query

from app.core.config import Settings, get_settings
from app.core.errors import ValidationError
from app.models.schemas import ERROR_RESPONSES
from app.services import NASAAPODService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/nasa", tags=["nasa"], responses=ERROR_RESPONSES)


@router.get("")
async def get_nasa_images(
    settings: Annotated[Settings, Depends(get_settings)],
    image_date: Annotated[date | None, Query(alias="date")] = None,
    start_date: date | None = None,
    end_date: date | None = None,
) -> Any:
    """
    Fetch APOD data.

    - `start_date` + `end_date`: every image in the inclusive range (list)
    - `date`: the image for that day (object)
    - neither: today's image (object)
    """
    service = NASAAPODService(
        api_key=settings.nasa_api_key,
        base_url=settings.nasa_api_url,
        timeout=settings.upstream_timeout,
    )

    if start_date and end_date:
        if start_date > end_date:
            raise ValidationError("start_date must not be after end_date")
        return await service.get_images_in_range(start_date, end_date)

    if image_date:
        return await service.get_image_by_date(image_date)

    return await service.get_image_of_the_day()
