"""
Explanation gateway: AI-enhanced explanations and collection summaries.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from app.core.config import Settings, get_settings
from app.core.errors import ValidationError
from app.models.schemas import (
    ERROR_RESPONSES,
    ExplainRequest,
    ExplanationRecord,
    SummaryRequest,
    SummaryResponse,
)
from app.services import ExplanationService, build_text_generator

logger = logging.getLogger(__name__)

router = APIRouter(tags=["explain"], responses=ERROR_RESPONSES)


@router.post("/explain", response_model=ExplanationRecord, response_model_by_alias=True)
async def explain_image(
    request: ExplainRequest,
    settings: Annotated[Settings, Depends(get_settings)],
) -> ExplanationRecord:
    """
    Generate a simplified explanation for one APOD image.

    Returns `{explanation, keyFeatures, scientificContext}`. If the model's
    output is not valid JSON the raw text is returned as `explanation` with
    placeholder features and context.
    """
    if request.image is None:
        raise ValidationError("Image data is required")

    service = ExplanationService(build_text_generator(settings))
    result = await service.explain_image(request.image)

    return result.record


@router.post("/summary", response_model=SummaryResponse)
async def summarize_images(
    request: SummaryRequest,
    settings: Annotated[Settings, Depends(get_settings)],
) -> SummaryResponse:
    """Generate a short overview of a collection of APOD images."""
    if not request.images:
        raise ValidationError("At least one image is required")

    service = ExplanationService(build_text_generator(settings))
    summary = await service.summarize_images(request.images)

    return SummaryResponse(summary=summary)
