"""
AI-enhanced explanations for APOD images.
"""

import json
import logging
import re

from pydantic import ValidationError as PydanticValidationError

from app.core.config import Settings
from app.core.errors import UpstreamError
from app.models.schemas import (
    DegradedExplanation,
    ExplanationRecord,
    ExplanationResult,
    ImageRecord,
    ParsedExplanation,
)
from app.services.text_generator_base import TextGenerator

logger = logging.getLogger(__name__)

CODE_FENCE_RE = re.compile(r"```(?:json)?\n?")

DEFAULT_SUMMARY = "A fascinating collection of astronomical images from NASA."


def strip_code_fences(text: str) -> str:
    """Remove ```json / ``` fences the model may wrap around its JSON."""
    return CODE_FENCE_RE.sub("", text).strip()


def parse_explanation(text: str) -> ExplanationResult:
    """
    Parse model output into an ExplanationResult.

    Never raises: anything that is not a JSON object with the three expected
    fields comes back as DegradedExplanation carrying the raw text.
    """
    try:
        data = json.loads(strip_code_fences(text))
        record = ExplanationRecord.model_validate(data)
    except (ValueError, TypeError, RecursionError, PydanticValidationError) as e:
        logger.warning(f"⚠️  Explanation output was not valid JSON, using raw text: {e}")
        return DegradedExplanation(raw_text=text)

    return ParsedExplanation(record=record)


def build_text_generator(settings: Settings) -> TextGenerator:
    """Construct the configured explanation upstream. Raises ConfigurationError if unconfigured."""
    if settings.explanation_provider == "bedrock":
        from app.services.bedrock_service import BedrockService

        return BedrockService(
            model_id=settings.bedrock_model_id,
            region_name=settings.aws_region,
            aws_access_key_id=settings.aws_access_key_id,
            aws_secret_access_key=settings.aws_secret_access_key,
        )

    from app.services.gemini_service import GeminiService

    return GeminiService(api_key=settings.gemini_api_key, model=settings.gemini_model)


class ExplanationService:
    """Builds prompts, calls the text generator once, and normalizes its output."""

    def __init__(self, generator: TextGenerator) -> None:
        self.generator = generator

    async def explain_image(self, image: ImageRecord) -> ExplanationResult:
        """
        Generate a simplified explanation for one image.

        Exactly one upstream call. Malformed output degrades; a failed or
        empty call raises UpstreamError.
        """
        prompt = self._build_explain_prompt(image)

        try:
            content = await self.generator.generate_text(prompt)
        except UpstreamError as e:
            raise UpstreamError("Failed to generate explanation") from e

        if not content:
            logger.error(f"❌ Empty response from {self.generator.provider_name} for {image.date}")
            raise UpstreamError("Failed to generate explanation")

        result = parse_explanation(content)
        logger.info(f"✨ Explanation for {image.date} ({result.kind})")
        return result

    async def summarize_images(self, images: list[ImageRecord]) -> str:
        """Write a 2-3 sentence overview of a collection of images."""
        prompt = self._build_summary_prompt(images)

        try:
            content = await self.generator.generate_text(prompt)
        except UpstreamError as e:
            raise UpstreamError("Failed to generate image summary") from e

        return content.strip() or DEFAULT_SUMMARY

    def _build_explain_prompt(self, image: ImageRecord) -> str:
        """Build the explanation prompt for one image."""
        return f"""Analyze this NASA astronomy image and provide an enhanced explanation:

Title: {image.title}
Original NASA Explanation: {image.explanation}
Date: {image.date}

Please provide:
1. A simplified, engaging explanation suitable for general audiences
2. Key features visible in the image
3. Scientific context and significance

Format your response as a JSON object with the following structure:
{{
  "explanation": "simplified explanation here",
  "keyFeatures": ["feature1", "feature2", "feature3"],
  "scientificContext": "broader scientific context here"
}}

You are an expert astronomy educator who explains complex astronomical concepts in an accessible way. Always respond with valid JSON only, no additional text."""

    def _build_summary_prompt(self, images: list[ImageRecord]) -> str:
        titles = ", ".join(image.title for image in images)
        return f"""Create a brief summary of this collection of NASA astronomy images:
Images: {titles}

Provide a 2-3 sentence overview highlighting the diversity and significance of these astronomical observations.

You are an astronomy expert who creates engaging summaries of astronomical image collections. Respond with only the summary text, no additional formatting."""
