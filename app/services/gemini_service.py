"""
Google Gemini text generation via the google-genai SDK.
"""

import logging

from google import genai

from app.core.errors import ConfigurationError, UpstreamError
from app.services.text_generator_base import TextGenerator

logger = logging.getLogger(__name__)


class GeminiService(TextGenerator):
    """Generate text with a Gemini model."""

    provider_name = "Gemini"

    def __init__(self, api_key: str | None, model: str = "gemini-1.5-flash") -> None:
        """Initialize Gemini client."""
        if not api_key:
            raise ConfigurationError("Gemini API key not configured")

        self.model = model
        self.client = genai.Client(api_key=api_key)

    async def generate_text(self, prompt: str) -> str:
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
            )
        except Exception as e:
            logger.error(f"❌ Gemini call failed ({self.model}): {e}")
            raise UpstreamError("Gemini request failed") from e

        return response.text or ""
