"""
Abstract Base Class for Text Generation
Allows swapping between Google Gemini and AWS Bedrock as the explanation source
"""

from abc import ABC, abstractmethod


class TextGenerator(ABC):
    """
    Abstract base class for generative-text upstreams.
    Implementations send one prompt and return the raw text reply.
    """

    provider_name: str = "text generator"

    @abstractmethod
    async def generate_text(self, prompt: str) -> str:
        """
        Send a single prompt to the upstream model.

        Args:
            prompt: Complete natural-language prompt

        Returns:
            The model's raw text output (may be empty)

        Raises:
            UpstreamError: If the call itself fails
        """
        pass
