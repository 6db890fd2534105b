"""
AWS Bedrock text generation (Claude via invoke_model).
"""

import asyncio
import json
import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from app.core.errors import ConfigurationError, UpstreamError
from app.services.text_generator_base import TextGenerator

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are an expert astronomy educator who explains complex astronomical "
    "concepts in an accessible way."
)


class BedrockService(TextGenerator):
    """Generate text with a Claude model hosted on AWS Bedrock."""

    provider_name = "Bedrock"

    def __init__(
        self,
        model_id: str,
        region_name: str,
        aws_access_key_id: str | None,
        aws_secret_access_key: str | None,
        max_tokens: int = 1024,
    ) -> None:
        """Initialize Bedrock client."""
        if not (aws_access_key_id and aws_secret_access_key):
            raise ConfigurationError("Bedrock credentials not configured")

        self.model_id = model_id
        self.max_tokens = max_tokens
        self.bedrock_runtime = boto3.client(
            "bedrock-runtime",
            region_name=region_name,
            aws_access_key_id=aws_access_key_id,
            aws_secret_access_key=aws_secret_access_key,
        )

    def _invoke(self, prompt: str) -> str:
        response = self.bedrock_runtime.invoke_model(
            modelId=self.model_id,
            body=json.dumps(
                {
                    "anthropic_version": "bedrock-2023-05-31",
                    "max_tokens": self.max_tokens,
                    "temperature": 0.7,
                    "system": SYSTEM_PROMPT,
                    "messages": [{"role": "user", "content": prompt}],
                }
            ),
        )

        response_body = json.loads(response["body"].read())
        content = response_body.get("content") or []
        return "".join(block.get("text", "") for block in content if block.get("type") == "text")

    async def generate_text(self, prompt: str) -> str:
        # boto3 is blocking; keep the event loop free while Bedrock works
        try:
            return await asyncio.to_thread(self._invoke, prompt)
        except (ClientError, BotoCoreError, json.JSONDecodeError, KeyError, AttributeError, TypeError) as e:
            logger.error(f"❌ Bedrock call failed ({self.model_id}): {e}")
            raise UpstreamError("Bedrock request failed") from e
