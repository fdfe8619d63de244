"""Thin async wrapper around the google-genai client.

The generation service depends only on ``generate``; tests swap in any object
with the same coroutine.
"""
from typing import Any, Optional
import logging

from google import genai
from google.genai import types

from app.core.config import settings as default_settings

logger = logging.getLogger(__name__)


class GeminiClient:
    def __init__(self, api_key: str, timeout_seconds: Optional[float] = None):
        http_options = None
        if timeout_seconds:
            # HttpOptions.timeout is in milliseconds
            http_options = types.HttpOptions(timeout=int(timeout_seconds * 1000))
        self._client = genai.Client(api_key=api_key, http_options=http_options)

    async def generate(
        self,
        *,
        model: str,
        contents: str,
        system_instruction: Optional[str] = None,
        response_mime_type: Optional[str] = None,
        response_schema: Optional[Any] = None,
        inline_data: Optional[bytes] = None,
        inline_mime_type: Optional[str] = None,
    ) -> str:
        """Send one request and return the response text ('' if the model sent nothing)."""
        parts: Any = contents
        if inline_data is not None:
            parts = [
                types.Part.from_bytes(data=inline_data, mime_type=inline_mime_type),
                contents,
            ]

        config = types.GenerateContentConfig(
            system_instruction=system_instruction,
            response_mime_type=response_mime_type,
            response_schema=response_schema,
        )
        response = await self._client.aio.models.generate_content(
            model=model,
            contents=parts,
            config=config,
        )
        return response.text or ""


def build_gemini_client(settings=default_settings) -> GeminiClient:
    if not settings.GEMINI_API_KEY:
        logger.warning("GEMINI_API_KEY is not set; model calls will be rejected by the provider")
    return GeminiClient(api_key=settings.GEMINI_API_KEY, timeout_seconds=settings.GEMINI_TIMEOUT_SECONDS)
