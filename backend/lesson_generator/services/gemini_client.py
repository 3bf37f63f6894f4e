"""
Gemini service - thin async wrapper around the google-genai client.
"""
import asyncio
import logging
from typing import Any, List, Optional

from google import genai
from google.genai import types

from lesson_generator.config import config
from lesson_generator.exceptions import ConfigurationError, GenerationError
from lesson_generator.utils.data_uri import to_data_uri

logger = logging.getLogger(__name__)


class GeminiService:
    """Service for structured-output and image requests against Gemini"""

    def __init__(self, api_key: Optional[str] = None):
        key = api_key or config.api_key
        if not key:
            raise ConfigurationError("GEMINI_API_KEY not set")
        self.client = genai.Client(api_key=key)
        self.text_model = config.text_model
        self.image_model = config.image_model

    async def generate_json(
        self,
        contents: Any,
        schema: types.Schema,
        system_instruction: Optional[str] = None,
    ) -> str:
        """
        Request a JSON reply constrained by a response schema.

        Args:
            contents: Prompt text or a list of content parts
            schema: Structured-output schema for the reply
            system_instruction: Optional system instruction text

        Returns:
            Raw JSON text of the reply

        Raises:
            GenerationError: if the model returns no text
        """
        response = await self.client.aio.models.generate_content(
            model=self.text_model,
            contents=contents,
            config=types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=schema,
                system_instruction=system_instruction,
            ),
        )

        text = response.text
        if not text:
            raise GenerationError("No response from Gemini")

        logger.debug(f"Gemini returned {len(text)} characters of JSON")
        return text

    async def generate_image(self, prompt: str) -> Optional[str]:
        """
        Generate one illustration and return it as a data URI.

        Returns:
            Data URI of the first inline image part, or None when the model
            returns no image or the request fails
        """
        try:
            response = await self.client.aio.models.generate_content(
                model=self.image_model,
                contents=[types.Part.from_text(text=prompt)],
            )

            for part in _response_parts(response):
                inline = part.inline_data
                if inline is not None and inline.data:
                    return to_data_uri(inline.mime_type or "image/png", inline.data)

            logger.warning("Image model returned no inline image")
        except Exception as e:
            logger.error(f"Image gen error: {e}")

        return None


def _response_parts(response) -> List[types.Part]:
    """Parts of the first candidate, empty when the reply has none"""
    candidates = getattr(response, 'candidates', None) or []
    if not candidates:
        return []
    content = candidates[0].content
    if content is None or not content.parts:
        return []
    return list(content.parts)


# One service per event loop; the aio connection pool is bound to the loop
# it was opened on, and async_to_sync closes its loop after every call.
_gemini_service: Optional[GeminiService] = None
_gemini_loop: Optional[asyncio.AbstractEventLoop] = None


def get_gemini_service() -> GeminiService:
    """Get or create the Gemini service for the running event loop"""
    global _gemini_service, _gemini_loop
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        loop = None

    if _gemini_service is None or _gemini_loop is not loop:
        if _gemini_service is not None:
            logger.debug("Event loop changed, creating a new Gemini client")
        _gemini_service = GeminiService()
        _gemini_loop = loop
    return _gemini_service
