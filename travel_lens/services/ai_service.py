"""
Model gateway: composes the multimodal chat request and relays it to an
OpenAI-compatible chat-completion API using the caller's own credentials.
"""

import logging
import httpx
from typing import Any, Dict, List, Optional, Sequence, Union

from travel_lens.config.settings import AIProviderSettings
from travel_lens.schemas.analyze import (
    AnalyzeResult,
    Category,
    Coordinates,
    ImagePart,
    ImageURL,
    ResolvedLocation,
    TextPart,
    UserContentPart,
    parse_chat_content,
)
from travel_lens.services.location_service import LocationResolver
from travel_lens.services.prompt_builder import build_prompts

logger = logging.getLogger(__name__)

JPEG_DATA_URL_PREFIX = "data:image/jpeg;base64,"


def to_data_url(base64: str) -> str:
    """
    Normalize a base64 image into a data URL.

    Strings that already start with ``data:`` are returned unchanged; raw
    base64 is assumed to be JPEG.
    """
    if not base64:
        return base64
    if base64.startswith("data:"):
        return base64
    return f"{JPEG_DATA_URL_PREFIX}{base64}"


def build_user_content(
    user_prompt: str,
    images: Sequence[str],
    detail: str = "auto",
) -> List[UserContentPart]:
    """Text part first, then one image part per non-empty image."""
    content: List[UserContentPart] = [TextPart(text=user_prompt)]
    for image in images:
        if not image:
            continue
        content.append(ImagePart(image_url=ImageURL(url=to_data_url(image), detail=detail)))
    return content


def build_messages(system_prompt: str, user_content: List[UserContentPart]) -> List[Dict[str, Any]]:
    return [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": [part.model_dump() for part in user_content]},
    ]


def extract_content_text(completion: Dict[str, Any]) -> str:
    """Plain text of the first choice, whether the provider sent a string or typed parts."""
    choices = completion.get("choices") or [{}]
    message = (choices[0] or {}).get("message") or {}
    return parse_chat_content(message.get("content")).as_text()


class ModelGateway:
    """Runs the analyze pipeline: geocode, build prompts, call the model."""

    def __init__(
        self,
        resolver: LocationResolver,
        settings: AIProviderSettings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.resolver = resolver
        self.settings = settings
        self.transport = transport

    @property
    def completions_url(self) -> str:
        return f"{self.settings.base_url.rstrip('/')}/chat/completions"

    async def create_chat_completion(
        self,
        api_key: str,
        model: str,
        messages: List[Dict[str, Any]],
    ) -> Dict[str, Any]:
        """
        POST one chat-completion request.

        Raises:
            httpx.HTTPStatusError: Provider answered with a non-2xx status
            httpx.RequestError: Provider could not be reached
        """
        headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }
        async with httpx.AsyncClient(transport=self.transport) as client:
            response = await client.post(
                self.completions_url,
                json={"model": model, "messages": messages},
                headers=headers,
            )
            response.raise_for_status()
            return response.json()

    async def analyze(
        self,
        api_key: str,
        model: str,
        text: str,
        image_base64: Sequence[str],
        category: Union[Category, str],
        location: Coordinates,
    ) -> AnalyzeResult:
        """
        Analyze a traveler's text and/or images in the context of their location.

        Args:
            api_key: Caller's model-provider API key
            model: Model identifier, e.g. ``gpt-4.1-mini``
            text: User question, may be empty when images are given
            image_base64: Raw base64 or data-URL images
            category: One of menu, supermarket, attraction
            location: Caller's coordinates

        Returns:
            AnalyzeResult with the prompt that was sent and the model's answer
        """
        location_info = await self.resolver.resolve(location.lat, location.lng)
        resolved = ResolvedLocation.combine(location_info, location)

        prompts = build_prompts(category, resolved, text)
        user_content = build_user_content(prompts.user, image_base64, self.settings.image_detail)
        messages = build_messages(prompts.system, user_content)

        logger.info(
            f"Sending chat completion: model={model} category={getattr(category, 'value', category)} images={len(user_content) - 1}"
        )
        completion = await self.create_chat_completion(api_key, model, messages)

        return AnalyzeResult(
            model=model,
            location=resolved,
            category=category,
            prompt_used=prompts.user,
            content=extract_content_text(completion),
        )
