"""
AI analysis endpoint.

POST /api/ai/analyze
    Headers:
        apiKey: the caller's own model-provider key
        aiModel: model identifier, e.g. gpt-4.1-mini
    Body:
        text: string
        imageBase64: string[]
        category: "menu" | "supermarket" | "attraction"
        location: { lat: number, lng: number }
"""

from fastapi import APIRouter, Depends, Header, Request
from typing import Any, Optional
import json
import logging

from travel_lens.core.dependencies import get_model_gateway, get_request_id
from travel_lens.core.validation import validate_analyze_body, validate_credentials
from travel_lens.schemas.analyze import AnalyzeResult
from travel_lens.schemas.base import ErrorResponse, Message
from travel_lens.services.ai_service import ModelGateway

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ai", tags=["ai"])


async def read_json_body(request: Request) -> Any:
    """Decoded JSON body, or None when there is no usable body."""
    raw = await request.body()
    if not raw.strip():
        return None
    try:
        return json.loads(raw)
    except ValueError:
        return None


@router.post(
    "/analyze",
    response_model=AnalyzeResult,
    response_model_by_alias=True,
    response_model_exclude_none=True,
    responses={
        400: {"model": Message, "description": "Missing header, body or invalid field"},
        502: {"model": ErrorResponse, "description": "Model provider rejected the request"},
        504: {"model": ErrorResponse, "description": "Model provider timed out"},
    },
)
async def analyze_content(
    request: Request,
    api_key: Optional[str] = Header(default=None, alias="apiKey"),
    ai_model: Optional[str] = Header(default=None, alias="aiModel"),
    gateway: ModelGateway = Depends(get_model_gateway),
    request_id: str = Depends(get_request_id),
) -> AnalyzeResult:
    """
    Analyze a menu, supermarket product or attraction for a traveler.

    Validation failures raise ClientInputError and are rendered as 400
    ``{"message": ...}`` before any outbound call is made. Provider errors
    propagate to the application error handlers.
    """
    api_key, ai_model = validate_credentials(api_key, ai_model)
    analyze_request = validate_analyze_body(await read_json_body(request))

    logger.info(
        f"Analyze request {request_id}: category={analyze_request.category.value} "
        f"images={len(analyze_request.image_base64)} model={ai_model}",
        extra={
            'request_id': request_id,
            'category': analyze_request.category.value,
            'image_count': len(analyze_request.image_base64),
            'ai_model': ai_model,
        }
    )

    return await gateway.analyze(
        api_key=api_key,
        model=ai_model,
        text=analyze_request.text,
        image_base64=analyze_request.image_base64,
        category=analyze_request.category,
        location=analyze_request.location,
    )
