"""
Input validation for the analyze endpoint.

Checks run in a fixed order and stop at the first failure, so a request
missing both headers is always reported as missing ``apiKey``.
"""
from typing import Any, Mapping, Optional, Tuple

from travel_lens.core.exceptions import ClientInputError, ErrorCode
from travel_lens.schemas.analyze import AnalyzeRequest, Category, Coordinates


MISSING_API_KEY = "Missing header: apiKey"
MISSING_AI_MODEL = "Missing header: aiModel"
MISSING_BODY = "Missing body"
MISSING_INPUT = "Either text or imageBase64 is required"
INVALID_LOCATION = "location with numeric lat and lng is required"
INVALID_CATEGORY = "Invalid category. Must be one of " + " | ".join(Category.values())


def validate_credentials(api_key: Optional[str], ai_model: Optional[str]) -> Tuple[str, str]:
    """
    Validate the caller-supplied provider credentials.

    Args:
        api_key: Value of the ``apiKey`` header
        ai_model: Value of the ``aiModel`` header

    Returns:
        The (api_key, ai_model) pair

    Raises:
        ClientInputError: If either header is missing or empty
    """
    if not api_key:
        raise ClientInputError(MISSING_API_KEY, ErrorCode.MISSING_HEADER)
    if not ai_model:
        raise ClientInputError(MISSING_AI_MODEL, ErrorCode.MISSING_HEADER)
    return api_key, ai_model


def is_number(value: Any) -> bool:
    # bool is an int subclass but never a coordinate
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_location(location: Any) -> Coordinates:
    if not isinstance(location, Mapping):
        raise ClientInputError(INVALID_LOCATION)

    lat, lng = location.get("lat"), location.get("lng")
    if not (is_number(lat) and is_number(lng)):
        raise ClientInputError(INVALID_LOCATION)

    return Coordinates(lat=lat, lng=lng)


def validate_category(category: Any) -> Category:
    if category not in Category.values():
        raise ClientInputError(INVALID_CATEGORY, ErrorCode.INVALID_CATEGORY)
    return Category(category)


def validate_analyze_body(body: Any) -> AnalyzeRequest:
    """
    Validate a decoded JSON body and build an AnalyzeRequest.

    Args:
        body: Decoded JSON body, or None when the request had none

    Returns:
        AnalyzeRequest with ``text`` and ``imageBase64`` normalized

    Raises:
        ClientInputError: On the first failed check
    """
    if not body or not isinstance(body, Mapping):
        raise ClientInputError(MISSING_BODY, ErrorCode.MISSING_BODY)

    text = body.get("text") or ""
    images = body.get("imageBase64") or []
    if not isinstance(text, str):
        text = str(text)
    if not isinstance(images, list):
        images = [images]

    if not text and not images:
        raise ClientInputError(MISSING_INPUT)

    location = validate_location(body.get("location"))
    category = validate_category(body.get("category"))

    return AnalyzeRequest(
        text=text,
        image_base64=["" if image is None else str(image) for image in images],
        category=category,
        location=location,
    )
