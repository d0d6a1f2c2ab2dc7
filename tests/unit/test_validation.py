"""
Unit tests for analyze request validation order and messages.
"""
import pytest

from travel_lens.core.exceptions import ClientInputError, ErrorCode
from travel_lens.core.validation import (
    INVALID_CATEGORY,
    INVALID_LOCATION,
    MISSING_INPUT,
    validate_analyze_body,
    validate_credentials,
)
from travel_lens.schemas.analyze import Category


def body(**overrides):
    base = {
        "text": "What is this?",
        "imageBase64": [],
        "category": "menu",
        "location": {"lat": 25.03, "lng": 121.56},
    }
    base.update(overrides)
    return base


class TestCredentials:

    def test_valid(self):
        assert validate_credentials("sk-test", "gpt-4.1-mini") == ("sk-test", "gpt-4.1-mini")

    @pytest.mark.parametrize("api_key,ai_model,message", [
        (None, "gpt", "Missing header: apiKey"),
        ("", "gpt", "Missing header: apiKey"),
        (None, None, "Missing header: apiKey"),
        ("sk", None, "Missing header: aiModel"),
        ("sk", "", "Missing header: aiModel"),
    ])
    def test_missing(self, api_key, ai_model, message):
        with pytest.raises(ClientInputError) as exc_info:
            validate_credentials(api_key, ai_model)
        assert exc_info.value.message == message
        assert exc_info.value.status_code == 400
        assert exc_info.value.error_code == ErrorCode.MISSING_HEADER


class TestBody:

    @pytest.mark.parametrize("raw", [None, {}, [], "text", 42])
    def test_missing_body(self, raw):
        with pytest.raises(ClientInputError, match="Missing body"):
            validate_analyze_body(raw)

    def test_valid_body_is_normalized(self):
        request = validate_analyze_body(body(imageBase64=None))
        assert request.text == "What is this?"
        assert request.image_base64 == []
        assert request.category is Category.MENU
        assert (request.location.lat, request.location.lng) == (25.03, 121.56)

    def test_images_without_text(self):
        request = validate_analyze_body(body(text=None, imageBase64=["AAA"]))
        assert request.text == ""
        assert request.image_base64 == ["AAA"]

    def test_integer_coordinates_are_numeric(self):
        request = validate_analyze_body(body(location={"lat": 25, "lng": 121}))
        assert request.location.lat == 25.0

    @pytest.mark.parametrize("text,images", [("", []), (None, None), ("", None)])
    def test_text_or_images_required(self, text, images):
        with pytest.raises(ClientInputError) as exc_info:
            validate_analyze_body(body(text=text, imageBase64=images))
        assert exc_info.value.message == MISSING_INPUT

    @pytest.mark.parametrize("location", [
        None,
        "25.03,121.56",
        {"lat": 25.03},
        {"lng": 121.56},
        {"lat": "25.03", "lng": 121.56},
        {"lat": False, "lng": 121.56},
        {"lat": 25.03, "lng": None},
    ])
    def test_invalid_location(self, location):
        with pytest.raises(ClientInputError) as exc_info:
            validate_analyze_body(body(location=location))
        assert exc_info.value.message == INVALID_LOCATION

    @pytest.mark.parametrize("category", ["beach", "", None, "MENU", 1])
    def test_invalid_category(self, category):
        with pytest.raises(ClientInputError) as exc_info:
            validate_analyze_body(body(category=category))
        assert exc_info.value.message == "Invalid category. Must be one of menu | supermarket | attraction"
        assert exc_info.value.message == INVALID_CATEGORY

    def test_location_checked_before_category(self):
        with pytest.raises(ClientInputError) as exc_info:
            validate_analyze_body(body(location=None, category="beach"))
        assert exc_info.value.message == INVALID_LOCATION

    def test_input_checked_before_location(self):
        with pytest.raises(ClientInputError) as exc_info:
            validate_analyze_body(body(text="", location=None))
        assert exc_info.value.message == MISSING_INPUT
