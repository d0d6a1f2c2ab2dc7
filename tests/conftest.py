"""
Shared fixtures: fake geocoding and chat-completion providers served through
httpx.MockTransport, and a TestClient wired to them.
"""
import json
from types import SimpleNamespace

import httpx
import pytest
from fastapi.testclient import TestClient

from travel_lens.config.settings import AIProviderSettings, GeocodingSettings
from travel_lens.core.dependencies import get_model_gateway
from travel_lens.main import app
from travel_lens.services.ai_service import ModelGateway
from travel_lens.services.location_service import LocationResolver


def completion_body(content):
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


@pytest.fixture
def provider():
    """Fake chat-completion API. Set ``status_code``/``content``, or ``error`` to an httpx exception class."""
    state = SimpleNamespace(requests=[], status_code=200, content="mocked answer", error=None)

    def handler(request: httpx.Request) -> httpx.Response:
        state.requests.append(request)
        if state.error is not None:
            raise state.error("provider transport failure", request=request)
        if state.status_code != 200:
            return httpx.Response(
                state.status_code,
                json={"error": {"message": "Incorrect API key provided", "type": "invalid_request_error"}},
            )
        return httpx.Response(200, json=completion_body(state.content))

    state.transport = httpx.MockTransport(handler)
    state.payload = lambda i=-1: json.loads(state.requests[i].content)
    return state


@pytest.fixture
def geocoder():
    """Fake OpenCage API. Disabled (no api key) unless ``api_key`` is set."""
    state = SimpleNamespace(
        requests=[],
        api_key=None,
        status_code=200,
        results=[
            {
                "components": {
                    "country": "Taiwan",
                    "state": "Taipei",
                    "city": "Xinyi District",
                }
            }
        ],
    )

    def handler(request: httpx.Request) -> httpx.Response:
        state.requests.append(request)
        return httpx.Response(state.status_code, json={"results": state.results})

    state.transport = httpx.MockTransport(handler)
    return state


@pytest.fixture
def client(provider, geocoder):
    def gateway_override() -> ModelGateway:
        resolver = LocationResolver(
            GeocodingSettings(api_key=geocoder.api_key),
            transport=geocoder.transport,
        )
        return ModelGateway(
            resolver,
            AIProviderSettings(base_url="https://api.openai.com/v1"),
            transport=provider.transport,
        )

    app.dependency_overrides[get_model_gateway] = gateway_override
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def headers():
    return {"apiKey": "sk-test", "aiModel": "gpt-4.1-mini"}


@pytest.fixture
def menu_body():
    return {
        "text": "What is this?",
        "imageBase64": [],
        "category": "menu",
        "location": {"lat": 25.03, "lng": 121.56},
    }
