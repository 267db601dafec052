# file: tests/conftest.py
import os

# Must be set before tradejournal.core.config is imported
os.environ["SQLITE_PATH"] = ":memory:"
os.environ.pop("AI_GATEWAY_API_KEY", None)
os.environ.pop("LOVABLE_API_KEY", None)

import httpx
import pytest
from fastapi.testclient import TestClient

from tradejournal.core.config import Settings
from tradejournal.services.analysis import (
    AnalysisService,
    GatewayConfig,
    OpenAICompatibleGateway,
    get_analysis_service,
)

VALID_TRADE = {
    "crypto_pair": "BTC/USDT",
    "entry_price": 50000,
    "stop_loss": 49000,
    "risk_percent": 1.5,
}


def completion_body(content="Tighten your stops on BTC.") -> dict:
    """Minimal chat completion payload as returned by the gateway."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "google/gemini-2.5-flash",
        "choices": [
            {
                "index": 0,
                "finish_reason": "stop",
                "message": {"role": "assistant", "content": content},
            }
        ],
    }


class RecordingTransport:
    """httpx handler that records requests and replies with a fixed response."""

    def __init__(self, status_code=200, json=None, text=None):
        self.status_code = status_code
        self.json = json
        self.text = text
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.json is not None:
            return httpx.Response(self.status_code, json=self.json)
        return httpx.Response(self.status_code, text=self.text or "")


@pytest.fixture
def make_gateway():
    """Build a real OpenAI-compatible gateway over a mocked HTTP transport."""

    def _make(transport: RecordingTransport) -> OpenAICompatibleGateway:
        config = GatewayConfig(api_key="test-key", base_url="https://gateway.test/v1")
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(transport))
        return OpenAICompatibleGateway(config, http_client=http_client)

    return _make


@pytest.fixture
def test_settings():
    return Settings(ai_gateway_api_key="test-key", ai_gateway_base_url="https://gateway.test/v1")


@pytest.fixture(scope="session")
def test_app_client():
    """One TestClient (and event loop) for the whole run; in-memory SQLite."""
    from tradejournal.main import app

    with TestClient(app) as client:
        yield client


@pytest.fixture
def override_analysis(make_gateway):
    """Point the analysis endpoint at a service with a mocked upstream."""
    from tradejournal.main import app

    def _override(transport: RecordingTransport) -> AnalysisService:
        service = AnalysisService(make_gateway(transport))
        app.dependency_overrides[get_analysis_service] = lambda: service
        return service

    yield _override
    app.dependency_overrides.pop(get_analysis_service, None)
