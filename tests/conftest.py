import json

import httpx
import pytest

from config.config import SearchConfig
from orchestrator.action_router import ActionRouter
from tools.web.google_search_client import GoogleSearchClient
from tools.web.page_extractor import PageExtractor

SEARCH_ENDPOINT = "https://search.test/customsearch/v1"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler):
        self.requests: list[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(recording_handler)


def html_responder(html: str, status_code: int = 200):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            status_code, text=html, headers={"content-type": "text/html; charset=utf-8"}
        )

    return handler


def json_responder(payload, status_code: int = 200):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload)

    return handler


def search_items(count: int) -> list[dict]:
    return [
        {
            "kind": "customsearch#result",
            "title": f"Result {i}",
            "link": f"https://example.com/{i}",
            "snippet": f"Snippet {i}",
        }
        for i in range(count)
    ]


def make_event(function: str, parameters: list[dict] | None = None, action_group: str = "web") -> dict:
    return {
        "messageVersion": "1.0",
        "actionGroup": action_group,
        "function": function,
        "parameters": parameters or [],
        "sessionId": "session-1",
    }


def decode_body(envelope: dict) -> dict:
    body = envelope["response"]["functionResponse"]["responseBody"]["TEXT"]["body"]
    return json.loads(body)


@pytest.fixture
def search_config():
    return SearchConfig(api_key="test-key", engine_id="test-cx", endpoint=SEARCH_ENDPOINT)


@pytest.fixture
def mock_env(monkeypatch):
    """Fixture to mock environment variables for testing."""
    env_vars = {
        "GOOGLE_SEARCH_KEY": "env-key",
        "GOOGLE_SEARCH_CX": "env-cx",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    monkeypatch.delenv("GOOGLE_SEARCH_ENDPOINT", raising=False)
    monkeypatch.delenv("HTTP_TIMEOUT_SECONDS", raising=False)
    monkeypatch.delenv("HTTP_USER_AGENT", raising=False)
    monkeypatch.delenv("SERVER_HOST", raising=False)
    monkeypatch.delenv("SERVER_PORT", raising=False)
    return env_vars


@pytest.fixture
def build_router(search_config):
    """
    Factory for an ActionRouter whose page and search upstreams are mocked.

    Returns (router, page_transport, search_transport) so tests can count calls.
    """

    def _build(page_handler=None, search_handler=None):
        page_transport = RecordingTransport(page_handler or html_responder("<html></html>"))
        search_transport = RecordingTransport(search_handler or json_responder({}))

        extractor = PageExtractor(
            user_agent="test-agent",
            http_client=httpx.AsyncClient(transport=page_transport),
        )
        search_client = GoogleSearchClient(
            config=search_config,
            http_client=httpx.AsyncClient(transport=search_transport),
        )
        return ActionRouter(extractor, search_client), page_transport, search_transport

    return _build
