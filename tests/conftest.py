"""Pytest configuration and fixtures."""

import json

import httpx
import pytest

import mcp_server
from services.raysurfer_api import RaysurferClient

TEST_API_KEY = "abc123456789xyz"


class FakeRaysurfer:
    """Records requests and answers them with a canned status and body."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.payload: dict = {}
        self.text: str | None = None
        self.error: Exception | None = None

    def respond(self, payload: dict | None = None, status_code: int = 200, text: str | None = None):
        self.payload = payload or {}
        self.status_code = status_code
        self.text = text

    def fail_with(self, error: Exception):
        self.error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last_body(self) -> dict:
        return json.loads(self.requests[-1].content)

    def client(self) -> RaysurferClient:
        return RaysurferClient(base_url="https://api.raysurfer.test", transport=httpx.MockTransport(self.handler))


@pytest.fixture
def api_key(monkeypatch) -> str:
    """Configure the API key for the duration of a test."""
    monkeypatch.setenv("RAYSURFER_API_KEY", TEST_API_KEY)
    return TEST_API_KEY


@pytest.fixture
def no_api_key(monkeypatch):
    monkeypatch.delenv("RAYSURFER_API_KEY", raising=False)


@pytest.fixture
def fake_api(monkeypatch) -> FakeRaysurfer:
    """Route the server's API client through an in-memory transport."""
    fake = FakeRaysurfer()
    monkeypatch.setattr(mcp_server, "_client", fake.client())
    return fake


@pytest.fixture
def search_payload() -> dict:
    """A search response with two matches, one with dependencies."""
    return {
        "matches": [
            {
                "code_block": {
                    "id": "cb-1",
                    "name": "csv_summary",
                    "description": "Summarize a CSV file",
                    "source": "import pandas as pd\n\ndef main(path):\n    return pd.read_csv(path).describe()",
                    "entrypoint": "main",
                    "language": "python",
                    "dependencies": {"pandas": "2.2.0", "numpy": "1.26.4"},
                },
                "combined_score": 0.91234,
                "vector_score": 0.8,
                "verdict_score": 0.95,
                "error_resilience": 0.7,
                "thumbs_up": 12,
                "thumbs_down": 1,
                "filename": "csv_summary.py",
                "language": "python",
            },
            {
                "code_block": {
                    "id": "cb-2",
                    "name": "parseCsv",
                    "description": "Parse CSV rows",
                    "source": "export function parseCsv(s) { return s.split('\\n'); }",
                    "entrypoint": "parseCsv",
                    "language": "typescript",
                    "dependencies": {},
                },
                "combined_score": 0.5,
                "vector_score": 0.45,
                "verdict_score": 0.6,
                "error_resilience": 0.3,
                "thumbs_up": 3,
                "thumbs_down": 2,
                "filename": "parse.ts",
                "language": "typescript",
            },
        ],
        "total_found": 240,
        "cache_hit": True,
    }
