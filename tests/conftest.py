"""Pytest shared fixtures: a scripted stand-in for the WorkOS API."""
import json
import pathlib
import sys
import threading
from typing import Optional
from urllib.parse import urlsplit

# Add project root to Python path
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from workos_provider.core.workos import WorkOSClient
from workos_provider.core.workos import client as client_module

API_KEY = "sk_test_a1b2c3d4e5"
BASE_URL = "https://api.workos.com"


class StubResponse:
    """Just enough of ``requests.Response`` for the transport layer."""

    def __init__(self, status_code: int = 200, payload=None, body: Optional[bytes] = None,
                 headers: Optional[dict] = None, url: str = ""):
        self.status_code = status_code
        if body is None:
            body = b"" if payload is None else json.dumps(payload).encode("utf-8")
        self.content = body
        self.headers = CaseInsensitiveDict(headers or {})
        self.url = url
        self.closed = False

    def close(self):
        self.closed = True


class RecordedCall:
    def __init__(self, method, url, params, data, headers):
        self.method = method
        self.url = url
        self.path = urlsplit(url).path
        self.params = dict(params or {})
        self.data = data
        self.headers = dict(headers or {})

    @property
    def json(self):
        return None if self.data is None else json.loads(self.data)

    def __repr__(self):
        return f"<{self.method} {self.path} {self.params}>"


class FakeWorkOSAPI:
    """Replacement for ``requests.request`` driven by queued responses.

    Responses are queued per ``(method, path)`` and consumed in order. A
    request with nothing queued fails the test.
    """

    def __init__(self):
        self.calls = []
        self._queues = {}
        self._errors = {}
        self._lock = threading.Lock()

    def add(self, method, path, status=200, payload=None, body=None, headers=None, times=1):
        for _ in range(times):
            self._queues.setdefault((method, path), []).append(
                dict(status_code=status, payload=payload, body=body, headers=headers)
            )
        return self

    def fail(self, method, path, exc):
        self._errors[(method, path)] = exc
        return self

    def calls_to(self, method, path):
        return [c for c in self.calls if c.method == method and c.path == path]

    def __call__(self, method, url, params=None, data=None, headers=None, timeout=None, **kwargs):
        call = RecordedCall(method, url, params, data, headers)
        with self._lock:
            self.calls.append(call)
            key = (method, call.path)
            if key in self._errors:
                raise self._errors[key]
            queue = self._queues.get(key)
            if not queue:
                raise AssertionError(f"Unexpected request: {method} {call.path} {call.params}")
            spec = queue.pop(0)
        return StubResponse(url=url, **spec)


# ─────────────────────────────────────────────────────────────────────────────
# Network Guard Rails
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture(autouse=True)
def fake_api(monkeypatch):
    """Every test talks to the fake; no request ever reaches the network."""
    api = FakeWorkOSAPI()
    monkeypatch.setattr(requests, "request", api)
    return api


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in ("WORKOS_API_KEY", "WORKOS_CLIENT_ID", "WORKOS_BASE_URL"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def sleeps(monkeypatch):
    """Record retry delays instead of sleeping."""
    recorded = []
    monkeypatch.setattr(client_module.time, "sleep", lambda seconds: recorded.append(seconds))
    return recorded


@pytest.fixture
def client():
    return WorkOSClient(API_KEY)


@pytest.fixture
def configured(client):
    """Factory: instantiate a resource or data source bound to the test client."""
    def _make(cls):
        handler = cls()
        handler.configure(client)
        return handler
    return _make
