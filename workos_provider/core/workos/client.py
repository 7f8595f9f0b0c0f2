"""Low-level HTTP client for the WorkOS API.

Handles authentication headers, rate-limit retries and error normalization.
Entity services (organizations.py, users.py, ...) sit on top of the verb
methods exposed here and never touch ``requests`` directly.
"""
from __future__ import annotations
import enum
import json
import logging
import random
import threading
import time
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any, Dict, Iterator, Optional

import requests

from workos_provider import __version__

from .exceptions import RequestCancelledError, WorkOSAPIError, WorkOSError, WorkOSTransportError
from .models import ListMetadata

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.workos.com"
REQUEST_TIMEOUT = 30

# Rate-limit handling: 429 responses are retried MAX_RETRIES times
MAX_RETRIES = 3
BASE_RETRY_DELAY = 1.0
MAX_RETRY_DELAY = 30.0

USER_AGENT = f"workos-provider-python/{__version__}"


class Capability(enum.Enum):
    """What an entity family supports on the current API generation."""

    CRUD = "crud"
    READ_ONLY = "read_only"


class WorkOSClient:
    """HTTP client for the WorkOS API with rate-limit retries.

    Features:
    - Bearer authentication on every request (the key is never logged)
    - Retry on HTTP 429 honouring ``Retry-After``, with capped exponential backoff
    - Centralized error handling into ``WorkOSAPIError``
    - Cooperative cancellation through a ``threading.Event``

    All attributes are set once in ``__init__``; a single instance can be
    shared between threads.

    Usage:
        client = WorkOSClient("sk_test_...")
        org = client.get("/organizations/org_123")
    """

    def __init__(
        self,
        api_key: str,
        client_id: str = "",
        base_url: Optional[str] = None,
        timeout: float = REQUEST_TIMEOUT,
    ):
        """Initialize WorkOS client.

        Args:
            api_key: WorkOS secret API key (``sk_...``)
            client_id: WorkOS client ID, needed by a few endpoints
            base_url: API base URL (defaults to the production endpoint)
            timeout: Per-request timeout in seconds

        Raises:
            ValueError: If api_key is empty
        """
        if not api_key:
            raise ValueError("api_key is required")
        self._api_key = api_key
        self.client_id = client_id or ""
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.timeout = timeout

    def __repr__(self) -> str:
        return f"WorkOSClient(base_url={self.base_url!r}, client_id={self.client_id!r}, api_key='***')"

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        }

    # ─────────────────────────────────────────────────────────────────────────
    # Request / retry
    # ─────────────────────────────────────────────────────────────────────────
    def send(
        self,
        method: str,
        path: str,
        body: Any = None,
        *,
        params: Optional[Dict[str, Any]] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> requests.Response:
        """Perform an HTTP request, retrying while the API answers 429.

        The body is serialized again for every attempt. When retries run out
        the last 429 response is returned as-is so it gets classified like any
        other HTTP error.

        Args:
            method: HTTP verb
            path: API path (e.g. "/organizations")
            body: JSON-serializable payload, or None
            params: Query parameters
            cancel_event: Set by the caller to abort the request

        Returns:
            Raw response object

        Raises:
            WorkOSError: If the body cannot be serialized
            WorkOSTransportError: On network failure
            RequestCancelledError: If cancel_event is set
        """
        url = f"{self.base_url}{path}"

        for attempt in range(MAX_RETRIES + 1):
            _check_cancelled(cancel_event, method, path)

            data = None
            if body is not None:
                data = _serialize(body)

            try:
                resp = requests.request(
                    method,
                    url,
                    params=params,
                    data=data,
                    headers=self._headers(),
                    timeout=self.timeout,
                )
            except requests.RequestException as exc:
                raise WorkOSTransportError(f"request failed: {method} {path}: {exc}") from exc

            logger.debug(f"{method} {path} -> HTTP {resp.status_code} (attempt {attempt + 1})")

            if resp.status_code != 429:
                return resp
            if attempt == MAX_RETRIES:
                return resp

            delay = self.calculate_retry_delay(resp, attempt)
            resp.close()
            logger.warning(
                f"Rate limited on {method} {path}; retrying in {delay:.2f}s "
                f"(retry {attempt + 1}/{MAX_RETRIES})"
            )
            _wait(delay, cancel_event, method, path)

        raise WorkOSError("max retries exceeded")  # pragma: no cover

    def calculate_retry_delay(self, resp: requests.Response, attempt: int) -> float:
        """Determine how long to wait before the next attempt, in seconds.

        ``Retry-After`` wins when present: an integer second count is honoured
        exactly, otherwise it is parsed as an HTTP date. Without it the delay is
        ``BASE_RETRY_DELAY * 2**attempt`` capped at ``MAX_RETRY_DELAY``, plus up
        to 25% jitter on top.
        """
        retry_after = (resp.headers.get("Retry-After") or "").strip()
        if retry_after:
            try:
                return float(max(0, int(retry_after)))
            except ValueError:
                pass
            try:
                when = parsedate_to_datetime(retry_after)
            except (TypeError, ValueError):
                when = None
            if when is not None:
                if when.tzinfo is None:
                    when = when.replace(tzinfo=timezone.utc)
                return max(0.0, (when - datetime.now(timezone.utc)).total_seconds())

        delay = min(BASE_RETRY_DELAY * (2 ** attempt), MAX_RETRY_DELAY)
        return delay + random.random() * (delay / 4)

    def parse_response(self, resp: requests.Response) -> Any:
        """Decode a response, raising ``WorkOSAPIError`` for any status >= 400.

        Returns:
            Decoded JSON, or None when the body is empty
        """
        try:
            content = resp.content or b""
        finally:
            resp.close()

        if resp.status_code >= 400:
            raise WorkOSAPIError.from_response_body(resp.status_code, content, endpoint=resp.url or "")

        if not content.strip():
            return None
        try:
            return json.loads(content)
        except ValueError as exc:
            raise WorkOSError(f"failed to decode response from {resp.url}: {exc}") from exc

    # ─────────────────────────────────────────────────────────────────────────
    # Verb helpers
    # ─────────────────────────────────────────────────────────────────────────
    def get(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        *,
        cancel_event: Optional[threading.Event] = None,
    ) -> Any:
        """Execute GET request and decode the response."""
        return self.parse_response(self.send("GET", path, params=params, cancel_event=cancel_event))

    def post(self, path: str, body: Any = None, *, cancel_event: Optional[threading.Event] = None) -> Any:
        """Execute POST request and decode the response."""
        return self.parse_response(self.send("POST", path, body, cancel_event=cancel_event))

    def put(self, path: str, body: Any = None, *, cancel_event: Optional[threading.Event] = None) -> Any:
        """Execute PUT request and decode the response."""
        return self.parse_response(self.send("PUT", path, body, cancel_event=cancel_event))

    def patch(self, path: str, body: Any = None, *, cancel_event: Optional[threading.Event] = None) -> Any:
        """Execute PATCH request and decode the response."""
        return self.parse_response(self.send("PATCH", path, body, cancel_event=cancel_event))

    def delete(self, path: str, *, cancel_event: Optional[threading.Event] = None) -> Any:
        """Execute DELETE request. Empty bodies are success."""
        return self.parse_response(self.send("DELETE", path, cancel_event=cancel_event))

    def paginate(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        *,
        limit: Optional[int] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> Iterator[dict]:
        """Yield every item of a list endpoint, following ``list_metadata.after``.

        Args:
            path: List endpoint path
            params: Filters sent with every page request
            limit: Page size requested from the API
            cancel_event: Set by the caller to abort between pages
        """
        query = dict(params or {})
        if limit:
            query["limit"] = limit
        while True:
            page = self.get(path, params=query, cancel_event=cancel_event) or {}
            for item in page.get("data") or []:
                yield item
            after = ListMetadata.from_dict(page.get("list_metadata")).after
            if not after or after == query.get("after"):
                return
            query["after"] = after


def _serialize(body: Any) -> bytes:
    try:
        return json.dumps(body, separators=(",", ":")).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise WorkOSError(f"failed to marshal request body: {exc}") from exc


def _check_cancelled(cancel_event: Optional[threading.Event], method: str, path: str) -> None:
    if cancel_event is not None and cancel_event.is_set():
        raise RequestCancelledError(f"request cancelled: {method} {path}")


def _wait(delay: float, cancel_event: Optional[threading.Event], method: str, path: str) -> None:
    """Sleep for ``delay`` seconds, returning early if the caller cancels."""
    if cancel_event is None:
        time.sleep(delay)
        return
    if cancel_event.wait(delay):
        raise RequestCancelledError(f"request cancelled while waiting to retry: {method} {path}")
