"""WorkOS-specific exceptions and error classification.

Callers never compare status codes directly; they ask for the error kind
through the ``is_*`` predicates below so the status-to-kind mapping lives in
exactly one place (``WorkOSAPIError.kind``).
"""
from __future__ import annotations
import enum
import json
from dataclasses import dataclass
from typing import Iterator, List, Optional


class ErrorKind(enum.Enum):
    """Semantic error kinds an API error can unwrap to."""

    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    BAD_REQUEST = "bad_request"
    CONFLICT = "conflict"
    RATE_LIMITED = "rate_limited"
    INTERNAL_SERVER = "internal_server"
    OTHER = "other"


_DEFAULT_MESSAGES = {
    400: "The request was invalid or malformed",
    401: "Invalid API key or authentication failed",
    403: "Access denied to this resource",
    404: "The requested resource was not found",
    409: "The resource already exists or conflicts with existing data",
    422: "The request was well-formed but contained invalid data",
    429: "Rate limit exceeded, please retry later",
}


def default_message(status_code: int) -> str:
    """Human-readable fallback message for a status code bucket."""
    if status_code in _DEFAULT_MESSAGES:
        return _DEFAULT_MESSAGES[status_code]
    if status_code >= 500:
        return "WorkOS service encountered an internal error"
    return f"Unexpected error (HTTP {status_code})"


class WorkOSError(Exception):
    """Base exception for all WorkOS operations."""
    pass


class WorkOSTransportError(WorkOSError):
    """The request never produced an HTTP response (DNS, TLS, timeout...)."""
    pass


class RequestCancelledError(WorkOSError):
    """The caller's cancellation signal fired before the request resolved."""
    pass


class ReadOnlyEntityError(WorkOSError):
    """Mutation attempted on an entity family the API only exposes for reading."""
    pass


@dataclass
class FieldError:
    """Field-level validation failure reported by the API."""

    field: str
    code: str = ""
    message: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "FieldError":
        return cls(
            field=str(data.get("field") or ""),
            code=str(data.get("code") or ""),
            message=str(data.get("message") or ""),
        )


class WorkOSAPIError(WorkOSError):
    """HTTP error from the WorkOS API.

    Attributes:
        status_code: HTTP status code
        message: Error message from response (or a synthesized default)
        code: Semantic error code string, when the API supplies one
        errors: Field-level validation failures
        endpoint: API endpoint that failed
    """

    def __init__(
        self,
        status_code: int,
        message: str = "",
        code: str = "",
        errors: Optional[List[FieldError]] = None,
        endpoint: str = "",
    ):
        self.status_code = status_code
        self.message = message or default_message(status_code)
        self.code = code
        self.errors: List[FieldError] = list(errors or [])
        self.endpoint = endpoint
        super().__init__(self._render())

    @property
    def kind(self) -> ErrorKind:
        """Map the status code onto its semantic kind."""
        status = self.status_code
        if status == 404:
            return ErrorKind.NOT_FOUND
        if status == 401:
            return ErrorKind.UNAUTHORIZED
        if status == 403:
            return ErrorKind.FORBIDDEN
        if status == 400:
            return ErrorKind.BAD_REQUEST
        if status == 409:
            return ErrorKind.CONFLICT
        if status == 429:
            return ErrorKind.RATE_LIMITED
        if status >= 500:
            return ErrorKind.INTERNAL_SERVER
        return ErrorKind.OTHER

    @property
    def field_names(self) -> List[str]:
        return [err.field for err in self.errors if err.field]

    def _render(self) -> str:
        text = f"WorkOS API error (HTTP {self.status_code})"
        if self.code:
            text += f" [{self.code}]"
        if self.message:
            text += f": {self.message}"
        if self.errors:
            text += "\nValidation errors:"
            for err in self.errors:
                text += f"\n  - {err.field}"
                if err.code:
                    text += f" [{err.code}]"
                if err.message:
                    text += f": {err.message}"
        return text

    @classmethod
    def from_response_body(cls, status_code: int, body: bytes, endpoint: str = "") -> "WorkOSAPIError":
        """Build an error from a raw non-2xx response body.

        The body is decoded as ``{"message", "code", "errors": [...]}``. When it
        is not JSON the raw text becomes the message; when no message is present
        a default is synthesized from the status code.
        """
        message = ""
        code = ""
        errors: List[FieldError] = []
        if body:
            text = body.decode("utf-8", errors="replace")
            try:
                payload = json.loads(text)
            except ValueError:
                message = text
            else:
                if isinstance(payload, dict):
                    message = str(payload.get("message") or "")
                    code = str(payload.get("code") or "")
                    errors = [
                        FieldError.from_dict(item)
                        for item in payload.get("errors") or []
                        if isinstance(item, dict)
                    ]
                else:
                    message = text
        return cls(status_code, message, code, errors, endpoint)


# ─────────────────────────────────────────────────────────────────────────────
# Kind predicates
# ─────────────────────────────────────────────────────────────────────────────
def _iter_chain(err: Optional[BaseException]) -> Iterator[BaseException]:
    seen = set()
    while err is not None and id(err) not in seen:
        seen.add(id(err))
        yield err
        err = err.__cause__


def error_kind(err: Optional[BaseException]) -> Optional[ErrorKind]:
    """Return the kind of the first WorkOSAPIError in the exception chain."""
    for item in _iter_chain(err):
        if isinstance(item, WorkOSAPIError):
            return item.kind
    return None


def find_api_error(err: Optional[BaseException]) -> Optional[WorkOSAPIError]:
    for item in _iter_chain(err):
        if isinstance(item, WorkOSAPIError):
            return item
    return None


def is_not_found(err: Optional[BaseException]) -> bool:
    """True if the error indicates a resource was not found."""
    return error_kind(err) is ErrorKind.NOT_FOUND


def is_unauthorized(err: Optional[BaseException]) -> bool:
    """True if the error indicates an authentication failure."""
    return error_kind(err) is ErrorKind.UNAUTHORIZED


def is_forbidden(err: Optional[BaseException]) -> bool:
    """True if the error indicates an authorization failure."""
    return error_kind(err) is ErrorKind.FORBIDDEN


def is_bad_request(err: Optional[BaseException]) -> bool:
    return error_kind(err) is ErrorKind.BAD_REQUEST


def is_conflict(err: Optional[BaseException]) -> bool:
    return error_kind(err) is ErrorKind.CONFLICT


def is_rate_limited(err: Optional[BaseException]) -> bool:
    return error_kind(err) is ErrorKind.RATE_LIMITED


def is_internal_server_error(err: Optional[BaseException]) -> bool:
    return error_kind(err) is ErrorKind.INTERNAL_SERVER
