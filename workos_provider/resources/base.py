"""Lifecycle contract shared by every managed resource.

The host runtime drives a resource through ``configure`` then any of
``create`` / ``read`` / ``update`` / ``delete`` / ``import_state``. Handlers
translate WorkOS errors into ``ResourceError`` so the host only ever sees one
exception type, with the original error kept as ``__cause__``.
"""
from __future__ import annotations
import threading
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Generic, List, Optional, Tuple, TypeVar

from ..core.workos import ReadOnlyEntityError, WorkOSClient

S = TypeVar("S")


class ResourceError(Exception):
    """Error reported back to the host.

    Attributes:
        summary: Short category, e.g. "Error Reading Organization"
        detail: Full explanation, including the remote message and field names
    """

    def __init__(self, summary: str, detail: str = ""):
        self.summary = summary
        self.detail = detail
        super().__init__(f"{summary}: {detail}" if detail else summary)


@dataclass
class ImportResult(Generic[S]):
    """State seeded by an import, plus any warnings to show the operator."""

    state: S
    warnings: List[str] = field(default_factory=list)


def state_to_dict(state: Any, *, mask_sensitive: bool = False) -> Dict[str, Any]:
    """Flatten a state dataclass, optionally masking its sensitive fields."""
    sensitive = set(getattr(state, "SENSITIVE_FIELDS", ()))
    result = {}
    for item in fields(state):
        value = getattr(state, item.name)
        if mask_sensitive and item.name in sensitive and value is not None:
            value = "(sensitive)"
        result[item.name] = value
    return result


class Configurable:
    """Holds the shared client handed over by ``WorkOSProvider.configure``."""

    type_name: str = ""

    def __init__(self):
        self._client: Optional[WorkOSClient] = None

    def configure(self, client: Optional[WorkOSClient]) -> None:
        """Attach the provider's client. ``None`` is ignored (early host calls)."""
        if client is None:
            return
        self._client = client

    @property
    def client(self) -> WorkOSClient:
        if self._client is None:
            raise ResourceError(
                "Unconfigured Provider",
                f"{self.type_name} was used before the provider was configured. "
                "Ensure the provider block has a valid api_key.",
            )
        return self._client

    @staticmethod
    def _error(summary: str, message: str, err: BaseException) -> ResourceError:
        """Build a ResourceError whose detail carries the underlying error text."""
        return ResourceError(summary, f"{message}: {err}")


class Resource(Configurable, Generic[S]):
    """Base class for managed resources.

    Subclasses set ``type_name`` and ``requires_replace`` (attributes whose
    change forces destroy and re-create; the host consults it when planning).
    """

    requires_replace: Tuple[str, ...] = ()

    def create(self, plan: S, *, cancel_event: Optional[threading.Event] = None) -> S:
        raise NotImplementedError

    def read(self, state: S, *, cancel_event: Optional[threading.Event] = None) -> Optional[S]:
        """Refresh state from the API. Returns None when the remote object is gone."""
        raise NotImplementedError

    def update(self, plan: S, state: S, *, cancel_event: Optional[threading.Event] = None) -> S:
        raise NotImplementedError

    def delete(self, state: S, *, cancel_event: Optional[threading.Event] = None) -> None:
        raise NotImplementedError

    def import_state(
        self, import_id: str, *, cancel_event: Optional[threading.Event] = None
    ) -> ImportResult[S]:
        raise NotImplementedError


class ReadOnlyResource(Resource[S]):
    """Resource whose entity family can only be read through the API.

    Create, update and delete fail immediately without touching the network.
    """

    entity_label: str = ""
    entity_title: str = ""

    def _read_only(self, action: str) -> ResourceError:
        cause = ReadOnlyEntityError(f"{self.entity_label} cannot be {action} through the WorkOS API")
        err = ResourceError(
            f"{self.entity_title} Are Read-Only",
            f"{self.entity_title} cannot be {action} via the WorkOS API. "
            f"Manage them in the WorkOS Dashboard, then use import or the "
            f"{self.type_name} data source to reference them.",
        )
        err.__cause__ = cause
        return err

    def create(self, plan: S, *, cancel_event: Optional[threading.Event] = None) -> S:
        raise self._read_only("created")

    def update(self, plan: S, state: S, *, cancel_event: Optional[threading.Event] = None) -> S:
        raise self._read_only("updated")

    def delete(self, state: S, *, cancel_event: Optional[threading.Event] = None) -> None:
        raise self._read_only("deleted")
