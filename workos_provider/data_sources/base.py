"""Read-only lookups exposed to the host runtime."""
from __future__ import annotations
import threading
from typing import Generic, Optional, TypeVar

from ..core.workos import is_not_found
from ..resources.base import Configurable, ResourceError

M = TypeVar("M")


class DataSource(Configurable, Generic[M]):
    """Base class for data sources.

    ``read`` receives the configured lookup keys and returns the same model
    with every attribute filled in from the API.
    """

    model: type = object
    entity_name: str = ""

    def read(self, config: M, *, cancel_event: Optional[threading.Event] = None) -> M:
        raise NotImplementedError

    def _missing(self, detail: str) -> ResourceError:
        return ResourceError("Missing Required Attribute", detail)

    def _lookup_failed(self, lookup: str, err: BaseException) -> ResourceError:
        """Translate a failed lookup; not-found gets its own summary."""
        if is_not_found(err):
            return self._error(f"{self.entity_name} Not Found", f"No {self.entity_name.lower()} matches {lookup}", err)
        return self._error(f"Error Reading {self.entity_name}", f"Could not look up {self.entity_name.lower()} by {lookup}", err)
