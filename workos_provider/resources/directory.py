"""workos_directory resource (read-only)."""
from __future__ import annotations
import logging
import threading
from dataclasses import dataclass, replace
from typing import ClassVar, Optional, Tuple

from ..core.state import merge_preserved, string_or_null
from ..core.workos import DirectoryService, WorkOSError, is_not_found
from ..core.workos.models import format_timestamp
from .base import ImportResult, ReadOnlyResource

logger = logging.getLogger(__name__)


@dataclass
class DirectoryState:
    SENSITIVE_FIELDS: ClassVar[Tuple[str, ...]] = ("bearer_token",)

    id: Optional[str] = None
    organization_id: Optional[str] = None
    type: Optional[str] = None
    name: Optional[str] = None
    state: Optional[str] = None
    bearer_token: Optional[str] = None
    endpoint: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def __repr__(self) -> str:
        return (
            f"DirectoryState(id={self.id!r}, organization_id={self.organization_id!r}, "
            f"type={self.type!r}, name={self.name!r}, state={self.state!r})"
        )


class DirectoryResource(ReadOnlyResource[DirectoryState]):
    """Directory Sync directory tracked in state.

    The SCIM bearer token is only returned right after the directory is set
    up, so a previously stored token survives reads that omit it.
    """

    type_name = "workos_directory"
    entity_label = "directories"
    entity_title = "Directories"
    requires_replace = ("organization_id", "type")

    @property
    def service(self) -> DirectoryService:
        return DirectoryService(self.client)

    def read(
        self, state: DirectoryState, *, cancel_event: Optional[threading.Event] = None
    ) -> Optional[DirectoryState]:
        try:
            directory = self.service.get_directory(state.id, cancel_event=cancel_event)
        except WorkOSError as err:
            if is_not_found(err):
                logger.info(f"Directory {state.id} no longer exists; removing from state")
                return None
            raise self._error("Error Reading Directory", f"Could not read directory {state.id}", err) from err

        return replace(
            state,
            organization_id=string_or_null(directory.organization_id),
            type=string_or_null(directory.type),
            name=string_or_null(directory.name),
            state=string_or_null(directory.state),
            bearer_token=merge_preserved(directory.bearer_token, state.bearer_token),
            endpoint=string_or_null(directory.endpoint),
            created_at=format_timestamp(directory.created_at),
            updated_at=format_timestamp(directory.updated_at),
        )

    def import_state(
        self, import_id: str, *, cancel_event: Optional[threading.Event] = None
    ) -> ImportResult[DirectoryState]:
        return ImportResult(DirectoryState(id=import_id))
