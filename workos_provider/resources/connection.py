"""workos_connection resource (read-only)."""
from __future__ import annotations
import logging
import threading
from dataclasses import dataclass, replace
from typing import Optional

from ..core.state import string_or_null
from ..core.workos import ConnectionService, WorkOSError, is_not_found
from ..core.workos.models import format_timestamp
from .base import ImportResult, ReadOnlyResource

logger = logging.getLogger(__name__)


@dataclass
class ConnectionState:
    id: Optional[str] = None
    organization_id: Optional[str] = None
    connection_type: Optional[str] = None
    name: Optional[str] = None
    state: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class ConnectionResource(ReadOnlyResource[ConnectionState]):
    """SSO connection tracked in state. Manage it in the WorkOS Dashboard and import it."""

    type_name = "workos_connection"
    entity_label = "SSO connections"
    entity_title = "SSO Connections"
    requires_replace = ("organization_id", "connection_type")

    @property
    def service(self) -> ConnectionService:
        return ConnectionService(self.client)

    def read(
        self, state: ConnectionState, *, cancel_event: Optional[threading.Event] = None
    ) -> Optional[ConnectionState]:
        try:
            connection = self.service.get_connection(state.id, cancel_event=cancel_event)
        except WorkOSError as err:
            if is_not_found(err):
                logger.info(f"Connection {state.id} no longer exists; removing from state")
                return None
            raise self._error("Error Reading Connection", f"Could not read connection {state.id}", err) from err

        return replace(
            state,
            organization_id=string_or_null(connection.organization_id),
            connection_type=string_or_null(connection.connection_type),
            name=string_or_null(connection.name),
            state=string_or_null(connection.state),
            status=string_or_null(connection.status),
            created_at=format_timestamp(connection.created_at),
            updated_at=format_timestamp(connection.updated_at),
        )

    def import_state(
        self, import_id: str, *, cancel_event: Optional[threading.Event] = None
    ) -> ImportResult[ConnectionState]:
        return ImportResult(ConnectionState(id=import_id))
