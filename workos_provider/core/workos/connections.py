"""WorkOS SSO connection lookups.

Connections are configured through the WorkOS Dashboard; the API only serves
reads, so this service defines no mutation methods.
"""
from __future__ import annotations
import threading
from typing import List, Optional

from .client import Capability, WorkOSClient
from .exceptions import WorkOSAPIError
from .models import Connection


class ConnectionService:
    """Read-only access to SSO connections."""

    capability = Capability.READ_ONLY

    def __init__(self, client: WorkOSClient):
        self.client = client

    def get_connection(
        self, connection_id: str, *, cancel_event: Optional[threading.Event] = None
    ) -> Connection:
        data = self.client.get(f"/connections/{connection_id}", cancel_event=cancel_event)
        return Connection.from_dict(data or {})

    def list_connections(
        self,
        organization_id: str = "",
        *,
        connection_type: str = "",
        cancel_event: Optional[threading.Event] = None,
    ) -> List[Connection]:
        """List connections, optionally filtered by organization and type."""
        params = {}
        if organization_id:
            params["organization_id"] = organization_id
        if connection_type:
            params["connection_type"] = connection_type
        return [
            Connection.from_dict(item)
            for item in self.client.paginate("/connections", params, cancel_event=cancel_event)
        ]

    def get_connection_by_organization_and_type(
        self,
        organization_id: str,
        connection_type: str,
        *,
        cancel_event: Optional[threading.Event] = None,
    ) -> Connection:
        """Return the organization's connection of the given type.

        Raises:
            WorkOSAPIError: 404 when the organization has no such connection
        """
        for connection in self.list_connections(
            organization_id, connection_type=connection_type, cancel_event=cancel_event
        ):
            if connection.connection_type == connection_type:
                return connection
        raise WorkOSAPIError(
            404,
            f"no {connection_type} connection found for organization {organization_id}",
            endpoint="/connections",
        )
