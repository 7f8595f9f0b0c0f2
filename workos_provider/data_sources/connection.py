"""workos_connection data source."""
from __future__ import annotations
import logging
import threading
from dataclasses import dataclass, replace
from typing import Optional

from ..core.state import string_or_null
from ..core.workos import ConnectionService, WorkOSError
from ..core.workos.models import CONNECTION_TYPES, format_timestamp
from .base import DataSource

logger = logging.getLogger(__name__)


@dataclass
class ConnectionDataModel:
    id: Optional[str] = None
    organization_id: Optional[str] = None
    connection_type: Optional[str] = None
    name: Optional[str] = None
    state: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class ConnectionDataSource(DataSource[ConnectionDataModel]):
    """Look up an SSO connection by ``id`` or by ``organization_id`` + ``connection_type``."""

    type_name = "workos_connection"
    model = ConnectionDataModel
    entity_name = "Connection"

    def read(
        self, config: ConnectionDataModel, *, cancel_event: Optional[threading.Event] = None
    ) -> ConnectionDataModel:
        service = ConnectionService(self.client)
        try:
            if config.id:
                lookup = f"id {config.id}"
                connection = service.get_connection(config.id, cancel_event=cancel_event)
            elif config.organization_id and config.connection_type:
                if config.connection_type not in CONNECTION_TYPES:
                    logger.info(f"Connection type {config.connection_type} is not a well-known type; looking it up as-is")
                lookup = f"organization {config.organization_id} and type {config.connection_type}"
                connection = service.get_connection_by_organization_and_type(
                    config.organization_id, config.connection_type, cancel_event=cancel_event
                )
            else:
                raise self._missing(
                    "Either 'id' or both 'organization_id' and 'connection_type' must be specified."
                )
        except WorkOSError as err:
            raise self._lookup_failed(lookup, err) from err

        return replace(
            config,
            id=connection.id,
            organization_id=string_or_null(connection.organization_id),
            connection_type=string_or_null(connection.connection_type),
            name=string_or_null(connection.name),
            state=string_or_null(connection.state),
            status=string_or_null(connection.status),
            created_at=format_timestamp(connection.created_at),
            updated_at=format_timestamp(connection.updated_at),
        )
