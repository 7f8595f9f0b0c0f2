"""workos_directory data source.

The SCIM bearer token is deliberately not part of the model.
"""
from __future__ import annotations
import threading
from dataclasses import dataclass, replace
from typing import Optional

from ..core.state import string_or_null
from ..core.workos import DirectoryService, WorkOSError
from ..core.workos.models import format_timestamp
from .base import DataSource


@dataclass
class DirectoryDataModel:
    id: Optional[str] = None
    organization_id: Optional[str] = None
    type: Optional[str] = None
    name: Optional[str] = None
    state: Optional[str] = None
    endpoint: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class DirectoryDataSource(DataSource[DirectoryDataModel]):
    """Look up a directory by ``id`` or by ``organization_id``."""

    type_name = "workos_directory"
    model = DirectoryDataModel
    entity_name = "Directory"

    def read(
        self, config: DirectoryDataModel, *, cancel_event: Optional[threading.Event] = None
    ) -> DirectoryDataModel:
        service = DirectoryService(self.client)
        try:
            if config.id:
                lookup = f"id {config.id}"
                directory = service.get_directory(config.id, cancel_event=cancel_event)
            elif config.organization_id:
                lookup = f"organization {config.organization_id}"
                directory = service.get_directory_by_organization(config.organization_id, cancel_event=cancel_event)
            else:
                raise self._missing("Either 'id' or 'organization_id' must be specified to look up a directory.")
        except WorkOSError as err:
            raise self._lookup_failed(lookup, err) from err

        return replace(
            config,
            id=directory.id,
            organization_id=string_or_null(directory.organization_id),
            type=string_or_null(directory.type),
            name=string_or_null(directory.name),
            state=string_or_null(directory.state),
            endpoint=string_or_null(directory.endpoint),
            created_at=format_timestamp(directory.created_at),
            updated_at=format_timestamp(directory.updated_at),
        )
