"""workos_directory_group data source."""
from __future__ import annotations
import threading
from dataclasses import dataclass, replace
from typing import Optional

from ..core.state import string_or_null
from ..core.workos import DirectoryService, WorkOSError
from ..core.workos.models import format_timestamp
from .base import DataSource


@dataclass
class DirectoryGroupDataModel:
    id: Optional[str] = None
    directory_id: Optional[str] = None
    name: Optional[str] = None
    organization_id: Optional[str] = None
    idp_id: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class DirectoryGroupDataSource(DataSource[DirectoryGroupDataModel]):
    """Look up a synced group by ``id`` or by ``directory_id`` + ``name``."""

    type_name = "workos_directory_group"
    model = DirectoryGroupDataModel
    entity_name = "Directory Group"

    def read(
        self, config: DirectoryGroupDataModel, *, cancel_event: Optional[threading.Event] = None
    ) -> DirectoryGroupDataModel:
        service = DirectoryService(self.client)
        try:
            if config.id:
                lookup = f"id {config.id}"
                group = service.get_directory_group(config.id, cancel_event=cancel_event)
            elif config.directory_id and config.name:
                lookup = f"name {config.name} in directory {config.directory_id}"
                group = service.get_directory_group_by_name(
                    config.directory_id, config.name, cancel_event=cancel_event
                )
            else:
                raise self._missing("Either 'id' or both 'directory_id' and 'name' must be specified.")
        except WorkOSError as err:
            raise self._lookup_failed(lookup, err) from err

        return replace(
            config,
            id=group.id,
            directory_id=string_or_null(group.directory_id),
            name=string_or_null(group.name),
            organization_id=string_or_null(group.organization_id),
            idp_id=string_or_null(group.idp_id),
            created_at=format_timestamp(group.created_at),
            updated_at=format_timestamp(group.updated_at),
        )
