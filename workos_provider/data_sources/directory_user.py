"""workos_directory_user data source."""
from __future__ import annotations
import threading
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional

from ..core.state import string_or_null
from ..core.workos import DirectoryService, WorkOSError
from ..core.workos.models import format_timestamp
from .base import DataSource


@dataclass
class DirectoryUserDataModel:
    id: Optional[str] = None
    directory_id: Optional[str] = None
    email: Optional[str] = None
    organization_id: Optional[str] = None
    idp_id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    username: Optional[str] = None
    state: Optional[str] = None
    custom_attributes: Dict[str, Any] = field(default_factory=dict)
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class DirectoryUserDataSource(DataSource[DirectoryUserDataModel]):
    """Look up a synced user by ``id`` or by ``directory_id`` + ``email``."""

    type_name = "workos_directory_user"
    model = DirectoryUserDataModel
    entity_name = "Directory User"

    def read(
        self, config: DirectoryUserDataModel, *, cancel_event: Optional[threading.Event] = None
    ) -> DirectoryUserDataModel:
        service = DirectoryService(self.client)
        try:
            if config.id:
                lookup = f"id {config.id}"
                user = service.get_directory_user(config.id, cancel_event=cancel_event)
            elif config.directory_id and config.email:
                lookup = f"email {config.email} in directory {config.directory_id}"
                user = service.get_directory_user_by_email(
                    config.directory_id, config.email, cancel_event=cancel_event
                )
            else:
                raise self._missing("Either 'id' or both 'directory_id' and 'email' must be specified.")
        except WorkOSError as err:
            raise self._lookup_failed(lookup, err) from err

        return replace(
            config,
            id=user.id,
            directory_id=string_or_null(user.directory_id),
            email=string_or_null(user.email),
            organization_id=string_or_null(user.organization_id),
            idp_id=string_or_null(user.idp_id),
            first_name=string_or_null(user.first_name),
            last_name=string_or_null(user.last_name),
            username=string_or_null(user.username),
            state=string_or_null(user.state),
            custom_attributes=dict(user.custom_attributes),
            created_at=format_timestamp(user.created_at),
            updated_at=format_timestamp(user.updated_at),
        )
