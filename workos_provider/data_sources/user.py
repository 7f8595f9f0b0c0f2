"""workos_user data source."""
from __future__ import annotations
import threading
from dataclasses import dataclass, replace
from typing import Optional

from ..core.state import string_or_null
from ..core.workos import UserService, WorkOSError
from ..core.workos.models import format_timestamp
from .base import DataSource


@dataclass
class UserDataModel:
    id: Optional[str] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email_verified: Optional[bool] = None
    profile_picture_url: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class UserDataSource(DataSource[UserDataModel]):
    """Look up a user by ``id`` or ``email``."""

    type_name = "workos_user"
    model = UserDataModel
    entity_name = "User"

    def read(self, config: UserDataModel, *, cancel_event: Optional[threading.Event] = None) -> UserDataModel:
        service = UserService(self.client)
        try:
            if config.id:
                lookup = f"id {config.id}"
                user = service.get_user(config.id, cancel_event=cancel_event)
            elif config.email:
                lookup = f"email {config.email}"
                user = service.get_user_by_email(config.email, cancel_event=cancel_event)
            else:
                raise self._missing("Either 'id' or 'email' must be specified to look up a user.")
        except WorkOSError as err:
            raise self._lookup_failed(lookup, err) from err

        return replace(
            config,
            id=user.id,
            email=user.email,
            first_name=string_or_null(user.first_name),
            last_name=string_or_null(user.last_name),
            email_verified=user.email_verified,
            profile_picture_url=string_or_null(user.profile_picture_url),
            created_at=format_timestamp(user.created_at),
            updated_at=format_timestamp(user.updated_at),
        )
