"""workos_user resource."""
from __future__ import annotations
import logging
import threading
from dataclasses import dataclass, replace
from typing import Any, ClassVar, Dict, Optional, Tuple

from ..core.state import string_or_null
from ..core.validators import validate_email
from ..core.workos import UserService, WorkOSError, is_not_found
from ..core.workos.models import User, format_timestamp
from .base import ImportResult, Resource, ResourceError

logger = logging.getLogger(__name__)


@dataclass
class UserState:
    SENSITIVE_FIELDS: ClassVar[Tuple[str, ...]] = ("password", "password_hash")

    id: Optional[str] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email_verified: Optional[bool] = None
    password: Optional[str] = None
    password_hash: Optional[str] = None
    password_hash_type: Optional[str] = None
    profile_picture_url: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def __repr__(self) -> str:
        return (
            f"UserState(id={self.id!r}, email={self.email!r}, first_name={self.first_name!r}, "
            f"last_name={self.last_name!r}, email_verified={self.email_verified!r})"
        )


def _apply(base: UserState, user: User) -> UserState:
    # password fields are write-only and survive from base untouched
    return replace(
        base,
        id=user.id or base.id,
        email=user.email or base.email,
        first_name=string_or_null(user.first_name),
        last_name=string_or_null(user.last_name),
        email_verified=user.email_verified,
        profile_picture_url=string_or_null(user.profile_picture_url),
        created_at=format_timestamp(user.created_at),
        updated_at=format_timestamp(user.updated_at),
    )


class UserResource(Resource[UserState]):
    """Manages a WorkOS User Management user."""

    type_name = "workos_user"

    @property
    def service(self) -> UserService:
        return UserService(self.client)

    def create(self, plan: UserState, *, cancel_event: Optional[threading.Event] = None) -> UserState:
        try:
            email = validate_email(plan.email or "")
        except ValueError as err:
            raise ResourceError("Invalid Email", str(err)) from err

        logger.debug(f"Creating user {email}")
        try:
            user = self.service.create_user(
                email,
                email_verified=bool(plan.email_verified),
                first_name=plan.first_name,
                last_name=plan.last_name,
                password=plan.password,
                password_hash=plan.password_hash,
                password_hash_type=plan.password_hash_type,
                cancel_event=cancel_event,
            )
        except WorkOSError as err:
            raise self._error("Error Creating User", f"Could not create user {email}", err) from err

        logger.info(f"Created user {user.id}")
        return _apply(plan, user)

    def read(self, state: UserState, *, cancel_event: Optional[threading.Event] = None) -> Optional[UserState]:
        try:
            user = self.service.get_user(state.id, cancel_event=cancel_event)
        except WorkOSError as err:
            if is_not_found(err):
                logger.info(f"User {state.id} no longer exists; removing from state")
                return None
            raise self._error("Error Reading User", f"Could not read user {state.id}", err) from err
        return _apply(state, user)

    def update(
        self, plan: UserState, state: UserState, *, cancel_event: Optional[threading.Event] = None
    ) -> UserState:
        """Send the changed fields. ``email_verified`` is always included."""
        changes: Dict[str, Any] = {}
        if plan.email != state.email:
            try:
                changes["email"] = validate_email(plan.email or "")
            except ValueError as err:
                raise ResourceError("Invalid Email", str(err)) from err
        if plan.first_name != state.first_name:
            changes["first_name"] = plan.first_name or ""
        if plan.last_name != state.last_name:
            changes["last_name"] = plan.last_name or ""
        if plan.password and plan.password != state.password:
            changes["password"] = plan.password
        changes["email_verified"] = bool(plan.email_verified)

        logger.debug(f"Updating user {state.id} fields={sorted(k for k in changes if k != 'password')}")
        try:
            user = self.service.update_user(state.id, changes, cancel_event=cancel_event)
        except WorkOSError as err:
            raise self._error("Error Updating User", f"Could not update user {state.id}", err) from err

        logger.info(f"Updated user {state.id}")
        return replace(_apply(replace(plan, id=state.id), user), created_at=state.created_at)

    def delete(self, state: UserState, *, cancel_event: Optional[threading.Event] = None) -> None:
        try:
            self.service.delete_user(state.id, cancel_event=cancel_event)
        except WorkOSError as err:
            if is_not_found(err):
                logger.info(f"User {state.id} already deleted")
                return
            raise self._error("Error Deleting User", f"Could not delete user {state.id}", err) from err
        logger.info(f"Deleted user {state.id}")

    def import_state(
        self, import_id: str, *, cancel_event: Optional[threading.Event] = None
    ) -> ImportResult[UserState]:
        warning = (
            f"Imported user {import_id}: password and password_hash are write-only and "
            "cannot be read back. Configure them to avoid drift on the next plan."
        )
        logger.warning(warning)
        return ImportResult(UserState(id=import_id), [warning])
