"""WorkOS User Management user operations."""
from __future__ import annotations
import threading
from typing import Any, Dict, Optional

from .client import Capability, WorkOSClient
from .exceptions import WorkOSAPIError
from .models import User

USERS_PATH = "/user_management/users"


class UserService:
    """Service for managing WorkOS users."""

    capability = Capability.CRUD

    def __init__(self, client: WorkOSClient):
        """Initialize user service.

        Args:
            client: Configured WorkOS client
        """
        self.client = client

    def create_user(
        self,
        email: str,
        *,
        email_verified: bool = False,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        password: Optional[str] = None,
        password_hash: Optional[str] = None,
        password_hash_type: Optional[str] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> User:
        """Create a user.

        Optional fields are only sent when set. Passwords are write-only and
        never come back in the response.

        Args:
            email: Email address
            email_verified: Mark the address as already verified
            first_name: Given name
            last_name: Family name
            password: Plain-text initial password
            password_hash: Pre-hashed password to import
            password_hash_type: Hash algorithm of password_hash (e.g. "bcrypt")
            cancel_event: Cancellation signal

        Returns:
            The created user
        """
        body: Dict[str, Any] = {"email": email, "email_verified": email_verified}
        if first_name:
            body["first_name"] = first_name
        if last_name:
            body["last_name"] = last_name
        if password:
            body["password"] = password
        if password_hash:
            body["password_hash"] = password_hash
            if password_hash_type:
                body["password_hash_type"] = password_hash_type
        data = self.client.post(USERS_PATH, body, cancel_event=cancel_event)
        return User.from_dict(data or {})

    def get_user(self, user_id: str, *, cancel_event: Optional[threading.Event] = None) -> User:
        data = self.client.get(f"{USERS_PATH}/{user_id}", cancel_event=cancel_event)
        return User.from_dict(data or {})

    def get_user_by_email(self, email: str, *, cancel_event: Optional[threading.Event] = None) -> User:
        """Return the user registered with ``email``.

        Raises:
            WorkOSAPIError: 404 when no user matches
        """
        data = self.client.get(USERS_PATH, params={"email": email}, cancel_event=cancel_event) or {}
        items = data.get("data") or []
        if not items:
            raise WorkOSAPIError(404, f"no user found with email {email}", endpoint=USERS_PATH)
        return User.from_dict(items[0])

    def update_user(
        self,
        user_id: str,
        changes: Dict[str, Any],
        *,
        cancel_event: Optional[threading.Event] = None,
    ) -> User:
        """Send a partial update. ``changes`` is passed through as the body."""
        data = self.client.put(f"{USERS_PATH}/{user_id}", changes, cancel_event=cancel_event)
        return User.from_dict(data or {})

    def delete_user(self, user_id: str, *, cancel_event: Optional[threading.Event] = None) -> None:
        self.client.delete(f"{USERS_PATH}/{user_id}", cancel_event=cancel_event)
