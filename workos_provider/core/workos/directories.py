"""WorkOS Directory Sync lookups (directories, directory users and groups).

Directories are provisioned through the WorkOS Dashboard; everything here is a
read.
"""
from __future__ import annotations
import logging
import threading
from typing import List, Optional

from .client import Capability, WorkOSClient
from .exceptions import WorkOSAPIError
from .models import Directory, DirectoryGroup, DirectoryUser

logger = logging.getLogger(__name__)


class DirectoryService:
    """Read-only access to directories and their synced users and groups."""

    capability = Capability.READ_ONLY

    def __init__(self, client: WorkOSClient):
        """Initialize directory service.

        Args:
            client: Configured WorkOS client
        """
        self.client = client

    # ─────────────────────────────────────────────────────────────────────────
    # Directories
    # ─────────────────────────────────────────────────────────────────────────
    def get_directory(
        self, directory_id: str, *, cancel_event: Optional[threading.Event] = None
    ) -> Directory:
        data = self.client.get(f"/directories/{directory_id}", cancel_event=cancel_event)
        return Directory.from_dict(data or {})

    def list_directories(
        self, organization_id: str = "", *, cancel_event: Optional[threading.Event] = None
    ) -> List[Directory]:
        params = {"organization_id": organization_id} if organization_id else {}
        return [
            Directory.from_dict(item)
            for item in self.client.paginate("/directories", params, cancel_event=cancel_event)
        ]

    def get_directory_by_organization(
        self, organization_id: str, *, cancel_event: Optional[threading.Event] = None
    ) -> Directory:
        """Return the first directory of an organization.

        Raises:
            WorkOSAPIError: 404 when the organization has no directory
        """
        directories = self.list_directories(organization_id, cancel_event=cancel_event)
        if not directories:
            raise WorkOSAPIError(
                404, f"no directory found for organization {organization_id}", endpoint="/directories"
            )
        if len(directories) > 1:
            logger.info(f"Organization {organization_id} has {len(directories)} directories; using {directories[0].id}")
        return directories[0]

    # ─────────────────────────────────────────────────────────────────────────
    # Directory users
    # ─────────────────────────────────────────────────────────────────────────
    def list_directory_users(
        self,
        directory_id: str = "",
        *,
        group_id: str = "",
        cancel_event: Optional[threading.Event] = None,
    ) -> List[DirectoryUser]:
        params = {}
        if directory_id:
            params["directory"] = directory_id
        if group_id:
            params["group"] = group_id
        return [
            DirectoryUser.from_dict(item)
            for item in self.client.paginate("/directory_users", params, cancel_event=cancel_event)
        ]

    def get_directory_user(
        self, user_id: str, *, cancel_event: Optional[threading.Event] = None
    ) -> DirectoryUser:
        data = self.client.get(f"/directory_users/{user_id}", cancel_event=cancel_event)
        return DirectoryUser.from_dict(data or {})

    def get_directory_user_by_email(
        self,
        directory_id: str,
        email: str,
        *,
        cancel_event: Optional[threading.Event] = None,
    ) -> DirectoryUser:
        """Return the synced user with ``email`` in a directory.

        Raises:
            WorkOSAPIError: 404 when no user matches
        """
        data = self.client.get(
            "/directory_users",
            params={"directory": directory_id, "emails": email},
            cancel_event=cancel_event,
        ) or {}
        items = data.get("data") or []
        if not items:
            raise WorkOSAPIError(
                404, f"no directory user found with email {email}", endpoint="/directory_users"
            )
        return DirectoryUser.from_dict(items[0])

    # ─────────────────────────────────────────────────────────────────────────
    # Directory groups
    # ─────────────────────────────────────────────────────────────────────────
    def list_directory_groups(
        self,
        directory_id: str = "",
        *,
        user_id: str = "",
        cancel_event: Optional[threading.Event] = None,
    ) -> List[DirectoryGroup]:
        params = {}
        if directory_id:
            params["directory"] = directory_id
        if user_id:
            params["user"] = user_id
        return [
            DirectoryGroup.from_dict(item)
            for item in self.client.paginate("/directory_groups", params, cancel_event=cancel_event)
        ]

    def get_directory_group(
        self, group_id: str, *, cancel_event: Optional[threading.Event] = None
    ) -> DirectoryGroup:
        data = self.client.get(f"/directory_groups/{group_id}", cancel_event=cancel_event)
        return DirectoryGroup.from_dict(data or {})

    def get_directory_group_by_name(
        self,
        directory_id: str,
        name: str,
        *,
        cancel_event: Optional[threading.Event] = None,
    ) -> DirectoryGroup:
        """Search every page of a directory's groups for an exact name match.

        Raises:
            WorkOSAPIError: 404 when no group matches
        """
        for group in self.list_directory_groups(directory_id, cancel_event=cancel_event):
            if group.name == name:
                return group
        raise WorkOSAPIError(
            404, f"no directory group named {name} in directory {directory_id}", endpoint="/directory_groups"
        )
