"""WorkOS organization role operations.

Organization roles are addressed by ``(organization_id, slug)`` rather than by
their ID; the ID only appears in responses.
"""
from __future__ import annotations
import threading
from typing import Any, Dict, List, Optional

from .client import Capability, WorkOSClient
from .exceptions import WorkOSAPIError
from .models import OrganizationRole


def _roles_path(organization_id: str) -> str:
    return f"/authorization/organizations/{organization_id}/roles"


class RoleService:
    """Service for managing custom roles scoped to one organization."""

    capability = Capability.CRUD

    def __init__(self, client: WorkOSClient):
        """Initialize role service.

        Args:
            client: Configured WorkOS client
        """
        self.client = client

    def create_organization_role(
        self,
        organization_id: str,
        slug: str,
        name: str,
        description: Optional[str] = None,
        *,
        cancel_event: Optional[threading.Event] = None,
    ) -> OrganizationRole:
        """Create a custom role in an organization.

        Args:
            organization_id: Owning organization
            slug: Role slug (carries the ``org-`` prefix)
            name: Display name
            description: Optional description, omitted when empty
            cancel_event: Cancellation signal

        Returns:
            The created role
        """
        body: Dict[str, Any] = {"slug": slug, "name": name}
        if description:
            body["description"] = description
        data = self.client.post(_roles_path(organization_id), body, cancel_event=cancel_event)
        return OrganizationRole.from_dict(data or {}, organization_id)

    def get_organization_role(
        self,
        organization_id: str,
        slug: str,
        *,
        cancel_event: Optional[threading.Event] = None,
    ) -> OrganizationRole:
        data = self.client.get(f"{_roles_path(organization_id)}/{slug}", cancel_event=cancel_event)
        return OrganizationRole.from_dict(data or {}, organization_id)

    def list_organization_roles(
        self, organization_id: str, *, cancel_event: Optional[threading.Event] = None
    ) -> List[OrganizationRole]:
        """List every role visible to an organization (environment roles included)."""
        data = self.client.get(_roles_path(organization_id), cancel_event=cancel_event) or {}
        return [
            OrganizationRole.from_dict(item, organization_id)
            for item in data.get("data") or []
            if isinstance(item, dict)
        ]

    def get_organization_role_by_id(
        self,
        organization_id: str,
        role_id: str,
        *,
        cancel_event: Optional[threading.Event] = None,
    ) -> OrganizationRole:
        """Find a role by its ID within an organization.

        Raises:
            WorkOSAPIError: 404 when no role has that ID
        """
        for role in self.list_organization_roles(organization_id, cancel_event=cancel_event):
            if role.id == role_id:
                return role
        raise WorkOSAPIError(
            404,
            f"no role with id {role_id} in organization {organization_id}",
            endpoint=_roles_path(organization_id),
        )

    def update_organization_role(
        self,
        organization_id: str,
        slug: str,
        name: str,
        description: Optional[str] = None,
        *,
        cancel_event: Optional[threading.Event] = None,
    ) -> OrganizationRole:
        """Patch name and description. Slug and permissions are never sent."""
        body: Dict[str, Any] = {"name": name, "description": description or ""}
        data = self.client.patch(f"{_roles_path(organization_id)}/{slug}", body, cancel_event=cancel_event)
        return OrganizationRole.from_dict(data or {}, organization_id)

    def delete_organization_role(
        self,
        organization_id: str,
        slug: str,
        *,
        cancel_event: Optional[threading.Event] = None,
    ) -> None:
        self.client.delete(f"{_roles_path(organization_id)}/{slug}", cancel_event=cancel_event)
