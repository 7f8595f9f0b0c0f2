"""WorkOS organization membership operations."""
from __future__ import annotations
import threading
from typing import Any, Dict, List, Optional

from .client import Capability, WorkOSClient
from .models import OrganizationMembership

MEMBERSHIPS_PATH = "/user_management/organization_memberships"


class MembershipService:
    """Service for linking users to organizations."""

    capability = Capability.CRUD

    def __init__(self, client: WorkOSClient):
        self.client = client

    def create_organization_membership(
        self,
        user_id: str,
        organization_id: str,
        role_slug: Optional[str] = None,
        *,
        cancel_event: Optional[threading.Event] = None,
    ) -> OrganizationMembership:
        """Add a user to an organization.

        Args:
            user_id: WorkOS user ID
            organization_id: WorkOS organization ID
            role_slug: Role to grant; the organization default applies when omitted
            cancel_event: Cancellation signal

        Returns:
            The created membership. The API does not always echo the role.
        """
        body: Dict[str, Any] = {"user_id": user_id, "organization_id": organization_id}
        if role_slug:
            body["role_slug"] = role_slug
        data = self.client.post(MEMBERSHIPS_PATH, body, cancel_event=cancel_event)
        return OrganizationMembership.from_dict(data or {})

    def get_organization_membership(
        self, membership_id: str, *, cancel_event: Optional[threading.Event] = None
    ) -> OrganizationMembership:
        data = self.client.get(f"{MEMBERSHIPS_PATH}/{membership_id}", cancel_event=cancel_event)
        return OrganizationMembership.from_dict(data or {})

    def list_organization_memberships(
        self,
        user_id: str = "",
        organization_id: str = "",
        *,
        cancel_event: Optional[threading.Event] = None,
    ) -> List[OrganizationMembership]:
        """List memberships filtered by user and/or organization."""
        params = {}
        if user_id:
            params["user_id"] = user_id
        if organization_id:
            params["organization_id"] = organization_id
        return [
            OrganizationMembership.from_dict(item)
            for item in self.client.paginate(MEMBERSHIPS_PATH, params, cancel_event=cancel_event)
        ]

    def deactivate_organization_membership(
        self, membership_id: str, *, cancel_event: Optional[threading.Event] = None
    ) -> OrganizationMembership:
        data = self.client.put(f"{MEMBERSHIPS_PATH}/{membership_id}/deactivate", cancel_event=cancel_event)
        return OrganizationMembership.from_dict(data or {})

    def reactivate_organization_membership(
        self, membership_id: str, *, cancel_event: Optional[threading.Event] = None
    ) -> OrganizationMembership:
        data = self.client.put(f"{MEMBERSHIPS_PATH}/{membership_id}/reactivate", cancel_event=cancel_event)
        return OrganizationMembership.from_dict(data or {})

    def delete_organization_membership(
        self, membership_id: str, *, cancel_event: Optional[threading.Event] = None
    ) -> None:
        self.client.delete(f"{MEMBERSHIPS_PATH}/{membership_id}", cancel_event=cancel_event)
