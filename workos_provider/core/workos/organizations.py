"""WorkOS organization operations."""
from __future__ import annotations
import threading
from typing import Iterable, List, Optional

from .client import Capability, WorkOSClient
from .exceptions import WorkOSAPIError
from .models import Organization


def domain_data(domains: Iterable[str]) -> List[dict]:
    """Build the ``domain_data`` payload; domains are always sent as verified."""
    return [{"domain": domain, "state": "verified"} for domain in sorted(set(domains))]


class OrganizationService:
    """Service for managing WorkOS organizations."""

    capability = Capability.CRUD

    def __init__(self, client: WorkOSClient):
        """Initialize organization service.

        Args:
            client: Configured WorkOS client
        """
        self.client = client

    def create_organization(
        self,
        name: str,
        domains: Optional[Iterable[str]] = None,
        *,
        cancel_event: Optional[threading.Event] = None,
    ) -> Organization:
        """Create an organization.

        Args:
            name: Display name
            domains: Verified domains to attach (omitted when None or empty)
            cancel_event: Cancellation signal

        Returns:
            The created organization
        """
        body = {"name": name}
        if domains:
            body["domain_data"] = domain_data(domains)
        data = self.client.post("/organizations", body, cancel_event=cancel_event)
        return Organization.from_dict(data or {})

    def get_organization(
        self, organization_id: str, *, cancel_event: Optional[threading.Event] = None
    ) -> Organization:
        data = self.client.get(f"/organizations/{organization_id}", cancel_event=cancel_event)
        return Organization.from_dict(data or {})

    def list_organizations(
        self,
        domains: Optional[Iterable[str]] = None,
        *,
        cancel_event: Optional[threading.Event] = None,
    ) -> List[Organization]:
        """List organizations, optionally filtered by domain."""
        params = {}
        if domains:
            params["domains"] = ",".join(domains)
        return [
            Organization.from_dict(item)
            for item in self.client.paginate("/organizations", params, cancel_event=cancel_event)
        ]

    def get_organization_by_domain(
        self, domain: str, *, cancel_event: Optional[threading.Event] = None
    ) -> Organization:
        """Return the first organization owning ``domain``.

        Raises:
            WorkOSAPIError: 404 when no organization matches
        """
        data = self.client.get("/organizations", params={"domains": domain}, cancel_event=cancel_event) or {}
        items = data.get("data") or []
        if not items:
            raise WorkOSAPIError(404, f"no organization found with domain {domain}", endpoint="/organizations")
        return Organization.from_dict(items[0])

    def update_organization(
        self,
        organization_id: str,
        name: str,
        domains: Optional[Iterable[str]] = None,
        *,
        cancel_event: Optional[threading.Event] = None,
    ) -> Organization:
        """Replace name and the full domain list of an organization."""
        body = {"name": name}
        if domains is not None:
            body["domain_data"] = domain_data(domains)
        data = self.client.put(f"/organizations/{organization_id}", body, cancel_event=cancel_event)
        return Organization.from_dict(data or {})

    def delete_organization(
        self, organization_id: str, *, cancel_event: Optional[threading.Event] = None
    ) -> None:
        self.client.delete(f"/organizations/{organization_id}", cancel_event=cancel_event)
