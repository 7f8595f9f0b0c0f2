"""workos_organization data source."""
from __future__ import annotations
import threading
from dataclasses import dataclass, replace
from typing import List, Optional

from ..core.state import set_or_null
from ..core.workos import OrganizationService, WorkOSError
from ..core.workos.models import format_timestamp
from .base import DataSource


@dataclass
class OrganizationDataModel:
    id: Optional[str] = None
    domain: Optional[str] = None
    name: Optional[str] = None
    domains: Optional[List[str]] = None
    allow_profiles_outside_organization: Optional[bool] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class OrganizationDataSource(DataSource[OrganizationDataModel]):
    """Look up an organization by ``id`` or by one of its ``domain``s."""

    type_name = "workos_organization"
    model = OrganizationDataModel
    entity_name = "Organization"

    def read(
        self, config: OrganizationDataModel, *, cancel_event: Optional[threading.Event] = None
    ) -> OrganizationDataModel:
        service = OrganizationService(self.client)
        try:
            if config.id:
                lookup = f"id {config.id}"
                org = service.get_organization(config.id, cancel_event=cancel_event)
            elif config.domain:
                lookup = f"domain {config.domain}"
                org = service.get_organization_by_domain(config.domain, cancel_event=cancel_event)
            else:
                raise self._missing("Either 'id' or 'domain' must be specified to look up an organization.")
        except WorkOSError as err:
            raise self._lookup_failed(lookup, err) from err

        return replace(
            config,
            id=org.id,
            name=org.name,
            domains=set_or_null(org.domain_names),
            allow_profiles_outside_organization=org.allow_profiles_outside_organization,
            created_at=format_timestamp(org.created_at),
            updated_at=format_timestamp(org.updated_at),
        )
