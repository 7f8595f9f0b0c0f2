"""workos_organization_role data source."""
from __future__ import annotations
import threading
from dataclasses import dataclass, field, replace
from typing import List, Optional

from ..core.state import list_or_empty, string_or_null
from ..core.workos import RoleService, WorkOSError
from ..core.workos.models import format_timestamp
from .base import DataSource


@dataclass
class OrganizationRoleDataModel:
    organization_id: Optional[str] = None
    slug: Optional[str] = None
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None
    permissions: List[str] = field(default_factory=list)
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class OrganizationRoleDataSource(DataSource[OrganizationRoleDataModel]):
    """Look up an organization's role by ``slug`` or by ``id``."""

    type_name = "workos_organization_role"
    model = OrganizationRoleDataModel
    entity_name = "Organization Role"

    def read(
        self, config: OrganizationRoleDataModel, *, cancel_event: Optional[threading.Event] = None
    ) -> OrganizationRoleDataModel:
        if not config.organization_id:
            raise self._missing("'organization_id' must be specified to look up an organization role.")

        service = RoleService(self.client)
        try:
            if config.slug:
                lookup = f"slug {config.slug}"
                role = service.get_organization_role(config.organization_id, config.slug, cancel_event=cancel_event)
            elif config.id:
                lookup = f"id {config.id}"
                role = service.get_organization_role_by_id(config.organization_id, config.id, cancel_event=cancel_event)
            else:
                raise self._missing("Either 'slug' or 'id' must be specified to look up an organization role.")
        except WorkOSError as err:
            raise self._lookup_failed(lookup, err) from err

        return replace(
            config,
            id=role.id,
            slug=role.slug or config.slug,
            name=role.name,
            description=role.description,
            type=string_or_null(role.type),
            permissions=list_or_empty(role.permissions),
            created_at=format_timestamp(role.created_at),
            updated_at=format_timestamp(role.updated_at),
        )
