"""workos_organization_role resource."""
from __future__ import annotations
import logging
import threading
from dataclasses import dataclass, field, replace
from typing import List, Optional

from ..core.state import list_or_empty
from ..core.validators import parse_role_import_id, validate_role_slug
from ..core.workos import RoleService, WorkOSError, is_not_found
from ..core.workos.models import OrganizationRole, format_timestamp
from .base import ImportResult, Resource, ResourceError

logger = logging.getLogger(__name__)


@dataclass
class OrganizationRoleState:
    id: Optional[str] = None
    organization_id: Optional[str] = None
    slug: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None
    permissions: List[str] = field(default_factory=list)
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


def _apply(base: OrganizationRoleState, role: OrganizationRole) -> OrganizationRoleState:
    return replace(
        base,
        id=role.id or base.id,
        name=role.name,
        description=role.description,
        type=role.type or None,
        permissions=list_or_empty(role.permissions),
        created_at=format_timestamp(role.created_at) or base.created_at,
        updated_at=format_timestamp(role.updated_at),
    )


class OrganizationRoleResource(Resource[OrganizationRoleState]):
    """Custom role scoped to a single organization.

    Roles are addressed by ``(organization_id, slug)``; both force
    replacement. Permissions are managed elsewhere and only mirrored here.
    """

    type_name = "workos_organization_role"
    requires_replace = ("organization_id", "slug")

    @property
    def service(self) -> RoleService:
        return RoleService(self.client)

    def create(
        self, plan: OrganizationRoleState, *, cancel_event: Optional[threading.Event] = None
    ) -> OrganizationRoleState:
        try:
            validate_role_slug(plan.slug or "")
        except ValueError as err:
            raise ResourceError("Invalid Role Slug", str(err)) from err

        logger.debug(f"Creating role {plan.slug} in organization {plan.organization_id}")
        try:
            role = self.service.create_organization_role(
                plan.organization_id or "",
                plan.slug,
                plan.name or "",
                plan.description,
                cancel_event=cancel_event,
            )
        except WorkOSError as err:
            raise self._error(
                "Error Creating Organization Role",
                f"Could not create role {plan.slug} in organization {plan.organization_id}",
                err,
            ) from err

        logger.info(f"Created organization role {plan.organization_id}/{plan.slug}")
        return _apply(plan, role)

    def read(
        self, state: OrganizationRoleState, *, cancel_event: Optional[threading.Event] = None
    ) -> Optional[OrganizationRoleState]:
        try:
            role = self.service.get_organization_role(state.organization_id, state.slug, cancel_event=cancel_event)
        except WorkOSError as err:
            if is_not_found(err):
                logger.info(f"Role {state.organization_id}/{state.slug} no longer exists; removing from state")
                return None
            raise self._error(
                "Error Reading Organization Role",
                f"Could not read role {state.organization_id}/{state.slug}",
                err,
            ) from err
        return _apply(replace(state, slug=role.slug or state.slug), role)

    def update(
        self,
        plan: OrganizationRoleState,
        state: OrganizationRoleState,
        *,
        cancel_event: Optional[threading.Event] = None,
    ) -> OrganizationRoleState:
        """Patch name/description. No call is made when neither changed."""
        if plan.name == state.name and (plan.description or "") == (state.description or ""):
            logger.debug(f"Role {state.organization_id}/{state.slug} unchanged; skipping update")
            return replace(
                plan,
                id=state.id,
                description=state.description,
                type=state.type,
                permissions=list_or_empty(state.permissions),
                created_at=state.created_at,
                updated_at=state.updated_at,
            )

        try:
            role = self.service.update_organization_role(
                state.organization_id,
                state.slug,
                plan.name or "",
                plan.description,
                cancel_event=cancel_event,
            )
        except WorkOSError as err:
            raise self._error(
                "Error Updating Organization Role",
                f"Could not update role {state.organization_id}/{state.slug}",
                err,
            ) from err

        logger.info(f"Updated organization role {state.organization_id}/{state.slug}")
        return _apply(replace(plan, id=state.id, created_at=state.created_at), role)

    def delete(self, state: OrganizationRoleState, *, cancel_event: Optional[threading.Event] = None) -> None:
        try:
            self.service.delete_organization_role(state.organization_id, state.slug, cancel_event=cancel_event)
        except WorkOSError as err:
            if is_not_found(err):
                logger.info(f"Role {state.organization_id}/{state.slug} already deleted")
                return
            raise self._error(
                "Error Deleting Organization Role",
                f"Could not delete role {state.organization_id}/{state.slug}",
                err,
            ) from err
        logger.info(f"Deleted organization role {state.organization_id}/{state.slug}")

    def import_state(
        self, import_id: str, *, cancel_event: Optional[threading.Event] = None
    ) -> ImportResult[OrganizationRoleState]:
        """Seed state from ``organization_id/slug``."""
        try:
            organization_id, slug = parse_role_import_id(import_id)
        except ValueError as err:
            raise ResourceError("Invalid Import ID", str(err)) from err
        return ImportResult(OrganizationRoleState(organization_id=organization_id, slug=slug))
