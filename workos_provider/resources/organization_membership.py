"""workos_organization_membership resource."""
from __future__ import annotations
import logging
import threading
from dataclasses import dataclass, replace
from typing import Optional

from ..core.state import merge_preserved, string_or_null
from ..core.workos import MembershipService, WorkOSError, is_not_found
from ..core.workos.models import OrganizationMembership, format_timestamp
from .base import ImportResult, Resource

logger = logging.getLogger(__name__)


@dataclass
class OrganizationMembershipState:
    id: Optional[str] = None
    user_id: Optional[str] = None
    organization_id: Optional[str] = None
    role_slug: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


def _apply(
    base: OrganizationMembershipState,
    membership: OrganizationMembership,
    prior_role_slug: Optional[str],
) -> OrganizationMembershipState:
    # The API does not always echo role_slug; fall back to the prior value
    return replace(
        base,
        id=membership.id or base.id,
        user_id=membership.user_id or base.user_id,
        organization_id=membership.organization_id or base.organization_id,
        role_slug=merge_preserved(membership.role_slug, prior_role_slug),
        status=string_or_null(membership.status),
        created_at=format_timestamp(membership.created_at),
        updated_at=format_timestamp(membership.updated_at),
    )


class OrganizationMembershipResource(Resource[OrganizationMembershipState]):
    """Links a user to an organization with an optional role."""

    type_name = "workos_organization_membership"
    requires_replace = ("user_id", "organization_id")

    @property
    def service(self) -> MembershipService:
        return MembershipService(self.client)

    def create(
        self, plan: OrganizationMembershipState, *, cancel_event: Optional[threading.Event] = None
    ) -> OrganizationMembershipState:
        logger.debug(f"Creating membership user={plan.user_id} organization={plan.organization_id}")
        try:
            membership = self.service.create_organization_membership(
                plan.user_id or "",
                plan.organization_id or "",
                plan.role_slug,
                cancel_event=cancel_event,
            )
        except WorkOSError as err:
            raise self._error(
                "Error Creating Organization Membership",
                f"Could not add user {plan.user_id} to organization {plan.organization_id}",
                err,
            ) from err

        logger.info(f"Created organization membership {membership.id}")
        return _apply(plan, membership, plan.role_slug)

    def read(
        self, state: OrganizationMembershipState, *, cancel_event: Optional[threading.Event] = None
    ) -> Optional[OrganizationMembershipState]:
        try:
            membership = self.service.get_organization_membership(state.id, cancel_event=cancel_event)
        except WorkOSError as err:
            if is_not_found(err):
                logger.info(f"Organization membership {state.id} no longer exists; removing from state")
                return None
            raise self._error(
                "Error Reading Organization Membership",
                f"Could not read organization membership {state.id}",
                err,
            ) from err
        return _apply(state, membership, state.role_slug)

    def update(
        self,
        plan: OrganizationMembershipState,
        state: OrganizationMembershipState,
        *,
        cancel_event: Optional[threading.Event] = None,
    ) -> OrganizationMembershipState:
        """Refresh the membership; only role_slug is mutable and it is re-derived, not written."""
        try:
            membership = self.service.get_organization_membership(state.id, cancel_event=cancel_event)
        except WorkOSError as err:
            raise self._error(
                "Error Updating Organization Membership",
                f"Could not read organization membership {state.id}",
                err,
            ) from err
        return _apply(replace(plan, id=state.id), membership, plan.role_slug)

    def delete(
        self, state: OrganizationMembershipState, *, cancel_event: Optional[threading.Event] = None
    ) -> None:
        try:
            self.service.delete_organization_membership(state.id, cancel_event=cancel_event)
        except WorkOSError as err:
            if is_not_found(err):
                logger.info(f"Organization membership {state.id} already deleted")
                return
            raise self._error(
                "Error Deleting Organization Membership",
                f"Could not delete organization membership {state.id}",
                err,
            ) from err
        logger.info(f"Deleted organization membership {state.id}")

    def import_state(
        self, import_id: str, *, cancel_event: Optional[threading.Event] = None
    ) -> ImportResult[OrganizationMembershipState]:
        return ImportResult(OrganizationMembershipState(id=import_id))
