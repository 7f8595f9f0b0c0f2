"""workos_organization resource."""
from __future__ import annotations
import logging
import threading
from dataclasses import dataclass, replace
from typing import List, Optional

from ..core.state import set_or_null
from ..core.validators import validate_domain
from ..core.workos import OrganizationService, WorkOSError, is_not_found
from ..core.workos.models import format_timestamp
from .base import ImportResult, Resource, ResourceError

logger = logging.getLogger(__name__)


@dataclass
class OrganizationState:
    id: Optional[str] = None
    name: Optional[str] = None
    domains: Optional[List[str]] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class OrganizationResource(Resource[OrganizationState]):
    """Manages a WorkOS organization and its verified domains.

    Domains are treated as an unordered set and re-sent in full on every
    update.
    """

    type_name = "workos_organization"

    @property
    def service(self) -> OrganizationService:
        return OrganizationService(self.client)

    def _validate_domains(self, plan: OrganizationState) -> None:
        for domain in plan.domains or []:
            try:
                validate_domain(domain)
            except ValueError as err:
                raise ResourceError("Invalid Domain", str(err)) from err

    def create(
        self, plan: OrganizationState, *, cancel_event: Optional[threading.Event] = None
    ) -> OrganizationState:
        self._validate_domains(plan)
        logger.debug(f"Creating organization name={plan.name!r} domains={plan.domains}")
        try:
            org = self.service.create_organization(plan.name or "", plan.domains, cancel_event=cancel_event)
        except WorkOSError as err:
            raise self._error("Error Creating Organization", "Could not create organization", err) from err

        logger.info(f"Created organization {org.id}")
        return replace(
            plan,
            id=org.id,
            created_at=format_timestamp(org.created_at),
            updated_at=format_timestamp(org.updated_at),
        )

    def read(
        self, state: OrganizationState, *, cancel_event: Optional[threading.Event] = None
    ) -> Optional[OrganizationState]:
        try:
            org = self.service.get_organization(state.id, cancel_event=cancel_event)
        except WorkOSError as err:
            if is_not_found(err):
                logger.info(f"Organization {state.id} no longer exists; removing from state")
                return None
            raise self._error("Error Reading Organization", f"Could not read organization {state.id}", err) from err

        return replace(
            state,
            name=org.name,
            domains=set_or_null(org.domain_names),
            created_at=format_timestamp(org.created_at),
            updated_at=format_timestamp(org.updated_at),
        )

    def update(
        self,
        plan: OrganizationState,
        state: OrganizationState,
        *,
        cancel_event: Optional[threading.Event] = None,
    ) -> OrganizationState:
        self._validate_domains(plan)
        logger.debug(f"Updating organization {state.id}")
        try:
            org = self.service.update_organization(
                state.id, plan.name or "", plan.domains, cancel_event=cancel_event
            )
        except WorkOSError as err:
            raise self._error("Error Updating Organization", f"Could not update organization {state.id}", err) from err

        logger.info(f"Updated organization {state.id}")
        return replace(
            plan,
            id=state.id,
            created_at=state.created_at,
            updated_at=format_timestamp(org.updated_at),
        )

    def delete(self, state: OrganizationState, *, cancel_event: Optional[threading.Event] = None) -> None:
        try:
            self.service.delete_organization(state.id, cancel_event=cancel_event)
        except WorkOSError as err:
            if is_not_found(err):
                logger.info(f"Organization {state.id} already deleted")
                return
            raise self._error("Error Deleting Organization", f"Could not delete organization {state.id}", err) from err
        logger.info(f"Deleted organization {state.id}")

    def import_state(
        self, import_id: str, *, cancel_event: Optional[threading.Event] = None
    ) -> ImportResult[OrganizationState]:
        return ImportResult(OrganizationState(id=import_id))
