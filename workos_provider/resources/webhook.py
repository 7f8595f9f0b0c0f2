"""workos_webhook resource.

The WorkOS API no longer serves webhook endpoints. Reads and deletes of
existing state still behave, but creates and updates fail with a permanent
"Webhooks Not Supported" error instead of a generic 404.
"""
from __future__ import annotations
import logging
import threading
from dataclasses import dataclass, replace
from typing import ClassVar, List, Optional, Tuple

from ..core.state import merge_preserved, set_or_null
from ..core.validators import unknown_webhook_events
from ..core.workos import KNOWN_WEBHOOK_EVENTS, WebhookService, WorkOSError, is_not_found
from ..core.workos.models import Webhook, format_timestamp
from .base import ImportResult, Resource, ResourceError

logger = logging.getLogger(__name__)

_NOT_SUPPORTED_DETAIL = (
    "The WorkOS API no longer exposes webhook endpoints. Configure webhooks in "
    "the WorkOS Dashboard and remove this resource from configuration."
)


@dataclass
class WebhookState:
    SENSITIVE_FIELDS: ClassVar[Tuple[str, ...]] = ("secret",)

    id: Optional[str] = None
    url: Optional[str] = None
    secret: Optional[str] = None
    enabled: Optional[bool] = None
    events: Optional[List[str]] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def __repr__(self) -> str:
        return f"WebhookState(id={self.id!r}, url={self.url!r}, enabled={self.enabled!r}, events={self.events!r})"


def _apply(base: WebhookState, webhook: Webhook, prior_secret: Optional[str]) -> WebhookState:
    return replace(
        base,
        id=webhook.id or base.id,
        url=webhook.url or base.url,
        secret=merge_preserved(webhook.secret, prior_secret),
        enabled=webhook.enabled,
        events=set_or_null(webhook.events) or set_or_null(base.events),
        created_at=format_timestamp(webhook.created_at),
        updated_at=format_timestamp(webhook.updated_at),
    )


class WebhookResource(Resource[WebhookState]):
    type_name = "workos_webhook"

    @property
    def service(self) -> WebhookService:
        return WebhookService(self.client)

    def _warn_unknown_events(self, plan: WebhookState) -> None:
        unknown = unknown_webhook_events(plan.events or [], KNOWN_WEBHOOK_EVENTS)
        if unknown:
            logger.warning(f"Unknown webhook event types (sent as-is): {', '.join(unknown)}")

    def create(self, plan: WebhookState, *, cancel_event: Optional[threading.Event] = None) -> WebhookState:
        self._warn_unknown_events(plan)
        try:
            webhook = self.service.create_webhook(
                plan.url or "",
                plan.events or [],
                secret=plan.secret,
                enabled=True if plan.enabled is None else plan.enabled,
                cancel_event=cancel_event,
            )
        except WorkOSError as err:
            if is_not_found(err):
                raise ResourceError("Webhooks Not Supported", _NOT_SUPPORTED_DETAIL) from err
            raise self._error("Error Creating Webhook", f"Could not create webhook for {plan.url}", err) from err

        logger.info(f"Created webhook {webhook.id}")
        return _apply(plan, webhook, plan.secret)

    def read(self, state: WebhookState, *, cancel_event: Optional[threading.Event] = None) -> Optional[WebhookState]:
        try:
            webhook = self.service.get_webhook(state.id, cancel_event=cancel_event)
        except WorkOSError as err:
            if is_not_found(err):
                logger.info(f"Webhook {state.id} not found; removing from state")
                return None
            raise self._error("Error Reading Webhook", f"Could not read webhook {state.id}", err) from err
        return _apply(state, webhook, state.secret)

    def update(
        self, plan: WebhookState, state: WebhookState, *, cancel_event: Optional[threading.Event] = None
    ) -> WebhookState:
        self._warn_unknown_events(plan)
        try:
            webhook = self.service.update_webhook(
                state.id,
                plan.url or "",
                plan.events or [],
                secret=plan.secret,
                enabled=True if plan.enabled is None else plan.enabled,
                cancel_event=cancel_event,
            )
        except WorkOSError as err:
            if is_not_found(err):
                raise ResourceError("Webhooks Not Supported", _NOT_SUPPORTED_DETAIL) from err
            raise self._error("Error Updating Webhook", f"Could not update webhook {state.id}", err) from err

        logger.info(f"Updated webhook {state.id}")
        return _apply(replace(plan, id=state.id), webhook, plan.secret or state.secret)

    def delete(self, state: WebhookState, *, cancel_event: Optional[threading.Event] = None) -> None:
        try:
            self.service.delete_webhook(state.id, cancel_event=cancel_event)
        except WorkOSError as err:
            if is_not_found(err):
                logger.info(f"Webhook {state.id} already gone")
                return
            raise self._error("Error Deleting Webhook", f"Could not delete webhook {state.id}", err) from err
        logger.info(f"Deleted webhook {state.id}")

    def import_state(
        self, import_id: str, *, cancel_event: Optional[threading.Event] = None
    ) -> ImportResult[WebhookState]:
        warning = (
            f"Imported webhook {import_id}: the signing secret cannot be read back "
            "and must be re-supplied in configuration."
        )
        logger.warning(warning)
        return ImportResult(WebhookState(id=import_id), [warning])
