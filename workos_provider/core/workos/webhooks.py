"""WorkOS webhook endpoint operations.

The API has stopped serving ``/webhooks``: every call now returns 404. The
service is kept so existing state can still be read out and deleted.
"""
from __future__ import annotations
import threading
from typing import Any, Dict, Iterable, Optional

from .client import Capability, WorkOSClient
from .models import Webhook

WEBHOOKS_PATH = "/webhooks"

KNOWN_WEBHOOK_EVENTS = (
    "authentication.email_verification_succeeded",
    "authentication.magic_auth_failed",
    "authentication.magic_auth_succeeded",
    "authentication.mfa_succeeded",
    "authentication.oauth_failed",
    "authentication.oauth_succeeded",
    "authentication.password_failed",
    "authentication.password_succeeded",
    "authentication.sso_failed",
    "authentication.sso_succeeded",
    "connection.activated",
    "connection.deactivated",
    "connection.deleted",
    "dsync.activated",
    "dsync.deleted",
    "dsync.group.created",
    "dsync.group.deleted",
    "dsync.group.updated",
    "dsync.group.user_added",
    "dsync.group.user_removed",
    "dsync.user.created",
    "dsync.user.deleted",
    "dsync.user.updated",
    "organization.created",
    "organization.deleted",
    "organization.updated",
    "organization_domain.verification_failed",
    "organization_domain.verified",
    "organization_membership.created",
    "organization_membership.deleted",
    "organization_membership.updated",
    "role.created",
    "role.deleted",
    "role.updated",
    "session.created",
    "user.created",
    "user.deleted",
    "user.updated",
)


class WebhookService:
    """Service for webhook endpoints."""

    capability = Capability.CRUD

    def __init__(self, client: WorkOSClient):
        self.client = client

    def create_webhook(
        self,
        url: str,
        events: Iterable[str],
        *,
        secret: Optional[str] = None,
        enabled: bool = True,
        cancel_event: Optional[threading.Event] = None,
    ) -> Webhook:
        body: Dict[str, Any] = {"url": url, "events": sorted(set(events)), "enabled": enabled}
        if secret:
            body["secret"] = secret
        data = self.client.post(WEBHOOKS_PATH, body, cancel_event=cancel_event)
        return Webhook.from_dict(data or {})

    def get_webhook(self, webhook_id: str, *, cancel_event: Optional[threading.Event] = None) -> Webhook:
        data = self.client.get(f"{WEBHOOKS_PATH}/{webhook_id}", cancel_event=cancel_event)
        return Webhook.from_dict(data or {})

    def update_webhook(
        self,
        webhook_id: str,
        url: str,
        events: Iterable[str],
        *,
        secret: Optional[str] = None,
        enabled: bool = True,
        cancel_event: Optional[threading.Event] = None,
    ) -> Webhook:
        body: Dict[str, Any] = {"url": url, "events": sorted(set(events)), "enabled": enabled}
        if secret:
            body["secret"] = secret
        data = self.client.put(f"{WEBHOOKS_PATH}/{webhook_id}", body, cancel_event=cancel_event)
        return Webhook.from_dict(data or {})

    def delete_webhook(self, webhook_id: str, *, cancel_event: Optional[threading.Event] = None) -> None:
        self.client.delete(f"{WEBHOOKS_PATH}/{webhook_id}", cancel_event=cancel_event)
