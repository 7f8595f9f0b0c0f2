"""Managed resources exposed to the host runtime."""
from .base import ImportResult, ReadOnlyResource, Resource, ResourceError, state_to_dict
from .connection import ConnectionResource, ConnectionState
from .directory import DirectoryResource, DirectoryState
from .organization import OrganizationResource, OrganizationState
from .organization_membership import OrganizationMembershipResource, OrganizationMembershipState
from .organization_role import OrganizationRoleResource, OrganizationRoleState
from .user import UserResource, UserState
from .webhook import WebhookResource, WebhookState

__all__ = [
    "ImportResult",
    "ReadOnlyResource",
    "Resource",
    "ResourceError",
    "state_to_dict",
    "ConnectionResource",
    "ConnectionState",
    "DirectoryResource",
    "DirectoryState",
    "OrganizationResource",
    "OrganizationState",
    "OrganizationMembershipResource",
    "OrganizationMembershipState",
    "OrganizationRoleResource",
    "OrganizationRoleState",
    "UserResource",
    "UserState",
    "WebhookResource",
    "WebhookState",
]
