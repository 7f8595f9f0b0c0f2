"""WorkOS API client library.

This package provides a modular, testable interface to the WorkOS management API.

Architecture:
- client.py: HTTP transport with authentication, rate-limit retries and cancellation
- exceptions.py: Typed exceptions and error-kind predicates
- models.py: Entity dataclasses decoded from API payloads
- organizations.py, users.py, memberships.py, roles.py, webhooks.py: CRUD services
- connections.py, directories.py: Read-only services

Usage:
    from workos_provider.core.workos import WorkOSClient, OrganizationService

    client = WorkOSClient("sk_test_...")
    orgs = OrganizationService(client)
    org = orgs.create_organization("Acme", ["acme.com"])
"""
from .client import (
    WorkOSClient,
    Capability,
    DEFAULT_BASE_URL,
    REQUEST_TIMEOUT,
    MAX_RETRIES,
    BASE_RETRY_DELAY,
    MAX_RETRY_DELAY,
)
from .exceptions import (
    ErrorKind,
    FieldError,
    WorkOSError,
    WorkOSAPIError,
    WorkOSTransportError,
    RequestCancelledError,
    ReadOnlyEntityError,
    error_kind,
    find_api_error,
    is_not_found,
    is_unauthorized,
    is_forbidden,
    is_bad_request,
    is_conflict,
    is_rate_limited,
    is_internal_server_error,
)
from .models import (
    Connection,
    Directory,
    DirectoryGroup,
    DirectoryUser,
    Domain,
    ListMetadata,
    Organization,
    OrganizationMembership,
    OrganizationRole,
    User,
    Webhook,
    CONNECTION_TYPES,
)
from .organizations import OrganizationService
from .connections import ConnectionService
from .directories import DirectoryService
from .users import UserService
from .memberships import MembershipService
from .roles import RoleService
from .webhooks import WebhookService, KNOWN_WEBHOOK_EVENTS

__all__ = [
    # Client
    "WorkOSClient",
    "Capability",
    "DEFAULT_BASE_URL",
    "REQUEST_TIMEOUT",
    "MAX_RETRIES",
    "BASE_RETRY_DELAY",
    "MAX_RETRY_DELAY",

    # Exceptions
    "ErrorKind",
    "FieldError",
    "WorkOSError",
    "WorkOSAPIError",
    "WorkOSTransportError",
    "RequestCancelledError",
    "ReadOnlyEntityError",
    "error_kind",
    "find_api_error",
    "is_not_found",
    "is_unauthorized",
    "is_forbidden",
    "is_bad_request",
    "is_conflict",
    "is_rate_limited",
    "is_internal_server_error",

    # Models
    "Connection",
    "Directory",
    "DirectoryGroup",
    "DirectoryUser",
    "Domain",
    "ListMetadata",
    "Organization",
    "OrganizationMembership",
    "OrganizationRole",
    "User",
    "Webhook",
    "CONNECTION_TYPES",

    # Services
    "OrganizationService",
    "ConnectionService",
    "DirectoryService",
    "UserService",
    "MembershipService",
    "RoleService",
    "WebhookService",
    "KNOWN_WEBHOOK_EVENTS",
]
