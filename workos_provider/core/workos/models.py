"""Entity representations decoded from WorkOS API payloads.

Every model exposes ``from_dict`` which tolerates missing keys; the API omits
null fields on some endpoints and the provider never invents identifiers.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

RFC3339_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an API timestamp (ISO 8601 / RFC 3339) into an aware datetime.

    Returns None for empty or unparseable values.
    """
    if not value or not isinstance(value, str):
        return None
    text = value.strip()
    if text.endswith("Z") or text.endswith("z"):
        text = text[:-1] + "+00:00"
    # fromisoformat on older interpreters rejects fractional seconds that are
    # not exactly 3 or 6 digits
    if "." in text:
        head, _, tail = text.partition(".")
        digits = ""
        rest = ""
        for index, char in enumerate(tail):
            if not char.isdigit():
                rest = tail[index:]
                break
            digits += char
        digits = (digits + "000000")[:6]
        text = f"{head}.{digits}{rest}"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    """Render a datetime as an RFC 3339 UTC string, or None."""
    if value is None:
        return None
    return value.astimezone(timezone.utc).strftime(RFC3339_FORMAT)


def _str(data: dict, key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


# ─────────────────────────────────────────────────────────────────────────────
# Pagination
# ─────────────────────────────────────────────────────────────────────────────
@dataclass
class ListMetadata:
    before: str = ""
    after: str = ""

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "ListMetadata":
        data = data or {}
        return cls(before=_str(data, "before"), after=_str(data, "after"))


# ─────────────────────────────────────────────────────────────────────────────
# Organizations
# ─────────────────────────────────────────────────────────────────────────────
@dataclass
class Domain:
    """Domain attached to an organization."""

    id: str = ""
    domain: str = ""
    state: str = ""
    organization_id: str = ""
    verification_type: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "Domain":
        return cls(
            id=_str(data, "id"),
            domain=_str(data, "domain"),
            state=_str(data, "state"),
            organization_id=_str(data, "organization_id"),
            verification_type=_str(data, "verification_type"),
        )


@dataclass
class Organization:
    id: str
    name: str = ""
    domains: List[Domain] = field(default_factory=list)
    allow_profiles_outside_organization: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Organization":
        return cls(
            id=_str(data, "id"),
            name=_str(data, "name"),
            domains=[Domain.from_dict(item) for item in data.get("domains") or [] if isinstance(item, dict)],
            allow_profiles_outside_organization=bool(data.get("allow_profiles_outside_organization", False)),
            created_at=parse_timestamp(data.get("created_at")),
            updated_at=parse_timestamp(data.get("updated_at")),
        )

    @property
    def domain_names(self) -> List[str]:
        return [d.domain for d in self.domains if d.domain]


# ─────────────────────────────────────────────────────────────────────────────
# SSO connections and directories
# ─────────────────────────────────────────────────────────────────────────────
CONNECTION_TYPES = (
    "ADFSSAML",
    "AzureSAML",
    "GenericOIDC",
    "GenericSAML",
    "GoogleOAuth",
    "GoogleSAML",
    "JumpCloudSAML",
    "MicrosoftOAuth",
    "OktaSAML",
    "OneLoginSAML",
    "PingFederateSAML",
    "PingOneSAML",
)


@dataclass
class Connection:
    """SSO connection. Unknown connection types are kept verbatim."""

    id: str
    organization_id: str = ""
    connection_type: str = ""
    name: str = ""
    state: str = ""
    status: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Connection":
        return cls(
            id=_str(data, "id"),
            organization_id=_str(data, "organization_id"),
            connection_type=_str(data, "connection_type"),
            name=_str(data, "name"),
            state=_str(data, "state"),
            status=_str(data, "status"),
            created_at=parse_timestamp(data.get("created_at")),
            updated_at=parse_timestamp(data.get("updated_at")),
        )


@dataclass
class Directory:
    id: str
    organization_id: str = ""
    type: str = ""
    name: str = ""
    state: str = ""
    bearer_token: str = ""
    endpoint: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Directory":
        return cls(
            id=_str(data, "id"),
            organization_id=_str(data, "organization_id"),
            type=_str(data, "type"),
            name=_str(data, "name"),
            state=_str(data, "state"),
            bearer_token=_str(data, "bearer_token"),
            endpoint=_str(data, "endpoint"),
            created_at=parse_timestamp(data.get("created_at")),
            updated_at=parse_timestamp(data.get("updated_at")),
        )

    def __repr__(self) -> str:
        token = "***" if self.bearer_token else ""
        return (
            f"Directory(id={self.id!r}, organization_id={self.organization_id!r}, "
            f"type={self.type!r}, name={self.name!r}, state={self.state!r}, bearer_token={token!r})"
        )


@dataclass
class DirectoryUser:
    id: str
    directory_id: str = ""
    organization_id: str = ""
    idp_id: str = ""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    username: str = ""
    state: str = ""
    custom_attributes: Dict[str, Any] = field(default_factory=dict)
    raw_attributes: Dict[str, Any] = field(default_factory=dict)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict) -> "DirectoryUser":
        email = _str(data, "email")
        if not email:
            # Older payloads only carry the emails list
            for item in data.get("emails") or []:
                if isinstance(item, dict) and item.get("value"):
                    email = str(item["value"])
                    if item.get("primary"):
                        break
        return cls(
            id=_str(data, "id"),
            directory_id=_str(data, "directory_id"),
            organization_id=_str(data, "organization_id"),
            idp_id=_str(data, "idp_id"),
            first_name=_str(data, "first_name"),
            last_name=_str(data, "last_name"),
            email=email,
            username=_str(data, "username"),
            state=_str(data, "state"),
            custom_attributes=dict(data.get("custom_attributes") or {}),
            raw_attributes=dict(data.get("raw_attributes") or {}),
            created_at=parse_timestamp(data.get("created_at")),
            updated_at=parse_timestamp(data.get("updated_at")),
        )


@dataclass
class DirectoryGroup:
    id: str
    directory_id: str = ""
    organization_id: str = ""
    idp_id: str = ""
    name: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict) -> "DirectoryGroup":
        return cls(
            id=_str(data, "id"),
            directory_id=_str(data, "directory_id"),
            organization_id=_str(data, "organization_id"),
            idp_id=_str(data, "idp_id"),
            name=_str(data, "name"),
            created_at=parse_timestamp(data.get("created_at")),
            updated_at=parse_timestamp(data.get("updated_at")),
        )


# ─────────────────────────────────────────────────────────────────────────────
# Webhooks
# ─────────────────────────────────────────────────────────────────────────────
@dataclass
class Webhook:
    """Webhook endpoint. The signing secret is never returned by reads."""

    id: str
    url: str = ""
    secret: str = ""
    enabled: bool = False
    events: List[str] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Webhook":
        return cls(
            id=_str(data, "id"),
            url=_str(data, "url"),
            secret=_str(data, "secret"),
            enabled=bool(data.get("enabled", False)),
            events=[str(e) for e in data.get("events") or []],
            created_at=parse_timestamp(data.get("created_at")),
            updated_at=parse_timestamp(data.get("updated_at")),
        )


# ─────────────────────────────────────────────────────────────────────────────
# User management
# ─────────────────────────────────────────────────────────────────────────────
@dataclass
class User:
    id: str
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    email_verified: bool = False
    profile_picture_url: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        return cls(
            id=_str(data, "id"),
            email=_str(data, "email"),
            first_name=_str(data, "first_name"),
            last_name=_str(data, "last_name"),
            email_verified=bool(data.get("email_verified", False)),
            profile_picture_url=_str(data, "profile_picture_url"),
            created_at=parse_timestamp(data.get("created_at")),
            updated_at=parse_timestamp(data.get("updated_at")),
        )


@dataclass
class OrganizationMembership:
    """Link between a user and an organization.

    The role is reported either as ``role_slug`` or as a nested
    ``role: {"slug": ...}`` object depending on the endpoint.
    """

    id: str
    user_id: str = ""
    organization_id: str = ""
    role_slug: str = ""
    status: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict) -> "OrganizationMembership":
        role_slug = _str(data, "role_slug")
        role = data.get("role")
        if not role_slug and isinstance(role, dict):
            role_slug = _str(role, "slug")
        return cls(
            id=_str(data, "id"),
            user_id=_str(data, "user_id"),
            organization_id=_str(data, "organization_id"),
            role_slug=role_slug,
            status=_str(data, "status"),
            created_at=parse_timestamp(data.get("created_at")),
            updated_at=parse_timestamp(data.get("updated_at")),
        )


@dataclass
class OrganizationRole:
    id: str
    organization_id: str = ""
    slug: str = ""
    name: str = ""
    description: str = ""
    type: str = ""
    permissions: List[str] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict, organization_id: str = "") -> "OrganizationRole":
        return cls(
            id=_str(data, "id"),
            organization_id=_str(data, "organization_id") or organization_id,
            slug=_str(data, "slug"),
            name=_str(data, "name"),
            description=_str(data, "description"),
            type=_str(data, "type"),
            permissions=[str(p) for p in data.get("permissions") or []],
            created_at=parse_timestamp(data.get("created_at")),
            updated_at=parse_timestamp(data.get("updated_at")),
        )
