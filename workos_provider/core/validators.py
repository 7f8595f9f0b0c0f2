"""Input validation helpers for resource configuration."""
from __future__ import annotations
from typing import Iterable, List, Tuple

ROLE_SLUG_PREFIX = "org-"


def validate_role_slug(slug: str) -> str:
    """Validate an organization role slug.

    Args:
        slug: Role slug from configuration

    Returns:
        The slug unchanged

    Raises:
        ValueError: If the slug lacks the ``org-`` prefix or is empty after it
    """
    if not slug or not slug.startswith(ROLE_SLUG_PREFIX):
        raise ValueError(f"Role slug must start with '{ROLE_SLUG_PREFIX}', got {slug!r}")
    if not slug[len(ROLE_SLUG_PREFIX):]:
        raise ValueError(f"Role slug must contain a name after '{ROLE_SLUG_PREFIX}'")
    return slug


def parse_role_import_id(import_id: str) -> Tuple[str, str]:
    """Split an organization role import ID of the form ``organizationId/slug``.

    Raises:
        ValueError: If the ID does not have exactly two non-empty segments
    """
    parts = (import_id or "").split("/")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise ValueError(
            f"Expected import ID in the format 'organization_id/slug', got {import_id!r}"
        )
    return parts[0], parts[1]


def validate_domain(domain: str) -> str:
    """Normalize and validate an organization domain.

    Raises:
        ValueError: If the domain is empty or malformed
    """
    domain = (domain or "").strip().lower()
    if not domain:
        raise ValueError("Domain must not be empty")
    if "." not in domain or domain.startswith(".") or domain.endswith("."):
        raise ValueError(f"Invalid domain: {domain!r}")
    if any(char in domain for char in " /@:"):
        raise ValueError(f"Invalid domain: {domain!r}")
    return domain


def validate_email(email: str) -> str:
    """Validate email address.

    Args:
        email: Email address to validate

    Returns:
        Trimmed email address (case preserved; WorkOS treats it case-insensitively)

    Raises:
        ValueError: If email is invalid
    """
    email = (email or "").strip()
    if not email or "@" not in email:
        raise ValueError("Invalid email format")

    local, domain = email.rsplit("@", 1)
    if not local or not domain or "." not in domain:
        raise ValueError("Invalid email format")
    if len(email) > 254:
        raise ValueError("Email exceeds maximum length")

    return email


def unknown_webhook_events(events: Iterable[str], known: Iterable[str]) -> List[str]:
    """Return the configured events that are not in the known catalogue, sorted."""
    known_set = set(known)
    return sorted({event for event in events if event not in known_set})
