"""workos_organization_membership resource and membership service."""
import pytest

from workos_provider.core.workos import MembershipService
from workos_provider.resources import (
    OrganizationMembershipResource,
    OrganizationMembershipState,
    ResourceError,
)

MEMBERSHIPS = "/user_management/organization_memberships"


def membership_payload(role=None, **overrides):
    payload = {
        "object": "organization_membership",
        "id": "om_01",
        "user_id": "user_01",
        "organization_id": "org_01",
        "status": "active",
        "created_at": "2024-03-01T09:00:00.000Z",
        "updated_at": "2024-03-01T09:00:00.000Z",
    }
    if role is not None:
        payload["role"] = {"slug": role}
    payload.update(overrides)
    return payload


@pytest.fixture
def resource(configured):
    return configured(OrganizationMembershipResource)


def test_replacement_attributes():
    assert set(OrganizationMembershipResource.requires_replace) == {"user_id", "organization_id"}


def test_create_keeps_desired_role_when_not_echoed(resource, fake_api):
    fake_api.add("POST", MEMBERSHIPS, status=201, payload=membership_payload(role_slug=""))

    state = resource.create(OrganizationMembershipState(user_id="user_01", organization_id="org_01", role_slug="admin"))

    assert fake_api.calls[0].json == {"user_id": "user_01", "organization_id": "org_01", "role_slug": "admin"}
    assert state.role_slug == "admin"
    assert state.status == "active"


def test_create_takes_echoed_role(resource, fake_api):
    fake_api.add("POST", MEMBERSHIPS, status=201, payload=membership_payload(role="member"))

    state = resource.create(OrganizationMembershipState(user_id="user_01", organization_id="org_01", role_slug="admin"))

    assert state.role_slug == "member"


def test_create_without_role_omits_it(resource, fake_api):
    fake_api.add("POST", MEMBERSHIPS, status=201, payload=membership_payload())

    state = resource.create(OrganizationMembershipState(user_id="user_01", organization_id="org_01"))

    assert "role_slug" not in fake_api.calls[0].json
    assert state.role_slug is None


def test_read_preserves_prior_role(resource, fake_api):
    fake_api.add("GET", f"{MEMBERSHIPS}/om_01", payload=membership_payload())

    state = resource.read(OrganizationMembershipState(id="om_01", role_slug="admin"))

    assert state.role_slug == "admin"
    assert state.user_id == "user_01"


def test_update_refetches_without_writing(resource, fake_api):
    fake_api.add("GET", f"{MEMBERSHIPS}/om_01", payload=membership_payload())
    prior = OrganizationMembershipState(id="om_01", user_id="user_01", organization_id="org_01", role_slug="member")

    state = resource.update(
        OrganizationMembershipState(user_id="user_01", organization_id="org_01", role_slug="admin"), prior
    )

    assert [c.method for c in fake_api.calls] == ["GET"]
    assert state.id == "om_01"
    assert state.role_slug == "admin"


def test_update_failure_wrapped(resource, fake_api):
    fake_api.add("GET", f"{MEMBERSHIPS}/om_01", status=401)

    with pytest.raises(ResourceError, match="Error Updating Organization Membership"):
        resource.update(OrganizationMembershipState(), OrganizationMembershipState(id="om_01"))


def test_read_and_delete_not_found(resource, fake_api):
    fake_api.add("GET", f"{MEMBERSHIPS}/om_01", status=404)
    fake_api.add("DELETE", f"{MEMBERSHIPS}/om_01", status=404)

    assert resource.read(OrganizationMembershipState(id="om_01")) is None
    resource.delete(OrganizationMembershipState(id="om_01"))


def test_service_deactivate_and_reactivate(client, fake_api):
    fake_api.add("PUT", f"{MEMBERSHIPS}/om_01/deactivate", payload=membership_payload(status="inactive"))
    fake_api.add("PUT", f"{MEMBERSHIPS}/om_01/reactivate", payload=membership_payload(status="active"))
    service = MembershipService(client)

    assert service.deactivate_organization_membership("om_01").status == "inactive"
    assert service.reactivate_organization_membership("om_01").status == "active"
    assert fake_api.calls[0].data is None


def test_service_list_filters(client, fake_api):
    fake_api.add("GET", MEMBERSHIPS, payload={"data": [membership_payload(role="admin")], "list_metadata": {}})

    memberships = MembershipService(client).list_organization_memberships(user_id="user_01")

    assert [m.role_slug for m in memberships] == ["admin"]
    assert fake_api.calls[0].params == {"user_id": "user_01"}
