"""workos_organization_role resource and data source."""
import pytest

from workos_provider.data_sources import OrganizationRoleDataModel, OrganizationRoleDataSource
from workos_provider.resources import OrganizationRoleResource, OrganizationRoleState, ResourceError

ROLES = "/authorization/organizations/org_123/roles"


def role_payload(**overrides):
    payload = {
        "object": "role",
        "id": "role_01",
        "slug": "org-billing-admin",
        "name": "Billing Admin",
        "description": "Manages invoices",
        "type": "OrganizationRole",
        "permissions": ["billing:read"],
        "created_at": "2024-04-01T00:00:00.000Z",
        "updated_at": "2024-04-01T00:00:00.000Z",
    }
    payload.update(overrides)
    return payload


def current_state():
    return OrganizationRoleState(
        id="role_01", organization_id="org_123", slug="org-billing-admin", name="Billing Admin",
        description="Manages invoices", type="OrganizationRole", permissions=["billing:read"],
        created_at="2024-04-01T00:00:00Z", updated_at="2024-04-01T00:00:00Z",
    )


@pytest.fixture
def resource(configured):
    return configured(OrganizationRoleResource)


def test_create_requires_prefix_before_network(resource, fake_api):
    with pytest.raises(ResourceError) as excinfo:
        resource.create(OrganizationRoleState(organization_id="org_123", slug="billing-admin", name="Billing"))

    assert excinfo.value.summary == "Invalid Role Slug"
    assert fake_api.calls == []


def test_create_sends_slug_name_description(resource, fake_api):
    fake_api.add("POST", ROLES, status=201, payload=role_payload(permissions=None))

    state = resource.create(OrganizationRoleState(
        organization_id="org_123", slug="org-billing-admin", name="Billing Admin", description="Manages invoices",
    ))

    assert fake_api.calls[0].json == {
        "slug": "org-billing-admin",
        "name": "Billing Admin",
        "description": "Manages invoices",
    }
    assert state.id == "role_01"
    assert state.type == "OrganizationRole"
    assert state.permissions == []


def test_create_without_description_omits_it(resource, fake_api):
    fake_api.add("POST", ROLES, status=201, payload=role_payload(description=None))

    state = resource.create(OrganizationRoleState(organization_id="org_123", slug="org-billing-admin", name="Billing"))

    assert "description" not in fake_api.calls[0].json
    assert state.description == ""


def test_update_skipped_when_unchanged(resource, fake_api):
    plan = OrganizationRoleState(
        organization_id="org_123", slug="org-billing-admin", name="Billing Admin", description="Manages invoices",
    )

    state = resource.update(plan, current_state())

    assert fake_api.calls == []
    assert state.id == "role_01"
    assert state.permissions == ["billing:read"]
    assert state.updated_at == "2024-04-01T00:00:00Z"


def test_update_patches_name_and_description_only(resource, fake_api):
    fake_api.add("PATCH", f"{ROLES}/org-billing-admin", payload=role_payload(
        name="Billing Owner", updated_at="2024-05-01T00:00:00.000Z",
    ))
    plan = OrganizationRoleState(
        organization_id="org_123", slug="org-billing-admin", name="Billing Owner",
        description="Manages invoices", permissions=["should:not:send"],
    )

    state = resource.update(plan, current_state())

    assert fake_api.calls[0].json == {"name": "Billing Owner", "description": "Manages invoices"}
    assert state.name == "Billing Owner"
    assert state.permissions == ["billing:read"]
    assert state.created_at == "2024-04-01T00:00:00Z"
    assert state.updated_at == "2024-05-01T00:00:00Z"


def test_read_not_found_and_delete_idempotent(resource, fake_api):
    fake_api.add("GET", f"{ROLES}/org-billing-admin", status=404)
    fake_api.add("DELETE", f"{ROLES}/org-billing-admin", status=404)

    assert resource.read(current_state()) is None
    resource.delete(current_state())


def test_import_parses_organization_and_slug(resource, fake_api):
    result = resource.import_state("org_123/billing-admin")

    assert result.state.organization_id == "org_123"
    assert result.state.slug == "billing-admin"
    assert fake_api.calls == []


@pytest.mark.parametrize("import_id", ["org_123", "org_123/", "/org-admin", "a/b/c"])
def test_import_rejects_malformed_ids(resource, fake_api, import_id):
    with pytest.raises(ResourceError) as excinfo:
        resource.import_state(import_id)

    assert excinfo.value.summary == "Invalid Import ID"
    assert fake_api.calls == []


def test_data_source_by_slug(configured, fake_api):
    fake_api.add("GET", f"{ROLES}/org-billing-admin", payload=role_payload())

    result = configured(OrganizationRoleDataSource).read(
        OrganizationRoleDataModel(organization_id="org_123", slug="org-billing-admin")
    )

    assert result.id == "role_01"
    assert result.permissions == ["billing:read"]


def test_data_source_by_id_searches_list(configured, fake_api):
    fake_api.add("GET", ROLES, payload={"data": [role_payload(id="role_00", slug="org-x"), role_payload()]})

    result = configured(OrganizationRoleDataSource).read(
        OrganizationRoleDataModel(organization_id="org_123", id="role_01")
    )

    assert result.slug == "org-billing-admin"


def test_data_source_requires_organization(configured, fake_api):
    with pytest.raises(ResourceError, match="Missing Required Attribute"):
        configured(OrganizationRoleDataSource).read(OrganizationRoleDataModel(slug="org-x"))
