"""workos_organization resource and data source."""
import pytest
import requests

from workos_provider.core.workos import OrganizationService, WorkOSAPIError, is_not_found
from workos_provider.data_sources import OrganizationDataModel, OrganizationDataSource
from workos_provider.resources import OrganizationResource, OrganizationState, ResourceError

TS_CREATED = "2024-01-15T10:30:00.000Z"
TS_UPDATED = "2024-02-01T08:00:00.000Z"


def org_payload(name="Acme", domains=("acme.com",), updated_at=TS_CREATED, org_id="org_123"):
    return {
        "object": "organization",
        "id": org_id,
        "name": name,
        "allow_profiles_outside_organization": False,
        "domains": [
            {"object": "organization_domain", "id": f"dom_{i}", "domain": d, "state": "verified"}
            for i, d in enumerate(domains)
        ],
        "created_at": TS_CREATED,
        "updated_at": updated_at,
    }


@pytest.fixture
def resource(configured):
    return configured(OrganizationResource)


def test_create_sends_verified_domain_data(resource, fake_api):
    fake_api.add("POST", "/organizations", status=201, payload=org_payload(domains=("b.com", "a.com")))

    state = resource.create(OrganizationState(name="Acme", domains=["b.com", "a.com"]))

    assert fake_api.calls[0].json == {
        "name": "Acme",
        "domain_data": [
            {"domain": "a.com", "state": "verified"},
            {"domain": "b.com", "state": "verified"},
        ],
    }
    assert state.id == "org_123"
    assert state.name == "Acme"
    assert state.domains == ["b.com", "a.com"]
    assert state.created_at == "2024-01-15T10:30:00Z"


def test_create_without_domains_omits_domain_data(resource, fake_api):
    fake_api.add("POST", "/organizations", status=201, payload=org_payload(domains=()))

    resource.create(OrganizationState(name="Acme"))

    assert fake_api.calls[0].json == {"name": "Acme"}


def test_create_rejects_malformed_domain_before_network(resource, fake_api):
    with pytest.raises(ResourceError) as excinfo:
        resource.create(OrganizationState(name="Acme", domains=["not a domain"]))

    assert excinfo.value.summary == "Invalid Domain"
    assert fake_api.calls == []


def test_create_conflict_wrapped_with_remote_message(resource, fake_api):
    fake_api.add("POST", "/organizations", status=409, payload={"message": "Domain acme.com is already in use"})

    with pytest.raises(ResourceError) as excinfo:
        resource.create(OrganizationState(name="Acme", domains=["acme.com"]))

    assert excinfo.value.summary == "Error Creating Organization"
    assert "already in use" in excinfo.value.detail
    assert excinfo.value.__cause__ is not None


def test_read_with_zero_domains_is_null(resource, fake_api):
    fake_api.add("GET", "/organizations/org_123", payload=org_payload(domains=()))

    state = resource.read(OrganizationState(id="org_123", name="Acme", domains=["acme.com"]))

    assert state.domains is None


def test_read_overwrites_from_remote(resource, fake_api):
    fake_api.add("GET", "/organizations/org_123", payload=org_payload(name="Renamed", domains=("z.com", "y.com")))

    state = resource.read(OrganizationState(id="org_123", name="Acme"))

    assert state.name == "Renamed"
    assert state.domains == ["y.com", "z.com"]


def test_read_not_found_drops_state(resource, fake_api):
    fake_api.add("GET", "/organizations/org_123", status=404, payload={"message": "Not found"})

    assert resource.read(OrganizationState(id="org_123")) is None


def test_read_server_error_raises(resource, fake_api):
    fake_api.add("GET", "/organizations/org_123", status=500)

    with pytest.raises(ResourceError) as excinfo:
        resource.read(OrganizationState(id="org_123"))

    assert excinfo.value.summary == "Error Reading Organization"


def test_network_failure_while_handling_not_found_is_not_a_drop(resource, fake_api):
    fake_api.fail("GET", "/organizations/org_2", requests.ConnectionError("connection reset"))

    try:
        raise WorkOSAPIError(404, "Not found")
    except WorkOSAPIError:
        with pytest.raises(ResourceError) as excinfo:
            resource.read(OrganizationState(id="org_2"))

    assert excinfo.value.summary == "Error Reading Organization"
    assert not is_not_found(excinfo.value)


def test_network_failure_while_handling_not_found_fails_delete(resource, fake_api):
    fake_api.fail("DELETE", "/organizations/org_2", requests.ConnectionError("connection reset"))

    try:
        raise WorkOSAPIError(404, "Not found")
    except WorkOSAPIError:
        with pytest.raises(ResourceError, match="Error Deleting Organization"):
            resource.delete(OrganizationState(id="org_2"))


def test_update_keeps_created_at_and_copies_updated_at(resource, fake_api):
    fake_api.add("PUT", "/organizations/org_123", payload=org_payload(name="Acme2", updated_at=TS_UPDATED))
    state = OrganizationState(
        id="org_123", name="Acme", domains=["acme.com"],
        created_at="2024-01-15T10:30:00Z", updated_at="2024-01-15T10:30:00Z",
    )

    new_state = resource.update(OrganizationState(name="Acme2", domains=["acme.com"]), state)

    assert fake_api.calls[0].json == {"name": "Acme2", "domain_data": [{"domain": "acme.com", "state": "verified"}]}
    assert new_state.id == "org_123"
    assert new_state.name == "Acme2"
    assert new_state.created_at == "2024-01-15T10:30:00Z"
    assert new_state.updated_at == "2024-02-01T08:00:00Z"


def test_delete_twice_succeeds(resource, fake_api):
    fake_api.add("DELETE", "/organizations/org_123", status=204)
    fake_api.add("DELETE", "/organizations/org_123", status=404, payload={"message": "Not found"})
    state = OrganizationState(id="org_123")

    resource.delete(state)
    resource.delete(state)

    assert len(fake_api.calls) == 2


def test_delete_forbidden_raises(resource, fake_api):
    fake_api.add("DELETE", "/organizations/org_123", status=403)

    with pytest.raises(ResourceError, match="Error Deleting Organization"):
        resource.delete(OrganizationState(id="org_123"))


def test_import_passes_id_through(resource, fake_api):
    result = resource.import_state("org_123")
    assert result.state == OrganizationState(id="org_123")
    assert result.warnings == []
    assert fake_api.calls == []


def test_unconfigured_resource_fails_cleanly(fake_api):
    with pytest.raises(ResourceError) as excinfo:
        OrganizationResource().read(OrganizationState(id="org_123"))
    assert excinfo.value.summary == "Unconfigured Provider"
    assert fake_api.calls == []


def test_end_to_end_lifecycle(resource, fake_api):
    fake_api.add("POST", "/organizations", status=201, payload=org_payload())
    fake_api.add("GET", "/organizations/org_123", payload=org_payload())
    fake_api.add("PUT", "/organizations/org_123", payload=org_payload(name="Acme2", updated_at=TS_UPDATED))
    fake_api.add("DELETE", "/organizations/org_123", status=204)
    fake_api.add("GET", "/organizations/org_123", status=404)

    state = resource.create(OrganizationState(name="Acme", domains=["acme.com"]))
    state = resource.read(state)
    assert state.name == "Acme"
    assert state.domains == ["acme.com"]

    state = resource.update(OrganizationState(name="Acme2", domains=["acme.com"]), state)
    assert state.name == "Acme2"

    resource.delete(state)
    assert resource.read(state) is None
    assert [c.method for c in fake_api.calls] == ["POST", "GET", "PUT", "DELETE", "GET"]


# ─────────────────────────────────────────────────────────────────────────────
# Data source
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture
def data_source(configured):
    return configured(OrganizationDataSource)


def test_data_source_by_id(data_source, fake_api):
    fake_api.add("GET", "/organizations/org_123", payload=org_payload())

    result = data_source.read(OrganizationDataModel(id="org_123"))

    assert result.name == "Acme"
    assert result.domains == ["acme.com"]
    assert result.allow_profiles_outside_organization is False


def test_data_source_by_domain_takes_first_match(data_source, fake_api):
    fake_api.add("GET", "/organizations", payload={
        "data": [org_payload(org_id="org_first"), org_payload(org_id="org_second")],
        "list_metadata": {},
    })

    result = data_source.read(OrganizationDataModel(domain="acme.com"))

    assert result.id == "org_first"
    assert result.domain == "acme.com"
    assert fake_api.calls[0].params == {"domains": "acme.com"}


def test_data_source_domain_without_match_is_not_found(data_source, fake_api):
    fake_api.add("GET", "/organizations", payload={"data": [], "list_metadata": {}})

    with pytest.raises(ResourceError) as excinfo:
        data_source.read(OrganizationDataModel(domain="nobody.com"))

    assert excinfo.value.summary == "Organization Not Found"
    assert is_not_found(excinfo.value)


def test_data_source_requires_a_key(data_source, fake_api):
    with pytest.raises(ResourceError) as excinfo:
        data_source.read(OrganizationDataModel())

    assert excinfo.value.summary == "Missing Required Attribute"
    assert fake_api.calls == []


def test_service_lists_organizations_across_pages(client, fake_api):
    fake_api.add("GET", "/organizations", payload={"data": [org_payload(org_id="org_1")], "list_metadata": {"after": "org_1"}})
    fake_api.add("GET", "/organizations", payload={"data": [org_payload(org_id="org_2")], "list_metadata": {}})

    orgs = OrganizationService(client).list_organizations(["acme.com", "acme.io"])

    assert [o.id for o in orgs] == ["org_1", "org_2"]
    assert fake_api.calls[0].params == {"domains": "acme.com,acme.io"}
    assert fake_api.calls[1].params["after"] == "org_1"
