"""workos_user resource and data source."""
import pytest

from workos_provider.data_sources import UserDataModel, UserDataSource
from workos_provider.resources import ResourceError, UserResource, UserState, state_to_dict

USERS = "/user_management/users"


def user_payload(**overrides):
    payload = {
        "object": "user",
        "id": "user_01",
        "email": "ada@example.com",
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email_verified": True,
        "profile_picture_url": None,
        "created_at": "2024-03-01T09:00:00.000Z",
        "updated_at": "2024-03-01T09:00:00.000Z",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def resource(configured):
    return configured(UserResource)


def existing_state(**overrides):
    base = dict(
        id="user_01", email="ada@example.com", first_name="Ada", last_name="Lovelace",
        email_verified=True, password="hunter22",
    )
    base.update(overrides)
    return UserState(**base)


def test_create_sends_only_set_fields(resource, fake_api):
    fake_api.add("POST", USERS, status=201, payload=user_payload(last_name=""))

    state = resource.create(UserState(email="ada@example.com", first_name="Ada", email_verified=True, password="s3cret!!"))

    assert fake_api.calls[0].json == {
        "email": "ada@example.com",
        "email_verified": True,
        "first_name": "Ada",
        "password": "s3cret!!",
    }
    assert state.id == "user_01"
    assert state.last_name is None
    assert state.profile_picture_url is None
    assert state.password == "s3cret!!"


def test_create_rejects_bad_email_before_network(resource, fake_api):
    with pytest.raises(ResourceError, match="Invalid Email"):
        resource.create(UserState(email="not-an-email"))
    assert fake_api.calls == []


def test_update_with_only_first_name_still_sends_email_verified(resource, fake_api):
    fake_api.add("PUT", f"{USERS}/user_01", payload=user_payload(first_name="Augusta"))

    state = resource.update(existing_state(first_name="Augusta"), existing_state())

    assert fake_api.calls[0].json == {"first_name": "Augusta", "email_verified": True}
    assert state.first_name == "Augusta"
    assert state.password == "hunter22"


def test_update_keeps_created_at_from_state(resource, fake_api):
    fake_api.add("PUT", f"{USERS}/user_01", payload=user_payload(
        first_name="Augusta",
        created_at="2030-01-01T00:00:00.000Z",
        updated_at="2024-04-02T12:00:00.000Z",
    ))
    state = existing_state(created_at="2024-03-01T09:00:00Z", updated_at="2024-03-01T09:00:00Z")

    new_state = resource.update(existing_state(first_name="Augusta"), state)

    assert new_state.created_at == "2024-03-01T09:00:00Z"
    assert new_state.updated_at == "2024-04-02T12:00:00Z"


def test_update_clearing_name_sends_empty_string(resource, fake_api):
    fake_api.add("PUT", f"{USERS}/user_01", payload=user_payload(last_name=""))

    state = resource.update(existing_state(last_name=None, email_verified=False), existing_state())

    assert fake_api.calls[0].json == {"last_name": "", "email_verified": False}
    assert state.last_name is None


def test_read_keeps_write_only_passwords(resource, fake_api):
    fake_api.add("GET", f"{USERS}/user_01", payload=user_payload(first_name=""))

    state = resource.read(existing_state(password_hash="$2b$10$abc"))

    assert state.first_name is None
    assert state.password == "hunter22"
    assert state.password_hash == "$2b$10$abc"


def test_read_not_found(resource, fake_api):
    fake_api.add("GET", f"{USERS}/user_01", status=404)
    assert resource.read(existing_state()) is None


def test_delete_idempotent(resource, fake_api):
    fake_api.add("DELETE", f"{USERS}/user_01", status=404)
    resource.delete(existing_state())


def test_import_warns_about_passwords(resource):
    result = resource.import_state("user_01")

    assert result.state.id == "user_01"
    assert len(result.warnings) == 1
    assert "password" in result.warnings[0]


def test_state_repr_and_dict_mask_passwords():
    state = existing_state(password_hash="$2b$10$abc")
    assert "hunter22" not in repr(state)
    masked = state_to_dict(state, mask_sensitive=True)
    assert masked["password"] == "(sensitive)"
    assert masked["password_hash"] == "(sensitive)"
    assert masked["email"] == "ada@example.com"


def test_data_source_by_email(configured, fake_api):
    fake_api.add("GET", USERS, payload={"data": [user_payload()], "list_metadata": {}})

    result = configured(UserDataSource).read(UserDataModel(email="ada@example.com"))

    assert result.id == "user_01"
    assert result.email_verified is True
    assert fake_api.calls[0].params == {"email": "ada@example.com"}


def test_data_source_email_not_found(configured, fake_api):
    fake_api.add("GET", USERS, payload={"data": []})

    with pytest.raises(ResourceError) as excinfo:
        configured(UserDataSource).read(UserDataModel(email="ghost@example.com"))

    assert excinfo.value.summary == "User Not Found"
