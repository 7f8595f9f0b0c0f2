import pytest

from workos_provider.config import settings
from workos_provider.config.settings import ConfigurationError, load_settings


@pytest.fixture
def secrets_dir(monkeypatch, tmp_path):
    monkeypatch.setattr(settings, "SECRETS_DIR", tmp_path)
    return tmp_path


def test_explicit_values_win(monkeypatch, secrets_dir):
    monkeypatch.setenv("WORKOS_API_KEY", "sk_env")
    monkeypatch.setenv("WORKOS_CLIENT_ID", "client_env")
    monkeypatch.setenv("WORKOS_BASE_URL", "https://env.example.com")

    cfg = load_settings(api_key="sk_explicit", client_id="client_explicit", base_url="https://explicit.example.com/")

    assert cfg.api_key == "sk_explicit"
    assert cfg.client_id == "client_explicit"
    assert cfg.base_url == "https://explicit.example.com"


def test_environment_used_when_not_explicit(monkeypatch, secrets_dir):
    monkeypatch.setenv("WORKOS_API_KEY", "sk_env")
    monkeypatch.setenv("WORKOS_CLIENT_ID", "client_env")
    monkeypatch.setenv("WORKOS_BASE_URL", "https://env.example.com")

    cfg = load_settings()

    assert cfg.api_key == "sk_env"
    assert cfg.client_id == "client_env"
    assert cfg.base_url == "https://env.example.com"


def test_api_key_read_from_run_secrets(secrets_dir):
    (secrets_dir / "workos_api_key").write_text("sk_from_file\n")

    cfg = load_settings()

    assert cfg.api_key == "sk_from_file"
    assert cfg.base_url == "https://api.workos.com"
    assert cfg.client_id == ""


def test_environment_beats_secret_file(monkeypatch, secrets_dir):
    (secrets_dir / "workos_api_key").write_text("sk_from_file")
    monkeypatch.setenv("WORKOS_API_KEY", "sk_env")

    assert load_settings().api_key == "sk_env"


def test_empty_secret_file_ignored(secrets_dir):
    (secrets_dir / "workos_api_key").write_text("   \n")

    with pytest.raises(ConfigurationError):
        load_settings()


def test_missing_api_key_raises(secrets_dir):
    with pytest.raises(ConfigurationError, match="API key is required"):
        load_settings()


def test_repr_masks_api_key(secrets_dir):
    cfg = load_settings(api_key="sk_secret_value")
    assert "sk_secret_value" not in repr(cfg)
