"""Settings loader with environment variable and Docker secrets integration."""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

SECRETS_DIR = Path("/run/secrets")
DEFAULT_BASE_URL = "https://api.workos.com"


class ConfigurationError(Exception):
    """Required provider configuration is missing or invalid."""
    pass


def _load_secret_from_file(secret_name: str, env_var: str | None = None) -> str | None:
    """
    Load secret from the environment or /run/secrets (Docker secrets pattern).

    Priority:
    1. Environment variable
    2. /run/secrets/{secret_name} (Docker secrets mount)

    Args:
        secret_name: Name of the secret file in /run/secrets
        env_var: Optional environment variable name checked first

    Returns:
        Secret value or None if not found
    """
    if env_var:
        secret_value = os.getenv(env_var)
        if secret_value:
            logger.debug(f"Loaded {env_var} from environment")
            return secret_value

    secret_file = SECRETS_DIR / secret_name
    if secret_file.exists() and secret_file.is_file():
        try:
            secret_value = secret_file.read_text().strip()
        except OSError as e:
            logger.warning(f"Failed to read {secret_file}: {e}")
            return None
        if secret_value:
            logger.debug(f"Loaded {secret_name} from {SECRETS_DIR}")
            return secret_value

    return None


@dataclass
class ProviderConfig:
    """Provider configuration container."""

    api_key: str
    client_id: str = ""
    base_url: str = DEFAULT_BASE_URL

    def __repr__(self) -> str:
        return f"ProviderConfig(api_key='***', client_id={self.client_id!r}, base_url={self.base_url!r})"


def load_settings(
    api_key: Optional[str] = None,
    client_id: Optional[str] = None,
    base_url: Optional[str] = None,
) -> ProviderConfig:
    """Resolve provider settings.

    Explicit values win, then WORKOS_API_KEY / WORKOS_CLIENT_ID /
    WORKOS_BASE_URL, then (API key only) /run/secrets/workos_api_key.

    Raises:
        ConfigurationError: If no API key can be found
    """
    resolved_key = api_key or _load_secret_from_file("workos_api_key", "WORKOS_API_KEY")
    if not resolved_key:
        raise ConfigurationError(
            "WorkOS API key is required. Set it in the provider configuration, "
            "the WORKOS_API_KEY environment variable, or /run/secrets/workos_api_key."
        )

    resolved_base_url = base_url or os.environ.get("WORKOS_BASE_URL") or DEFAULT_BASE_URL
    return ProviderConfig(
        api_key=resolved_key,
        client_id=client_id or os.environ.get("WORKOS_CLIENT_ID", ""),
        base_url=resolved_base_url.rstrip("/"),
    )
