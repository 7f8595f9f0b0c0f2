"""Provider configuration."""
from .settings import ConfigurationError, ProviderConfig, load_settings

__all__ = ["ConfigurationError", "ProviderConfig", "load_settings"]
