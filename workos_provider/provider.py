"""Provider entry point: configuration plus the registry of resources and data sources."""
from __future__ import annotations
import logging
from typing import Dict, List, Optional

from . import __version__
from .config import ConfigurationError, load_settings
from .core.workos import WorkOSClient
from .data_sources import (
    ConnectionDataSource,
    DataSource,
    DirectoryDataSource,
    DirectoryGroupDataSource,
    DirectoryUserDataSource,
    OrganizationDataSource,
    OrganizationRoleDataSource,
    UserDataSource,
)
from .resources import (
    ConnectionResource,
    DirectoryResource,
    OrganizationMembershipResource,
    OrganizationResource,
    OrganizationRoleResource,
    Resource,
    ResourceError,
    UserResource,
    WebhookResource,
)

logger = logging.getLogger(__name__)

PROVIDER_TYPE_NAME = "workos"

RESOURCES = [
    OrganizationResource,
    ConnectionResource,
    DirectoryResource,
    WebhookResource,
    UserResource,
    OrganizationMembershipResource,
    OrganizationRoleResource,
]

DATA_SOURCES = [
    OrganizationDataSource,
    ConnectionDataSource,
    DirectoryDataSource,
    DirectoryUserDataSource,
    DirectoryGroupDataSource,
    UserDataSource,
    OrganizationRoleDataSource,
]


class WorkOSProvider:
    """Builds the shared client and hands it to every resource and data source.

    Usage:
        provider = WorkOSProvider()
        provider.configure(api_key="sk_test_...")
        org = provider.resource("workos_organization")
    """

    def __init__(self, version: str = __version__):
        self.version = version
        self.client: Optional[WorkOSClient] = None

    def metadata(self) -> Dict[str, str]:
        return {"type_name": PROVIDER_TYPE_NAME, "version": self.version}

    def configure(
        self,
        api_key: Optional[str] = None,
        client_id: Optional[str] = None,
        base_url: Optional[str] = None,
    ) -> WorkOSClient:
        """Resolve settings and create the client shared by all handlers.

        Raises:
            ResourceError: If no API key is configured
        """
        try:
            settings = load_settings(api_key=api_key, client_id=client_id, base_url=base_url)
        except ConfigurationError as err:
            raise ResourceError("Missing API Key", str(err)) from err

        self.client = WorkOSClient(settings.api_key, settings.client_id, settings.base_url)
        logger.info(f"Configured WorkOS provider v{self.version} (base_url={settings.base_url})")
        return self.client

    def resources(self) -> List[Resource]:
        """Fresh instances of every resource, bound to the configured client."""
        handlers = [cls() for cls in RESOURCES]
        for handler in handlers:
            handler.configure(self.client)
        return handlers

    def data_sources(self) -> List[DataSource]:
        handlers = [cls() for cls in DATA_SOURCES]
        for handler in handlers:
            handler.configure(self.client)
        return handlers

    def resource(self, type_name: str) -> Resource:
        """Return the configured resource handler for ``type_name``.

        Raises:
            ResourceError: If no resource has that type name
        """
        for handler in self.resources():
            if handler.type_name == type_name:
                return handler
        raise ResourceError("Unknown Resource Type", f"{type_name} is not a resource of this provider")

    def data_source(self, type_name: str) -> DataSource:
        for handler in self.data_sources():
            if handler.type_name == type_name:
                return handler
        raise ResourceError("Unknown Data Source Type", f"{type_name} is not a data source of this provider")
