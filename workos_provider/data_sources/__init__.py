"""Data sources exposed to the host runtime."""
from .base import DataSource
from .connection import ConnectionDataModel, ConnectionDataSource
from .directory import DirectoryDataModel, DirectoryDataSource
from .directory_group import DirectoryGroupDataModel, DirectoryGroupDataSource
from .directory_user import DirectoryUserDataModel, DirectoryUserDataSource
from .organization import OrganizationDataModel, OrganizationDataSource
from .organization_role import OrganizationRoleDataModel, OrganizationRoleDataSource
from .user import UserDataModel, UserDataSource

__all__ = [
    "DataSource",
    "ConnectionDataModel",
    "ConnectionDataSource",
    "DirectoryDataModel",
    "DirectoryDataSource",
    "DirectoryGroupDataModel",
    "DirectoryGroupDataSource",
    "DirectoryUserDataModel",
    "DirectoryUserDataSource",
    "OrganizationDataModel",
    "OrganizationDataSource",
    "OrganizationRoleDataModel",
    "OrganizationRoleDataSource",
    "UserDataModel",
    "UserDataSource",
]
