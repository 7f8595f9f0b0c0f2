"""WorkOS infrastructure-as-code provider core.

Reconciles declarative organization, user, membership and role definitions
against the WorkOS management API.
"""

__version__ = "0.1.0"
