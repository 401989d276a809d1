"""
Role based permissions.
"""

from typing import Dict, FrozenSet

from infiniti_cms.models.user import UserRole


ROLE_PERMISSIONS: Dict[UserRole, FrozenSet[str]] = {
    UserRole.ADMIN: frozenset({
        "users:read",
        "users:write",
        "users:delete",
        "clients:read",
        "clients:write",
        "clients:delete",
        "services:read",
        "services:write",
        "services:delete",
        "agreements:read",
        "agreements:write",
        "agreements:delete",
        "invoices:read",
        "invoices:write",
        "invoices:delete",
        "reports:read",
        "insights:read",
        "settings:read",
        "settings:write",
    }),
    UserRole.CSM: frozenset({
        "clients:read",
        "clients:write",
        "clients:delete",
        "services:read",
        "services:write",
        "agreements:read",
        "agreements:write",
    }),
    UserRole.FINANCE: frozenset({
        "clients:read",
        "services:read",
        "invoices:read",
        "invoices:write",
        "reports:read",
    }),
    UserRole.VIEWER: frozenset({
        "clients:read",
        "services:read",
        "agreements:read",
        "invoices:read",
        "reports:read",
    }),
}


def get_role_permissions(role) -> FrozenSet[str]:
    """Permissions granted to a role; unknown roles get none."""
    try:
        return ROLE_PERMISSIONS[UserRole(role)]
    except ValueError:
        return frozenset()


def has_permission(role, permission: str) -> bool:
    return permission in get_role_permissions(role)
