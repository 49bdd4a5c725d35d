"""
Helpers shared by the permission classes and views for reading a user's roles.
"""

from apps.common.constants import ROLE_ADMIN, ROLE_USER


def is_authenticated(user) -> bool:
    return getattr(user, "is_authenticated", False)


def is_admin(user) -> bool:
    if not is_authenticated(user):
        return False
    return getattr(user, "is_admin", False) or getattr(user, "is_superuser", False)


def get_roles(user) -> list[str]:
    roles = [ROLE_USER]
    if is_admin(user):
        roles.append(ROLE_ADMIN)
    return roles
