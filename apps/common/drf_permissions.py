from django.conf import settings
from rest_framework import permissions
from rest_framework.exceptions import NotFound

from .utils import is_admin, is_authenticated


class IsAdminRole(permissions.BasePermission):
    message = "Administrator role required."

    def has_permission(self, request, view) -> bool:
        return is_authenticated(request.user) and is_admin(request.user)


class IsAdminOrReadOnly(permissions.BasePermission):
    message = "Administrator role required."

    def has_permission(self, request, view) -> bool:
        if request.method in permissions.SAFE_METHODS:
            return True
        return is_authenticated(request.user) and is_admin(request.user)


class TestEndpointsEnabled(permissions.BasePermission):
    """Hides the reset endpoints unless ENABLE_TEST_ENDPOINTS is set."""

    def has_permission(self, request, view) -> bool:
        if not getattr(settings, "ENABLE_TEST_ENDPOINTS", False):
            raise NotFound()
        return True
