from rest_framework import permissions
from .models import User


class IsManagerOrHigher(permissions.BasePermission):
    def has_permission(self, request, view):
        return bool(
            request.user
            and request.user.is_authenticated
            and (request.user.role == User.Role.MANAGER or request.user.is_superuser)
        )


class IsPOSStaff(permissions.BasePermission):
    """Managers and cashiers: anyone allowed to ring up orders."""

    def has_permission(self, request, view):
        return bool(
            request.user
            and request.user.is_authenticated
            and request.user.role in [User.Role.MANAGER, User.Role.CASHIER]
        )


class ReadOnlyForCashiers(permissions.BasePermission):
    """
    Custom permission to allow all POS staff to read,
    but only managers to create/update/delete.
    """

    def has_permission(self, request, view):
        if request.method in permissions.SAFE_METHODS:
            return IsPOSStaff().has_permission(request, view)

        return IsManagerOrHigher().has_permission(request, view)
