"""
Permissions for archiving functionality.

Provides role-based access control for archive/unarchive operations.
"""

from rest_framework.permissions import BasePermission
from users.permissions import IsManagerOrHigher


class CanArchiveRecords(BasePermission):
    """
    Permission to archive or restore records.
    Only managers can change availability of catalog and staff records.
    """

    def has_permission(self, request, view):
        if not request.user or not request.user.is_authenticated:
            return False

        return IsManagerOrHigher().has_permission(request, view)

    def has_object_permission(self, request, view, obj):
        return self.has_permission(request, view)
