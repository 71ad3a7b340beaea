# users/permissions.py

from rest_framework.permissions import BasePermission


class IsStoreAdmin(BasePermission):
    """
    Inventory console access:
    - role == admin, OR
    - Django staff (accounts created through the Django admin)
    """

    message = "Only store admins can manage the storefront."

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_store_admin)
