"""
API permissions.
"""

from rest_framework.permissions import BasePermission

from infrastructure.auth.tokens import has_admin_claim


class IsAdminUserClaim(BasePermission):
    """
    Allow only requests whose access token carries the `admin` claim.

    Requests authenticated without a token (session, forced auth) fall
    back to the user's `is_admin` flag.
    """

    message = 'Admin access required.'

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False
        token = request.auth
        if token is not None and hasattr(token, 'get'):
            return has_admin_claim(token)
        return bool(getattr(user, 'is_admin', False))
