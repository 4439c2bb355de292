"""
User Views.

Admin panel user management.
"""

import logging

from django.contrib.auth import get_user_model
from rest_framework import filters, mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from infrastructure.persistence.models import AuditLog
from presentation.api.pagination import AdminUserPagination
from presentation.api.permissions import IsAdminUserClaim
from ..serializers.users import SetAdminSerializer, UserSerializer

logger = logging.getLogger(__name__)

User = get_user_model()


class AdminUserViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet
):
    """
    ViewSet for user management.

    Endpoints:
    - GET /admin/users/ - list users, newest first, 10 per page (?search=)
    - GET /admin/users/{id}/ - get user details
    - DELETE /admin/users/{id}/ - delete user
    - POST /admin/users/{id}/set_admin/ - grant or revoke admin access
    """

    queryset = User.objects.all()
    serializer_class = UserSerializer
    permission_classes = [IsAdminUserClaim]
    pagination_class = AdminUserPagination

    search_fields = ['full_name', 'email']
    ordering = ['-date_joined']

    filter_backends = [
        filters.SearchFilter,
        filters.OrderingFilter,
    ]

    def perform_destroy(self, instance):
        AuditLog.record(self.request, 'delete_user', object_repr=str(instance), email=instance.email)
        logger.info(f"User {instance.email} deleted by {self.request.user}")
        instance.delete()

    @action(detail=True, methods=['post'])
    def set_admin(self, request, pk=None):
        """Set the admin flag. Body: {"is_admin": true|false}."""
        user = self.get_object()
        serializer = SetAdminSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        is_admin = serializer.validated_data['is_admin']
        user.set_admin(is_admin)

        AuditLog.record(request, 'set_admin', object_repr=str(user), is_admin=is_admin)
        logger.info(f"Admin access for {user.email} set to {is_admin} by {request.user}")

        return Response(UserSerializer(user).data, status=status.HTTP_200_OK)
