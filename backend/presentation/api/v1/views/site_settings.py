"""
Site Settings Views.

The global settings row, edited from the admin panel.
"""

from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from infrastructure.persistence.models import AuditLog, SiteSettings
from presentation.api.permissions import IsAdminUserClaim
from ..serializers.site_settings import CategoryNameSerializer, SiteSettingsSerializer


class SiteSettingsViewSet(viewsets.GenericViewSet):
    """
    Endpoints:
    - GET /admin/settings/ - current settings
    - PUT/PATCH /admin/settings/ - update settings
    - POST /admin/settings/add_category/ - {"name": ...}
    - POST /admin/settings/remove_category/ - {"name": ...}
    """

    serializer_class = SiteSettingsSerializer
    permission_classes = [IsAdminUserClaim]

    def get_object(self):
        return SiteSettings.load()

    def retrieve(self, request, *args, **kwargs):
        return Response(self.get_serializer(self.get_object()).data)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        serializer.save(updated_by=request.user)

        AuditLog.record(request, 'settings_update', object_repr=str(instance), fields=sorted(serializer.validated_data))
        return Response(serializer.data)

    def partial_update(self, request, *args, **kwargs):
        kwargs['partial'] = True
        return self.update(request, *args, **kwargs)

    @action(detail=False, methods=['post'])
    def add_category(self, request):
        serializer = CategoryNameSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        name = serializer.validated_data['name']

        instance = self.get_object()
        if not instance.add_category(name):
            return Response(
                {'name': [f"Category '{name}' already exists."]},
                status=status.HTTP_400_BAD_REQUEST
            )
        instance.updated_by = request.user
        instance.save(update_fields=['categories', 'updated_by', 'updated_at'])
        return Response(self.get_serializer(instance).data, status=status.HTTP_201_CREATED)

    @action(detail=False, methods=['post'])
    def remove_category(self, request):
        serializer = CategoryNameSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        name = serializer.validated_data['name']

        instance = self.get_object()
        if not instance.remove_category(name):
            return Response(
                {'name': [f"Category '{name}' not found."]},
                status=status.HTTP_404_NOT_FOUND
            )
        instance.updated_by = request.user
        instance.save(update_fields=['categories', 'updated_by', 'updated_at'])
        return Response(self.get_serializer(instance).data)
