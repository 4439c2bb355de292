"""
Base Views.

Common view mixins and base classes.
"""

from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response

from application.catalog.apps import get_catalog_resolver
from presentation.api.permissions import IsAdminUserClaim


class AuditViewMixin:
    """
    Mixin that adds audit fields on create/update.
    """

    def perform_create(self, serializer):
        """Set created_by and updated_by on create."""
        serializer.save(
            created_by=self.request.user,
            updated_by=self.request.user
        )

    def perform_update(self, serializer):
        """Set updated_by on update."""
        serializer.save(updated_by=self.request.user)


class CatalogInvalidationMixin:
    """
    Drops the resolved catalog cache after every successful write, so the
    public catalog reflects admin edits on its next read.
    """

    def invalidate_catalog(self):
        get_catalog_resolver().invalidate()

    def perform_create(self, serializer):
        super().perform_create(serializer)
        self.invalidate_catalog()

    def perform_update(self, serializer):
        super().perform_update(serializer)
        self.invalidate_catalog()

    def perform_destroy(self, instance):
        super().perform_destroy(instance)
        self.invalidate_catalog()


class HistoryViewMixin:
    """
    Mixin for accessing object history.
    """

    @action(detail=True, methods=['get'])
    def history(self, request, *args, **kwargs):
        """Get object history."""
        obj = self.get_object()

        if not hasattr(obj, 'history'):
            return Response(
                {'error': 'History is not available for this object'},
                status=status.HTTP_400_BAD_REQUEST
            )

        history = obj.history.all()[:50]
        data = [{
            'id': h.history_id,
            'date': h.history_date,
            'user': str(h.history_user) if h.history_user else None,
            'type': h.history_type,
            'changes': h.history_change_reason,
        } for h in history]

        return Response(data)


class AdminModelViewSet(
    CatalogInvalidationMixin,
    AuditViewMixin,
    HistoryViewMixin,
    viewsets.ModelViewSet
):
    """
    Base viewset for catalog records edited from the admin panel.
    """
    permission_classes = [IsAdminUserClaim]
    lookup_field = 'slug'

    def get_serializer_class(self):
        """
        Return different serializers per action.

        Override `serializer_classes` dict in subclass:
        serializer_classes = {
            'list': ListSerializer,
            'default': DetailSerializer,
        }
        """
        serializer_classes = getattr(self, 'serializer_classes', {})
        return serializer_classes.get(
            self.action,
            serializer_classes.get('default', super().get_serializer_class())
        )
