"""
Catalog Views.

Public endpoints serve the resolved catalog (remote records merged with the
bundled ones). Admin endpoints edit the remote tables and invalidate the
resolver cache on every write.
"""

import logging

from asgiref.sync import async_to_sync
from rest_framework import status, viewsets
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from application.catalog.apps import get_catalog_resolver
from domain.shared.exceptions import EntityNotFoundException
from infrastructure.persistence.models import AuditLog, Calculator, CalculatorCategory
from presentation.api.permissions import IsAdminUserClaim
from ..serializers.catalog import (
    CalculatorSerializer,
    CalculatorCategorySerializer,
    CatalogCalculatorSerializer,
    CatalogCategorySerializer,
)
from .base import AdminModelViewSet

logger = logging.getLogger(__name__)


# =============================================================================
# PUBLIC CATALOG
# =============================================================================

class CatalogCalculatorViewSet(viewsets.ViewSet):
    """
    Resolved calculator catalog.

    Endpoints:
    - GET /calculators/ - all calculators with the resolution mode
    - GET /calculators/{slug}/ - one calculator
    """

    permission_classes = [AllowAny]
    authentication_classes = []
    lookup_field = 'slug'

    def list(self, request):
        result = async_to_sync(get_catalog_resolver().resolve_calculators)()
        return Response({
            'mode': result.mode.value,
            'count': len(result),
            'results': CatalogCalculatorSerializer(result.items, many=True).data,
        })

    def retrieve(self, request, slug=None):
        calculator = async_to_sync(get_catalog_resolver().get_calculator)(slug)
        if calculator is None:
            raise EntityNotFoundException('Calculator', slug)
        return Response(CatalogCalculatorSerializer(calculator).data)


class CatalogCategoryViewSet(viewsets.ViewSet):
    """
    Resolved categories, each with its calculators.

    Endpoints:
    - GET /calculator-categories/ - all categories with the resolution mode
    - GET /calculator-categories/{slug}/ - one category
    """

    permission_classes = [AllowAny]
    authentication_classes = []
    lookup_field = 'slug'

    def list(self, request):
        result = async_to_sync(get_catalog_resolver().resolve_categories)()
        return Response({
            'mode': result.mode.value,
            'count': len(result),
            'results': CatalogCategorySerializer(result.items, many=True).data,
        })

    def retrieve(self, request, slug=None):
        category = async_to_sync(get_catalog_resolver().get_category)(slug)
        if category is None:
            raise EntityNotFoundException('Calculator category', slug)
        return Response(CatalogCategorySerializer(category).data)


# =============================================================================
# ADMIN
# =============================================================================

class AdminCalculatorViewSet(AdminModelViewSet):
    """
    ViewSet for calculator records.

    Endpoints:
    - GET /admin/calculators/ - list
    - POST /admin/calculators/ - create (slug derived from name when blank)
    - GET /admin/calculators/{slug}/ - detail
    - PUT/PATCH /admin/calculators/{slug}/ - update
    - DELETE /admin/calculators/{slug}/ - delete
    - GET /admin/calculators/{slug}/history/ - change history
    """

    queryset = Calculator.objects.select_related('created_by', 'updated_by')
    serializer_class = CalculatorSerializer
    search_fields = ['name', 'description', 'slug']
    filterset_fields = ['category_slug', 'component', 'is_active']
    ordering_fields = ['name', 'slug', 'category_slug', 'created_at']
    ordering = ['created_at', 'slug']


class AdminCalculatorCategoryViewSet(AdminModelViewSet):
    """
    ViewSet for calculator categories.

    Endpoints:
    - GET /admin/calculator-categories/ - list
    - POST /admin/calculator-categories/ - create
    - GET/PUT/PATCH/DELETE /admin/calculator-categories/{slug}/
    - GET /admin/calculator-categories/{slug}/history/ - change history
    """

    queryset = CalculatorCategory.objects.select_related('created_by', 'updated_by')
    serializer_class = CalculatorCategorySerializer
    search_fields = ['name', 'description', 'slug']
    filterset_fields = ['is_active']
    ordering_fields = ['name', 'slug', 'created_at']
    ordering = ['name']


class CatalogRefreshView(APIView):
    """POST /admin/catalog/refresh/ - drop the cache and resolve again."""

    permission_classes = [IsAdminUserClaim]

    def post(self, request):
        resolver = get_catalog_resolver()
        resolver.invalidate()
        calculators = async_to_sync(resolver.resolve_calculators)()
        categories = async_to_sync(resolver.resolve_categories)()

        AuditLog.record(
            request,
            'catalog_refresh',
            object_repr='catalog',
            mode=calculators.mode.value,
        )
        logger.info(f"Catalog refreshed by {request.user}: {calculators.mode.value}")

        return Response({
            'mode': calculators.mode.value,
            'categories_mode': categories.mode.value,
            'calculators': len(calculators),
            'categories': len(categories),
        }, status=status.HTTP_200_OK)
