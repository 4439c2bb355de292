"""
Dashboard Views.

Admin panel overview: user and catalog totals, calculators per category,
user growth, and whether the catalog is currently served in fallback mode.
"""

from asgiref.sync import async_to_sync
from django.contrib.auth import get_user_model
from django.db.models import Count
from django.db.models.functions import TruncDate
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from application.catalog.apps import get_catalog_resolver
from infrastructure.persistence.models import Calculator
from presentation.api.permissions import IsAdminUserClaim

User = get_user_model()


class DashboardViewSet(viewsets.ViewSet):
    """
    Endpoints:
    - GET /admin/dashboard/summary/ - complete dashboard data
    """

    permission_classes = [IsAdminUserClaim]

    def _user_growth(self):
        """Cumulative user count per join date, oldest first."""
        per_day = (
            User.objects
            .annotate(day=TruncDate('date_joined'))
            .values('day')
            .annotate(joined=Count('id'))
            .order_by('day')
        )
        growth = []
        total = 0
        for row in per_day:
            total += row['joined']
            growth.append({'date': row['day'].isoformat(), 'users': total})
        return growth

    def _calculators_per_category(self):
        rows = (
            Calculator.active
            .values('category_slug')
            .annotate(count=Count('id'))
            .order_by('category_slug')
        )
        return {row['category_slug']: row['count'] for row in rows}

    @action(detail=False, methods=['get'])
    def summary(self, request):
        catalog = async_to_sync(get_catalog_resolver().resolve_calculators)()

        return Response({
            'totals': {
                'users': User.objects.count(),
                'admins': User.objects.admins().count(),
                'calculators': Calculator.active.count(),
                'catalog_calculators': len(catalog),
            },
            'calculators_per_category': self._calculators_per_category(),
            'user_growth': self._user_growth(),
            'catalog_mode': catalog.mode.value,
        })
