"""
API v1 URL Configuration.

All API endpoints for version 1.
"""

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views.auth import AuthViewSet
from .views.users import AdminUserViewSet
from .views.catalog import (
    CatalogCalculatorViewSet,
    CatalogCategoryViewSet,
    AdminCalculatorViewSet,
    AdminCalculatorCategoryViewSet,
    CatalogRefreshView,
)
from .views.site_settings import SiteSettingsViewSet
from .views.suggestions import SuggestionView
from .views.dashboard import DashboardViewSet

# Create router
router = DefaultRouter()

# Auth
router.register(r'auth', AuthViewSet, basename='auth')

# Public catalog
router.register(r'calculators', CatalogCalculatorViewSet, basename='calculators')
router.register(r'calculator-categories', CatalogCategoryViewSet, basename='calculator-categories')

# Admin panel
router.register(r'admin/calculators', AdminCalculatorViewSet, basename='admin-calculators')
router.register(r'admin/calculator-categories', AdminCalculatorCategoryViewSet, basename='admin-calculator-categories')
router.register(r'admin/users', AdminUserViewSet, basename='admin-users')
router.register(r'admin/dashboard', DashboardViewSet, basename='admin-dashboard')

site_settings = SiteSettingsViewSet.as_view({
    'get': 'retrieve',
    'put': 'update',
    'patch': 'partial_update',
})

app_name = 'api_v1'

urlpatterns = [
    path('admin/settings/', site_settings, name='admin-settings'),
    path(
        'admin/settings/add_category/',
        SiteSettingsViewSet.as_view({'post': 'add_category'}),
        name='admin-settings-add-category',
    ),
    path(
        'admin/settings/remove_category/',
        SiteSettingsViewSet.as_view({'post': 'remove_category'}),
        name='admin-settings-remove-category',
    ),
    path('admin/catalog/refresh/', CatalogRefreshView.as_view(), name='admin-catalog-refresh'),
    path('ai/suggest/', SuggestionView.as_view(), name='ai-suggest'),
    path('', include(router.urls)),
]
