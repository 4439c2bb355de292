"""
Serializers Package.

All API serializers for the OmniCalculator backend.
"""

from .base import BaseModelSerializer, UserMinimalSerializer

from .users import (
    UserSerializer,
    RegisterSerializer,
    LoginSerializer,
    LogoutSerializer,
    SessionSerializer,
    SetAdminSerializer,
)

from .catalog import (
    CalculatorSerializer,
    CalculatorCategorySerializer,
    CatalogCalculatorSerializer,
    CatalogCategorySerializer,
)

from .site_settings import (
    SiteSettingsSerializer,
    CategoryNameSerializer,
)

from .suggestions import SuggestionRequestSerializer
