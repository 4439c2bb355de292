"""
Persistence Models Package.

All Django ORM models for the OmniCalculator backend.
"""

# Base mixins and managers
from .base import (
    TimeStampedMixin,
    AuditMixin,
    ActiveManager,
)

# User models
from .users import (
    User,
    UserManager,
)

# Catalog models
from .catalog import (
    Calculator,
    CalculatorCategory,
    slugify_name,
)

# Settings models
from .site_settings import (
    SiteSettings,
    GLOBAL_SETTINGS_KEY,
    MAX_PRECISION,
)

# Audit models
from .audit import (
    AuditLog,
)


__all__ = [
    # Base
    'TimeStampedMixin',
    'AuditMixin',
    'ActiveManager',
    
    # Users
    'User',
    'UserManager',
    
    # Catalog
    'Calculator',
    'CalculatorCategory',
    'slugify_name',
    
    # Settings
    'SiteSettings',
    'GLOBAL_SETTINGS_KEY',
    'MAX_PRECISION',
    
    # Audit
    'AuditLog',
]
