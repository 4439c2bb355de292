"""
Site Settings Models.

Global, admin-editable application settings. Stored as a single row
keyed `global`.
"""

from django.conf import settings
from django.core.validators import MaxValueValidator
from django.db import models
from simple_history.models import HistoricalRecords

from .base import TimeStampedMixin


GLOBAL_SETTINGS_KEY = 'global'

MAX_PRECISION = 10


class SiteSettings(TimeStampedMixin):
    """
    Application-wide settings edited from the admin panel.

    Use `SiteSettings.load()` instead of querying directly; it creates the
    row with defaults on first access.
    """

    key = models.CharField(
        max_length=50,
        unique=True,
        default=GLOBAL_SETTINGS_KEY,
        editable=False,
        verbose_name="Key"
    )

    # General
    ai_suggestions = models.BooleanField(
        default=True,
        verbose_name="AI suggestions enabled"
    )
    default_precision = models.PositiveSmallIntegerField(
        default=2,
        validators=[MaxValueValidator(MAX_PRECISION)],
        verbose_name="Decimal places for results"
    )

    # Site identity
    site_name = models.CharField(
        max_length=200,
        default='OmniCalculator',
        verbose_name="Site name"
    )
    site_description = models.TextField(
        blank=True,
        default='Your go-to solution for all calculation needs.',
        verbose_name="Site description"
    )

    # Contact info
    support_email = models.EmailField(
        blank=True,
        verbose_name="Support email"
    )
    contact_phone = models.CharField(
        max_length=50,
        blank=True,
        verbose_name="Contact phone"
    )
    address = models.TextField(
        blank=True,
        verbose_name="Address"
    )

    # Social media
    facebook_url = models.URLField(blank=True, verbose_name="Facebook")
    twitter_url = models.URLField(blank=True, verbose_name="Twitter")
    linkedin_url = models.URLField(blank=True, verbose_name="LinkedIn")
    instagram_url = models.URLField(blank=True, verbose_name="Instagram")

    # Category names offered by the admin calculator form
    categories = models.JSONField(
        default=list,
        blank=True,
        verbose_name="Categories"
    )

    updated_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+',
        verbose_name="Updated by"
    )

    history = HistoricalRecords()

    class Meta:
        db_table = 'site_settings'
        verbose_name = 'Site settings'
        verbose_name_plural = 'Site settings'

    def __str__(self):
        return self.site_name

    @classmethod
    def load(cls) -> 'SiteSettings':
        obj, _ = cls.objects.get_or_create(key=GLOBAL_SETTINGS_KEY)
        return obj

    def add_category(self, name: str) -> bool:
        """Append a category name. Returns False if it is blank or already present."""
        name = (name or '').strip()
        if not name or name in self.categories:
            return False
        self.categories = [*self.categories, name]
        return True

    def remove_category(self, name: str) -> bool:
        name = (name or '').strip()
        if name not in self.categories:
            return False
        self.categories = [c for c in self.categories if c != name]
        return True
