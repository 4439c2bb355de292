"""
Base ORM Models and Mixins.

Provides common functionality for catalog models:
- UUID primary keys
- Timestamps (created_at, updated_at)
- Audit tracking
- Change history (django-simple-history)
"""

import uuid
from django.db import models
from django.conf import settings
from simple_history.models import HistoricalRecords


class TimeStampedMixin(models.Model):
    """Mixin for created_at and updated_at timestamps."""

    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name="Created at"
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name="Updated at"
    )

    class Meta:
        abstract = True


class AuditMixin(models.Model):
    """Mixin for tracking who created/modified records."""

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="%(class)s_created",
        verbose_name="Created by"
    )
    updated_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="%(class)s_updated",
        verbose_name="Updated by"
    )

    class Meta:
        abstract = True


class BaseModel(TimeStampedMixin, AuditMixin):
    """
    Base model for catalog records.

    Includes:
    - UUID primary key
    - Timestamps (created_at, updated_at)
    - Audit (created_by, updated_by)
    - Active flag (is_active); inactive records are left out of the catalog
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        verbose_name="ID"
    )

    is_active = models.BooleanField(
        default=True,
        db_index=True,
        verbose_name="Active"
    )

    class Meta:
        abstract = True

    def __str__(self):
        return str(self.id)


class BaseModelWithHistory(BaseModel):
    """
    Base model with historical records tracking.

    Uses django-simple-history to track all changes, deletions included.
    """

    history = HistoricalRecords(inherit=True)

    class Meta:
        abstract = True


class ActiveManager(models.Manager):
    """Manager limited to active records."""

    def get_queryset(self):
        return super().get_queryset().filter(is_active=True)
