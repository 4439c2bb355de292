"""
Audit ORM Models.

Audit trail for sign-ins and admin panel actions. Field-level change
history of catalog records is kept separately by django-simple-history.
"""

from django.db import models
from django.conf import settings

import uuid


class AuditLog(models.Model):
    """
    Audit log entry: who did what, when, to which object.
    """
    
    ACTION_CHOICES = [
        ('login', 'Signed in'),
        ('logout', 'Signed out'),
        ('register', 'Registered'),
        ('session', 'Admin session started'),
        ('set_admin', 'Admin access changed'),
        ('delete_user', 'User deleted'),
        ('settings_update', 'Settings updated'),
        ('catalog_refresh', 'Catalog cache refreshed'),
    ]
    
    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False
    )
    
    # When
    timestamp = models.DateTimeField(
        auto_now_add=True,
        db_index=True,
        verbose_name="Time"
    )
    
    # Who
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='audit_logs',
        verbose_name="User"
    )
    user_ip = models.GenericIPAddressField(
        null=True,
        blank=True,
        verbose_name="IP address"
    )
    user_agent = models.CharField(
        max_length=500,
        blank=True,
        verbose_name="User agent"
    )
    
    # What action
    action = models.CharField(
        max_length=20,
        choices=ACTION_CHOICES,
        db_index=True,
        verbose_name="Action"
    )
    
    # Object representation at time of action
    object_repr = models.CharField(
        max_length=500,
        blank=True,
        verbose_name="Object"
    )
    
    # Additional context
    extra_data = models.JSONField(
        default=dict,
        blank=True,
        verbose_name="Extra data"
    )
    
    class Meta:
        db_table = 'audit_log'
        verbose_name = 'Audit log entry'
        verbose_name_plural = 'Audit log'
        ordering = ['-timestamp']
        indexes = [
            models.Index(fields=['user', 'timestamp'], name='audit_log_user_id_7b6c1e_idx'),
            models.Index(fields=['action', 'timestamp'], name='audit_log_action_5f2d0a_idx'),
        ]
    
    def __str__(self):
        return f"{self.timestamp}: {self.user} - {self.get_action_display()} {self.object_repr}"

    @classmethod
    def record(cls, request, action: str, object_repr: str = '', user=None, **extra) -> 'AuditLog':
        """Create an entry from an incoming request."""
        forwarded = request.META.get('HTTP_X_FORWARDED_FOR')
        ip = forwarded.split(',')[0].strip() if forwarded else request.META.get('REMOTE_ADDR')
        if user is None and getattr(request, 'user', None) is not None and request.user.is_authenticated:
            user = request.user
        return cls.objects.create(
            user=user,
            action=action,
            user_ip=ip or None,
            user_agent=request.META.get('HTTP_USER_AGENT', '')[:500],
            object_repr=object_repr[:500],
            extra_data=extra,
        )
