"""
User Models.

Custom user model for site accounts and admin panel access.
"""

import uuid

from django.db import models
from django.contrib.auth.models import AbstractUser, UserManager as DjangoUserManager
from django.contrib.auth.validators import UnicodeUsernameValidator


class UserManager(DjangoUserManager):
    """User manager with admin-panel helpers."""

    def admins(self):
        return self.filter(is_admin=True)

    def admin_exists(self) -> bool:
        return self.admins().exists()


class User(AbstractUser):
    """
    Custom User model.

    Accounts register with full name, email and password; the username
    defaults to the email. `is_admin` grants access to the admin panel and
    is mirrored into the `admin` claim of issued tokens.
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False
    )

    username_validator = UnicodeUsernameValidator()

    username = models.CharField(
        max_length=150,
        unique=True,
        validators=[username_validator],
        verbose_name="Username"
    )
    email = models.EmailField(
        unique=True,
        verbose_name="Email"
    )

    full_name = models.CharField(
        max_length=200,
        blank=True,
        verbose_name="Full name"
    )

    is_admin = models.BooleanField(
        default=False,
        db_index=True,
        verbose_name="Admin panel access"
    )

    objects = UserManager()

    class Meta:
        db_table = 'users'
        verbose_name = 'User'
        verbose_name_plural = 'Users'
        ordering = ['-date_joined']

    def __str__(self):
        return self.get_full_name() or self.email or self.username

    def get_full_name(self):
        """Return full name, falling back to first/last name."""
        if self.full_name:
            return self.full_name
        return super().get_full_name()

    def get_short_name(self):
        return self.first_name or self.get_full_name() or self.username

    def set_admin(self, is_admin: bool) -> None:
        """Grant or revoke admin panel access (also toggles Django admin staff flag)."""
        self.is_admin = is_admin
        self.is_staff = is_admin
        self.save(update_fields=['is_admin', 'is_staff'])
