"""
Authentication backends.
"""

from django.contrib.auth import get_user_model
from django.contrib.auth.backends import ModelBackend
from django.db.models import Q

User = get_user_model()


class EmailOrUsernameBackend(ModelBackend):
    """
    Accept either the username or the email address as login.

    Email matching is case-insensitive.
    """

    def authenticate(self, request, username=None, password=None, **kwargs):
        if username is None:
            username = kwargs.get(User.USERNAME_FIELD)
        if not username or password is None:
            return None

        user = User._default_manager.filter(
            Q(username=username) | Q(email__iexact=username)
        ).order_by('date_joined').first()

        if user is None:
            # Run the hasher anyway to even out response times
            User().set_password(password)
            return None

        if user.check_password(password) and self.user_can_authenticate(user):
            return user
        return None
