"""
JWT tokens.

Access and refresh tokens carry two extra claims, `admin` and `email`.
A session token is a longer-lived token minted from a verified access
token; it is stored in an httpOnly cookie and checked by
`AdminGateMiddleware` on admin panel requests.
"""

import logging
from datetime import timedelta

from django.conf import settings
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import AccessToken, Token

logger = logging.getLogger(__name__)

ADMIN_CLAIM = 'admin'
EMAIL_CLAIM = 'email'


class AdminClaimTokenObtainPairSerializer(TokenObtainPairSerializer):
    """Token pair serializer that stamps the admin flag and email into the tokens."""

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)
        token[ADMIN_CLAIM] = bool(user.is_admin)
        token[EMAIL_CLAIM] = user.email
        return token


class SessionToken(Token):
    token_type = 'session'
    lifetime = timedelta(days=settings.SESSION_TOKEN_LIFETIME_DAYS)


def tokens_for_user(user) -> dict:
    """Issue an access/refresh pair for `user`."""
    refresh = AdminClaimTokenObtainPairSerializer.get_token(user)
    return {
        'access': str(refresh.access_token),
        'refresh': str(refresh),
    }


def create_session_token(id_token: str) -> SessionToken:
    """
    Verify an access token and mint a session token for the same user.

    The `admin` and `email` claims are copied over unchanged.
    Raises TokenError when `id_token` is invalid or expired.
    """
    access = AccessToken(id_token)
    session = SessionToken()
    session[api_settings.USER_ID_CLAIM] = access[api_settings.USER_ID_CLAIM]
    session[ADMIN_CLAIM] = bool(access.get(ADMIN_CLAIM, False))
    session[EMAIL_CLAIM] = access.get(EMAIL_CLAIM, '')
    return session


def verify_session_token(raw: str) -> SessionToken:
    """Decode a session cookie value. Raises TokenError when it does not verify."""
    return SessionToken(raw)


def has_admin_claim(token) -> bool:
    return bool(token.get(ADMIN_CLAIM, False))


__all__ = [
    'ADMIN_CLAIM',
    'EMAIL_CLAIM',
    'AdminClaimTokenObtainPairSerializer',
    'SessionToken',
    'TokenError',
    'create_session_token',
    'has_admin_claim',
    'tokens_for_user',
    'verify_session_token',
]
