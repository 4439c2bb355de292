"""
Auth Views.

Registration, JWT login/refresh/logout and the admin session cookie.
"""

import logging

from django.conf import settings
from django.utils import timezone
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.serializers import TokenRefreshSerializer
from rest_framework_simplejwt.tokens import RefreshToken

from domain.shared.exceptions import AuthenticationException
from infrastructure.auth.tokens import create_session_token, tokens_for_user
from infrastructure.persistence.models import AuditLog
from ..serializers.users import (
    LoginSerializer,
    LogoutSerializer,
    RegisterSerializer,
    SessionSerializer,
    UserSerializer,
)

logger = logging.getLogger(__name__)


class AuthViewSet(viewsets.GenericViewSet):
    """
    ViewSet for authentication.

    Endpoints:
    - POST /auth/register/ - create an account and get JWT tokens
    - POST /auth/login/ - login and get JWT tokens
    - POST /auth/refresh/ - refresh access token
    - POST /auth/logout/ - logout (blacklist refresh token)
    - GET /auth/me/ - get current user profile
    - POST /auth/session/ - exchange an access token for the admin session cookie
    """

    permission_classes = [AllowAny]

    @action(detail=False, methods=['post'], permission_classes=[AllowAny])
    def register(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()

        AuditLog.record(request, 'register', object_repr=str(user), user=user, is_admin=user.is_admin)
        logger.info(f"Registered {user.email} (admin={user.is_admin})")

        return Response({
            **tokens_for_user(user),
            'user': UserSerializer(user).data,
        }, status=status.HTTP_201_CREATED)

    @action(detail=False, methods=['post'], permission_classes=[AllowAny])
    def login(self, request):
        """Login and get JWT tokens."""
        serializer = LoginSerializer(data=request.data, context={'request': request})

        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        user = serializer.validated_data['user']

        user.last_login = timezone.now()
        user.save(update_fields=['last_login'])

        AuditLog.record(request, 'login', object_repr=str(user), user=user)

        return Response({
            **tokens_for_user(user),
            'user': UserSerializer(user).data,
        })

    @action(detail=False, methods=['post'], permission_classes=[AllowAny])
    def refresh(self, request):
        """Refresh access token."""
        serializer = TokenRefreshSerializer(data=request.data)

        try:
            serializer.is_valid(raise_exception=True)
        except TokenError as e:
            return Response(
                {"code": "token_not_valid", "detail": str(e)},
                status=status.HTTP_401_UNAUTHORIZED
            )

        return Response(serializer.validated_data, status=status.HTTP_200_OK)

    @action(detail=False, methods=['post'], permission_classes=[IsAuthenticated])
    def logout(self, request):
        """Logout and blacklist refresh token."""
        serializer = LogoutSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        refresh_token = serializer.validated_data.get('refresh')
        if refresh_token:
            try:
                RefreshToken(refresh_token).blacklist()
            except TokenError as e:
                return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        AuditLog.record(request, 'logout', object_repr=str(request.user))

        response = Response({'message': 'Signed out'})
        response.delete_cookie(settings.ADMIN_GATE_COOKIE)
        return response

    @action(detail=False, methods=['get'], permission_classes=[IsAuthenticated])
    def me(self, request):
        """Get current user profile."""
        return Response(UserSerializer(request.user).data)

    @action(detail=False, methods=['post'], permission_classes=[AllowAny], authentication_classes=[])
    def session(self, request):
        """
        Verify the posted access token (`id_token`) and set the admin
        session cookie.

        The cookie holds a session token valid for
        SESSION_TOKEN_LIFETIME_DAYS that keeps the token's `admin` claim.
        """
        serializer = SessionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            session = create_session_token(serializer.validated_data['id_token'])
        except TokenError as e:
            logger.warning(f"Session token request rejected: {e}")
            raise AuthenticationException(str(e))

        AuditLog.record(request, 'session', object_repr=session.get('email', ''), admin=session.get('admin', False))

        response = Response({'status': 'success', 'admin': session.get('admin', False)})
        response.set_cookie(
            settings.ADMIN_GATE_COOKIE,
            str(session),
            max_age=int(session.lifetime.total_seconds()),
            httponly=True,
            secure=not settings.DEBUG,
            samesite='Lax',
            path='/',
        )
        return response
