"""
User Serializers.

Serializers for registration, login, admin sessions and the admin user list.
"""

from rest_framework import serializers
from django.contrib.auth import get_user_model, authenticate
from django.contrib.auth.password_validation import validate_password
from django.db import transaction

from .base import BaseModelSerializer

User = get_user_model()


class UserSerializer(BaseModelSerializer):
    """User as shown in the admin panel and by /auth/me/."""

    full_name = serializers.CharField(source='get_full_name', read_only=True)

    class Meta:
        model = User
        fields = [
            'id', 'username', 'email', 'full_name',
            'is_admin', 'is_active',
            'date_joined', 'last_login',
        ]
        read_only_fields = fields


class RegisterSerializer(serializers.Serializer):
    """
    Account registration.

    `register_as_admin` is only honored while no admin account exists,
    which lets the very first account bootstrap the admin panel.
    """

    full_name = serializers.CharField(min_length=2, max_length=200)
    email = serializers.EmailField()
    password = serializers.CharField(
        min_length=6,
        write_only=True,
        style={'input_type': 'password'}
    )
    register_as_admin = serializers.BooleanField(required=False, default=False)

    def validate_full_name(self, value):
        value = value.strip()
        if len(value) < 2:
            raise serializers.ValidationError('Name must be at least 2 characters.')
        return value

    def validate_email(self, value):
        value = value.strip().lower()
        if User.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError('An account with this email already exists.')
        return value

    def validate(self, attrs):
        candidate = User(username=attrs['email'], email=attrs['email'], full_name=attrs['full_name'])
        validate_password(attrs['password'], user=candidate)

        if attrs.get('register_as_admin') and User.objects.admin_exists():
            raise serializers.ValidationError(
                {'register_as_admin': 'An admin account already exists.'}
            )
        return attrs

    @transaction.atomic
    def create(self, validated_data):
        user = User.objects.create_user(
            username=validated_data['email'],
            email=validated_data['email'],
            password=validated_data['password'],
            full_name=validated_data['full_name'],
        )
        if validated_data.get('register_as_admin'):
            user.set_admin(True)
        return user


class LoginSerializer(serializers.Serializer):
    """Login by username or email."""

    username = serializers.CharField(required=True)
    password = serializers.CharField(
        required=True,
        style={'input_type': 'password'}
    )

    def validate(self, attrs):
        username = attrs.get('username')
        password = attrs.get('password')

        user = authenticate(
            request=self.context.get('request'),
            username=username,
            password=password
        )
        if not user:
            raise serializers.ValidationError(
                'Invalid login or password.',
                code='authorization'
            )
        attrs['user'] = user
        return attrs


class LogoutSerializer(serializers.Serializer):
    refresh = serializers.CharField(required=False, allow_blank=True)


class SessionSerializer(serializers.Serializer):
    """Body of POST /auth/session/."""

    id_token = serializers.CharField(
        error_messages={'required': 'id_token is required.'}
    )


class SetAdminSerializer(serializers.Serializer):
    is_admin = serializers.BooleanField(
        error_messages={'required': 'is_admin is required.'}
    )

    def to_internal_value(self, data):
        # BooleanField would accept "true"/"1"; only real booleans are allowed
        if isinstance(data, dict) and 'is_admin' in data and not isinstance(data['is_admin'], bool):
            raise serializers.ValidationError({'is_admin': 'Must be a boolean.'})
        return super().to_internal_value(data)
