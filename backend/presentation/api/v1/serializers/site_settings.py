"""
Site Settings Serializers.
"""

from rest_framework import serializers

from infrastructure.persistence.models import SiteSettings, MAX_PRECISION
from .base import UserMinimalSerializer


class SiteSettingsSerializer(serializers.ModelSerializer):
    """The global settings row."""

    default_precision = serializers.IntegerField(min_value=0, max_value=MAX_PRECISION, required=False)
    categories = serializers.ListField(
        child=serializers.CharField(allow_blank=True, max_length=100),
        required=False,
    )
    updated_by = UserMinimalSerializer(read_only=True)

    class Meta:
        model = SiteSettings
        fields = [
            'ai_suggestions', 'default_precision',
            'site_name', 'site_description',
            'support_email', 'contact_phone', 'address',
            'facebook_url', 'twitter_url', 'linkedin_url', 'instagram_url',
            'categories',
            'updated_at', 'updated_by',
        ]
        read_only_fields = ['updated_at', 'updated_by']

    def validate_categories(self, value):
        """Trim names, drop blanks, reject duplicates."""
        cleaned = []
        for name in value:
            name = name.strip()
            if not name:
                continue
            if name in cleaned:
                raise serializers.ValidationError(f"Duplicate category '{name}'.")
            cleaned.append(name)
        return cleaned


class CategoryNameSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100)

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Category name cannot be blank.')
        return value
