"""
Catalog Serializers.

Two families:
- model serializers for the admin CRUD over the catalog tables
- read serializers for resolved catalog entities served to the public site
"""

from rest_framework import serializers

from domain.catalog.registry import CalculatorKind, require_kind
from domain.shared.exceptions import CatalogIntegrityException
from infrastructure.persistence.models import Calculator, CalculatorCategory, slugify_name
from .base import AuditFieldsMixin, BaseModelSerializer


class SlugFromNameMixin:
    """Fill a blank slug from the name and enforce its uniqueness."""

    def validate(self, attrs):
        attrs = super().validate(attrs)
        slug = attrs.get('slug')
        if slug == '' or (slug is None and self.instance is None):
            name = attrs.get('name') or getattr(self.instance, 'name', '')
            slug = slugify_name(name)
            if not slug:
                raise serializers.ValidationError({'slug': 'Cannot derive a slug from this name.'})
            attrs['slug'] = slug

        if slug:
            model = self.Meta.model
            clash = model.objects.filter(slug=slug)
            if self.instance is not None:
                clash = clash.exclude(pk=self.instance.pk)
            if clash.exists():
                raise serializers.ValidationError({'slug': f"Slug '{slug}' is already in use."})
        return attrs


# =============================================================================
# ADMIN (MODEL) SERIALIZERS
# =============================================================================

class CalculatorCategorySerializer(SlugFromNameMixin, AuditFieldsMixin, BaseModelSerializer):
    """Category record for the admin panel."""

    calculators_count = serializers.SerializerMethodField()

    class Meta:
        model = CalculatorCategory
        fields = [
            'id', 'name', 'slug', 'description', 'icon', 'is_active',
            'calculators_count',
            'created_at', 'updated_at', 'created_by', 'updated_by',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']
        extra_kwargs = {
            'slug': {'required': False, 'allow_blank': True, 'validators': []},
        }

    def get_calculators_count(self, obj):
        return Calculator.objects.filter(category_slug=obj.slug, is_active=True).count()


class CalculatorSerializer(SlugFromNameMixin, AuditFieldsMixin, BaseModelSerializer):
    """Calculator record for the admin panel."""

    client_module = serializers.SerializerMethodField()

    class Meta:
        model = Calculator
        fields = [
            'id', 'name', 'slug', 'description', 'component', 'client_module',
            'icon', 'category_slug', 'is_active',
            'created_at', 'updated_at', 'created_by', 'updated_by',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']
        extra_kwargs = {
            'slug': {'required': False, 'allow_blank': True, 'validators': []},
        }

    def get_client_module(self, obj):
        return CalculatorKind.from_component(obj.component).client_module

    def validate_component(self, value):
        try:
            return require_kind(value).value
        except CatalogIntegrityException as e:
            raise serializers.ValidationError(e.message)


# =============================================================================
# RESOLVED CATALOG (ENTITY) SERIALIZERS
# =============================================================================

class CatalogCalculatorSerializer(serializers.Serializer):
    """Resolved calculator, remote or bundled."""

    id = serializers.CharField()
    name = serializers.CharField()
    slug = serializers.CharField()
    description = serializers.CharField()
    component = serializers.CharField()
    icon = serializers.CharField()
    category_slug = serializers.CharField()
    kind = serializers.SerializerMethodField()
    client_module = serializers.SerializerMethodField()
    component_available = serializers.SerializerMethodField()

    def get_kind(self, obj):
        return CalculatorKind.from_component(obj.component).value

    def get_client_module(self, obj):
        return CalculatorKind.from_component(obj.component).client_module

    def get_component_available(self, obj):
        return CalculatorKind.from_component(obj.component).is_known


class CatalogCategorySerializer(serializers.Serializer):
    """Resolved category with its calculators."""

    id = serializers.CharField()
    name = serializers.CharField()
    slug = serializers.CharField()
    description = serializers.CharField()
    icon = serializers.CharField()
    calculators = CatalogCalculatorSerializer(many=True)
