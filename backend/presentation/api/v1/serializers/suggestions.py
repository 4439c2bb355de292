"""
Suggestion Serializers.
"""

from rest_framework import serializers


class SuggestionRequestSerializer(serializers.Serializer):
    """
    Either `calculator_name` (with optional `context`) or the older
    `prompt` form must be given.
    """

    calculator_name = serializers.CharField(required=False, max_length=200)
    context = serializers.JSONField(required=False)
    prompt = serializers.CharField(required=False, max_length=2000)

    def validate(self, attrs):
        if not attrs.get('calculator_name') and not attrs.get('prompt'):
            raise serializers.ValidationError('calculator_name or prompt is required.')
        return attrs
