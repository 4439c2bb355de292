"""
Suggestion Views.
"""

from django.conf import settings
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import ScopedRateThrottle
from rest_framework.views import APIView

from application.suggestions.service import suggest_expressions, suggest_next_step
from infrastructure.persistence.models import SiteSettings
from ..serializers.suggestions import SuggestionRequestSerializer


class SuggestionView(APIView):
    """
    POST /ai/suggest/

    {"calculator_name": ..., "context": {...}} -> {"suggestion": ..., "source": ...}
        (plus "prompt" when DEBUG is on)
    {"prompt": ...} -> {"suggestions": [...]}
    """

    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [ScopedRateThrottle]
    throttle_scope = 'suggestions'

    def post(self, request):
        serializer = SuggestionRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        calculator_name = data.get('calculator_name')
        if not calculator_name:
            return Response({'suggestions': suggest_expressions(data['prompt'])})

        if not SiteSettings.load().ai_suggestions:
            return Response({'suggestion': None, 'enabled': False})

        context = data.get('context')
        if context is not None and not isinstance(context, dict):
            context = {'value': context}

        suggestion = suggest_next_step(calculator_name, context)
        return Response(suggestion.to_dict(include_prompt=settings.DEBUG))
