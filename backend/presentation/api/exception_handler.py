import logging

from django.db import IntegrityError
from django.db.models.deletion import ProtectedError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from domain.shared.exceptions import (
    AuthenticationException,
    DomainException,
    EntityNotFoundException,
)

logger = logging.getLogger(__name__)


def _domain_status(exc: DomainException) -> int:
    if isinstance(exc, EntityNotFoundException):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, AuthenticationException):
        return status.HTTP_401_UNAUTHORIZED
    return status.HTTP_400_BAD_REQUEST


def custom_exception_handler(exc, context):
    """
    Maps database and domain errors to JSON responses, then defers to DRF.
    """
    if isinstance(exc, ProtectedError):
        protected = [str(o) for o in list(exc.protected_objects)[:5]]
        return Response(
            {
                'detail': 'Cannot delete object: it is referenced by other records.',
                'error': 'protected_error',
                'protected_objects_sample': protected,
            },
            status=status.HTTP_409_CONFLICT,
        )

    if isinstance(exc, IntegrityError):
        logger.warning(f"Integrity error in {context.get('view').__class__.__name__}: {exc}")
        return Response(
            {
                'detail': 'Data integrity violation.',
                'error': 'integrity_error',
            },
            status=status.HTTP_409_CONFLICT,
        )

    if isinstance(exc, DomainException):
        return Response(
            {
                'detail': exc.message,
                'error': exc.code.lower(),
                'details': exc.details,
            },
            status=_domain_status(exc),
        )

    return exception_handler(exc, context)
