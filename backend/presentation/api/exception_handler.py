import logging

from django.db import IntegrityError
from django.db.models.deletion import ProtectedError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from domain.shared.exceptions import (
    DomainException,
    EntityNotFoundException,
    ValidationException,
)

logger = logging.getLogger(__name__)


def _domain_status(exc: DomainException) -> int:
    if isinstance(exc, EntityNotFoundException):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, ValidationException):
        return status.HTTP_400_BAD_REQUEST
    return status.HTTP_422_UNPROCESSABLE_ENTITY


def custom_exception_handler(exc, context):
    """
    DRF exception handler.

    Domain exceptions become {"detail", "error", "details"} responses,
    ProtectedError/IntegrityError become 409, everything else goes to
    the default DRF handler.
    """
    if isinstance(exc, DomainException):
        status_code = _domain_status(exc)
        logger.warning("%s: %s", exc.code, exc.message)
        return Response(
            {
                'detail': exc.message,
                'error': exc.code.lower(),
                'details': exc.details,
            },
            status=status_code,
        )

    if isinstance(exc, ProtectedError):
        protected = [str(o) for o in list(exc.protected_objects)[:5]]

        return Response(
            {
                'detail': 'Cannot delete object: it is referenced by other records.',
                'error': 'protected_error',
                'details': {'protected_objects_sample': protected},
            },
            status=status.HTTP_409_CONFLICT,
        )

    if isinstance(exc, IntegrityError):
        logger.warning("Integrity error: %s", exc)
        return Response(
            {
                'detail': 'Data integrity violation (related records may exist).',
                'error': 'integrity_error',
                'details': {},
            },
            status=status.HTTP_409_CONFLICT,
        )

    return exception_handler(exc, context)
