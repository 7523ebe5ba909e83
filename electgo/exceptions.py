# electgo/exceptions.py - error taxonomy shared by all apps

import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError
from django.http import Http404
from rest_framework import exceptions as drf_exceptions
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler
from rest_framework.views import set_rollback

logger = logging.getLogger(__name__)


class ElectgoError(Exception):
    """Base class for errors raised by the service layer."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = 'Something went wrong'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def as_payload(self):
        return {'error': self.message}


class NotFound(ElectgoError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = 'Record not found'


class InsufficientStock(ElectgoError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, available, requested):
        self.available = available
        self.requested = requested
        super().__init__(
            f"Insufficient inventory. Available: {available}, Requested: {requested}"
        )

    def as_payload(self):
        return {
            'error': self.message,
            'available': self.available,
            'requested': self.requested,
        }


class Misconfigured(ElectgoError):
    default_message = (
        'Email service not configured. '
        'Please set EMAIL_HOST_USER and EMAIL_HOST_PASSWORD in the environment'
    )


class SendFailure(ElectgoError):
    status_code = status.HTTP_502_BAD_GATEWAY
    default_message = 'Failed to send email'


class PersistenceError(ElectgoError):
    default_message = 'Database operation failed'


def _first_message(detail):
    """
    Dig the first human readable message out of DRF error detail.

    Empty entries (valid items in a ``many=True`` list) are skipped; returns
    '' when there is no message at all.
    """
    if isinstance(detail, dict):
        for key, value in detail.items():
            message = _first_message(value)
            if not message:
                continue
            if key == 'non_field_errors':
                return message
            return f"{key}: {message}"
        return ''
    if isinstance(detail, (list, tuple)):
        for entry in detail:
            message = _first_message(entry)
            if message:
                return message
        return ''
    return str(detail)


def api_exception_handler(exc, context):
    """
    DRF EXCEPTION_HANDLER.

    Every failure is logged and turned into ``{"error": message, ...}`` so no
    request ever escapes as an unhandled exception.
    """
    view = context.get('view')
    view_name = view.__class__.__name__ if view else 'unknown view'

    if isinstance(exc, (ElectgoError, DjangoValidationError, DatabaseError)):
        set_rollback()

    if isinstance(exc, ElectgoError):
        if exc.status_code >= 500:
            logger.error(f"[{view_name}] {exc.__class__.__name__}: {exc.message}")
        else:
            logger.warning(f"[{view_name}] {exc.__class__.__name__}: {exc.message}")
        return Response(exc.as_payload(), status=exc.status_code)

    if isinstance(exc, DjangoValidationError):
        messages = exc.messages
        logger.warning(f"[{view_name}] ValidationError: {messages}")
        return Response(
            {'error': messages[0] if messages else 'Invalid data', 'details': messages},
            status=status.HTTP_400_BAD_REQUEST,
        )

    if isinstance(exc, DatabaseError):
        logger.exception(f"[{view_name}] Database error: {exc}")
        return Response(PersistenceError().as_payload(), status=PersistenceError.status_code)

    response = drf_exception_handler(exc, context)

    if response is None:
        logger.exception(f"[{view_name}] Unhandled error: {exc}")
        return Response(
            {'error': 'Internal server error'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, drf_exceptions.ValidationError):
        logger.warning(f"[{view_name}] Invalid payload: {response.data}")
        response.data = {
            'error': _first_message(response.data) or 'Invalid data',
            'details': response.data,
        }
    elif isinstance(exc, (drf_exceptions.APIException, Http404)):
        detail = response.data.get('detail', exc) if isinstance(response.data, dict) else exc
        logger.warning(f"[{view_name}] {exc.__class__.__name__}: {detail}")
        response.data = {'error': str(detail)}

    return response
