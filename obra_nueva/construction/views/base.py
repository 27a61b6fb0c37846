# construction/views/base.py
"""Shared plumbing for the action endpoints: envelope, token gate, error handler."""

import logging

from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import APIView, set_rollback

from ..exceptions import IntegrationError
from ..utils import check_bearer_token

logger = logging.getLogger(__name__)


def envelope(success=True, status_code=200, **payload):
    return Response({'success': success, **payload}, status=status_code)


def error_envelope(error, status_code, details=None, **payload):
    body = {'error': error}
    if details is not None:
        body['details'] = details
    body.update(payload)
    return envelope(False, status_code, **body)


def _flatten_errors(detail, prefix=''):
    """Serializer errors as a flat list of (field, message)."""
    if isinstance(detail, dict):
        items = []
        for field, value in detail.items():
            name = field if field != 'non_field_errors' else ''
            items += _flatten_errors(value, f"{prefix}.{name}" if prefix and name else (name or prefix))
        return items
    if isinstance(detail, list):
        items = []
        for value in detail:
            items += _flatten_errors(value, prefix)
        return items
    return [(prefix, str(detail))]


def envelope_exception_handler(exc, context):
    """
    REST_FRAMEWORK['EXCEPTION_HANDLER'].

    Renders every exception raised by a view in the {success, error, details}
    envelope. Nothing escapes as an HTML error page.
    """
    if isinstance(exc, Http404):
        exc = exceptions.NotFound()

    if isinstance(exc, exceptions.ValidationError):
        errors = _flatten_errors(exc.detail)
        first = errors[0][1] if errors else 'Missing required fields'
        details = '; '.join(f"{field}: {message}" if field else message for field, message in errors)
        return error_envelope(first, status.HTTP_400_BAD_REQUEST, details=details or None)

    if isinstance(exc, exceptions.ParseError):
        return error_envelope('Invalid JSON body', status.HTTP_400_BAD_REQUEST, details=str(exc.detail))

    if isinstance(exc, (exceptions.NotAuthenticated, exceptions.AuthenticationFailed)):
        response = error_envelope('No autorizado', status.HTTP_401_UNAUTHORIZED)
        if getattr(exc, 'auth_header', None):
            response['WWW-Authenticate'] = exc.auth_header
        return response

    if isinstance(exc, exceptions.MethodNotAllowed):
        response = error_envelope('Method not allowed', status.HTTP_405_METHOD_NOT_ALLOWED)
        view = context.get('view')
        if view is not None:
            response['Allow'] = ', '.join(view.allowed_methods)
        return response

    if isinstance(exc, exceptions.APIException):
        set_rollback()
        return error_envelope(str(exc.detail), exc.status_code)

    set_rollback()
    if isinstance(exc, IntegrationError):
        logger.error(f"[API] ❌ {type(exc).__name__}: {exc.message} ({exc.details})")
        return error_envelope(exc.message, status.HTTP_500_INTERNAL_SERVER_ERROR, details=exc.details)

    view = context.get('view')
    logger.exception(f"[API] ❌ Unhandled error in {type(view).__name__ if view else 'view'}: {exc}")
    return error_envelope('Error interno del servidor', status.HTTP_500_INTERNAL_SERVER_ERROR, details=str(exc))


class ActionView(APIView):
    """
    Base for the action endpoints.

    `config` is the IntegrationConfig injected through `as_view(config=...)`.
    Subclasses with `requires_token = True` need `Authorization: Bearer <INTERNAL_API_TOKEN>`;
    the token is checked before the method so a bad token is a 401 even for GET.
    """
    config = None
    requires_token = False

    def initial(self, request, *args, **kwargs):
        super().initial(request, *args, **kwargs)
        if request.method == 'OPTIONS' or not self.requires_token:
            return
        if not check_bearer_token(request, self.config.internal_api_token):
            logger.warning(f"[API] 🔒 Rejected token for {request.path}")
            raise exceptions.NotAuthenticated()

    def get_authenticate_header(self, request):
        return 'Bearer'

    def options(self, request, *args, **kwargs):
        return Response(status=status.HTTP_200_OK)
