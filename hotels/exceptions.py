import logging

from django.http import JsonResponse
from rest_framework.views import exception_handler as drf_exception_handler
from rest_framework.response import Response

logger = logging.getLogger(__name__)


def _detail_message(data) -> str:
    if isinstance(data, dict):
        if 'detail' in data:
            return str(data['detail'])
        for value in data.values():
            return _detail_message(value)
        return ''
    if isinstance(data, (list, tuple)):
        return _detail_message(data[0]) if data else ''
    return str(data)


def api_exception_handler(exc, context):
    resp = drf_exception_handler(exc, context)
    if resp is None:
        logger.error("unhandled API error: %s", exc, exc_info=exc)
        return Response({'message': 'Internal server error.'}, status=500)
    # normalize response
    return Response({'message': _detail_message(resp.data)}, status=resp.status_code, headers=_passthrough_headers(resp))


def _passthrough_headers(resp) -> dict:
    return {k: resp[k] for k in ('Allow', 'Retry-After', 'WWW-Authenticate') if k in resp}


def not_found_view(request, exception=None):
    return JsonResponse({'message': 'Not found.'}, status=404)
