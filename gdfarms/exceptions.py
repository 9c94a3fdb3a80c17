import logging

from django.http import JsonResponse
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):
    """Reshape DRF errors into the {success, message} envelope"""
    response = exception_handler(exc, context)

    if response is None:
        # Not a DRF exception: let Django's 500 handling log it
        return None

    detail = response.data.get('detail') if isinstance(response.data, dict) else None
    response.data = {
        'success': False,
        'message': str(detail) if detail else 'Request failed',
    }
    logger.warning(f"API error {response.status_code}: {response.data['message']}")
    return response


def not_found(request, exception=None):
    """JSON 404 for unknown routes"""
    return JsonResponse({'success': False, 'message': 'Not found'}, status=404)


def server_error(request):
    return JsonResponse({'success': False, 'message': 'Internal server error'}, status=500)


def validation_error(serializer):
    """400 with the serializer's field errors"""
    return Response({
        'success': False,
        'message': 'Invalid request data',
        'errors': serializer.errors,
    }, status=status.HTTP_400_BAD_REQUEST)
