# ===== apps/users/health_urls.py =====
from django.urls import path
from django.http import JsonResponse
from django.db import DatabaseError, connection
import logging

logger = logging.getLogger(__name__)


def health_check(request):
    """Liveness probe against the database"""
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except DatabaseError:
        logger.exception("Health check: database not reachable")
        return JsonResponse({
            'success': False,
            'message': 'Database not reachable'
        }, status=500)

    return JsonResponse({
        'success': True,
        'message': 'Database connection OK'
    })

urlpatterns = [
    path('health', health_check, name='health_check'),
]
