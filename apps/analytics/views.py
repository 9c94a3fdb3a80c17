# ===== apps/analytics/views.py =====
from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status
from django.db import DatabaseError
from apps.inventory.models import Item
from apps.inventory.serializers import ItemSerializer
from .calculations import compute_analytics
import logging

logger = logging.getLogger(__name__)


def get_user_analytics(user_id):
    """Fresh snapshot over every item of the user, oldest first"""
    items = Item.objects.filter(user_id=user_id).order_by('created_at', 'id')
    return compute_analytics(items, serialize=lambda item: ItemSerializer(item).data)


@api_view(['GET'])
def get_analytics(request, user_id):
    """Totals, margin and top performers"""
    try:
        analytics = get_user_analytics(user_id)
    except DatabaseError:
        logger.exception("Analytics failed")
        return Response({
            'success': False,
            'message': 'Failed to calculate analytics'
        }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return Response({'success': True, 'analytics': analytics})
