# ===== apps/users/views.py =====
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response
from django.db import DatabaseError
from .models import UserSettings
from .serializers import UserInitSerializer, UserSettingsSerializer
from .services import bootstrap_identity
from gdfarms.exceptions import validation_error
import logging

logger = logging.getLogger(__name__)


@api_view(['POST'])
def init_user(request):
    """Validate a stored userId or hand out a new one"""
    # Garbage in the body is treated as a lost id, never as a 400
    serializer = UserInitSerializer(data=request.data)
    candidate = serializer.candidate() if serializer.is_valid() else None

    try:
        user_id, created = bootstrap_identity(candidate)
    except DatabaseError:
        logger.exception("User init failed")
        return Response({
            'success': False,
            'message': 'Server error during user initialization'
        }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return Response({
        'success': True,
        'userId': user_id,
        'message': 'New user created successfully' if created else 'User validated successfully',
    })


@api_view(['GET', 'PUT'])
def user_settings(request, user_id):
    """Get or replace user settings"""
    try:
        settings = UserSettings.objects.filter(user_id=user_id).first()
    except DatabaseError:
        logger.exception("Get settings failed")
        return Response({
            'success': False,
            'message': 'Failed to fetch settings'
        }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if settings is None:
        return Response({
            'success': False,
            'message': 'User settings not found'
        }, status=status.HTTP_404_NOT_FOUND)

    if request.method == 'GET':
        return Response({'success': True, 'settings': UserSettingsSerializer(settings).data})

    serializer = UserSettingsSerializer(settings, data=request.data)
    if not serializer.is_valid():
        return validation_error(serializer)

    try:
        serializer.save()
    except DatabaseError:
        logger.exception("Update settings failed")
        return Response({
            'success': False,
            'message': 'Failed to update settings'
        }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return Response({
        'success': True,
        'settings': serializer.data,
        'message': 'Settings updated successfully'
    })
