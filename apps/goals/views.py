# ===== apps/goals/views.py =====
from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status
from django.db import DatabaseError
from apps.analytics.views import get_user_analytics
from apps.users.models import UserSettings, DEFAULT_CURRENCY
from gdfarms.exceptions import validation_error
from .models import Goal
from .projection import project_goal
from .serializers import GoalSerializer, GoalCreateSerializer
import logging

logger = logging.getLogger(__name__)


@api_view(['POST'])
def create_goal(request):
    """Set a new goal; it supersedes the previous one"""
    serializer = GoalCreateSerializer(data=request.data)
    if not serializer.is_valid():
        return validation_error(serializer)

    data = serializer.validated_data
    try:
        goal = Goal.objects.create(
            user_id=data['userId'],
            target_revenue=data['target_revenue'],
            target_profit=data['target_profit'],
            deadline=data['deadline'],
        )
    except DatabaseError:
        logger.exception("Set goal failed")
        return Response({
            'success': False,
            'message': 'Failed to set goal'
        }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return Response({
        'success': True,
        'goal': GoalSerializer(goal).data,
        'message': 'Goal set successfully'
    })


@api_view(['GET'])
def get_goal(request, user_id):
    """Current goal, or null when none was ever set"""
    try:
        goal = Goal.objects.current_for(user_id)
    except DatabaseError:
        logger.exception("Get goal failed")
        return Response({
            'success': False,
            'message': 'Failed to fetch goal'
        }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return Response({
        'success': True,
        'goal': GoalSerializer(goal).data if goal else None
    })


@api_view(['GET'])
def goal_progress(request, user_id):
    """Compare the current goal with a fresh analytics snapshot"""
    try:
        goal = Goal.objects.current_for(user_id)
        if goal is None:
            return Response({
                'success': True,
                'progress': None,
                'message': 'No goal set yet'
            })

        settings = UserSettings.objects.filter(user_id=user_id).first()
        currency = settings.currency if settings else DEFAULT_CURRENCY
        analytics = get_user_analytics(user_id)
    except DatabaseError:
        logger.exception("Goal progress failed")
        return Response({
            'success': False,
            'message': 'Failed to calculate goal progress'
        }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    progress = project_goal(goal, analytics, currency)
    return Response({
        'success': True,
        'progress': {'goal': GoalSerializer(goal).data, **progress}
    })
