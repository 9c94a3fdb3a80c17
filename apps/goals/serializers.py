# ===== apps/goals/serializers.py =====
from rest_framework import serializers
from apps.inventory.serializers import finite
from .models import Goal


class GoalSerializer(serializers.ModelSerializer):
    class Meta:
        model = Goal
        fields = ['id', 'user_id', 'target_revenue', 'target_profit', 'deadline', 'created_at']
        read_only_fields = fields


class GoalCreateSerializer(serializers.Serializer):
    userId = serializers.CharField(max_length=64)
    target_revenue = serializers.FloatField(validators=[finite])
    target_profit = serializers.FloatField(validators=[finite])
    deadline = serializers.DateField()
