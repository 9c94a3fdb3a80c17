# ===== apps/goals/admin.py =====
from django.contrib import admin
from .models import Goal

@admin.register(Goal)
class GoalAdmin(admin.ModelAdmin):
    list_display = ['user_id', 'target_revenue', 'target_profit', 'deadline', 'created_at']
    list_filter = ['deadline', 'created_at']
    search_fields = ['user_id']
    readonly_fields = ['created_at']
