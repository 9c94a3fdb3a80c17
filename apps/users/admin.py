# ===== apps/users/admin.py =====
from django.contrib import admin
from .models import UserSettings

@admin.register(UserSettings)
class UserSettingsAdmin(admin.ModelAdmin):
    list_display = ['user_id', 'app_name', 'currency', 'created_at', 'updated_at']
    list_filter = ['currency', 'created_at']
    search_fields = ['user_id', 'app_name']
    readonly_fields = ['user_id', 'created_at', 'updated_at']
    ordering = ['-created_at']
