# ===== apps/users/models.py =====
from django.db import models

DEFAULT_CURRENCY = 'USD'
DEFAULT_APP_NAME = 'GD Farms'
USER_ID_MAX_LENGTH = 64


def default_unit_preferences():
    return {'weight': 'kg', 'volume': 'liters'}


class UserSettings(models.Model):
    """Per-device preferences; the row's existence is what makes a userId known"""
    user_id = models.CharField(max_length=USER_ID_MAX_LENGTH, unique=True)
    currency = models.CharField(max_length=10, default=DEFAULT_CURRENCY)
    app_name = models.CharField(max_length=100, default=DEFAULT_APP_NAME)
    unit_preferences = models.JSONField(default=default_unit_preferences)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'user_settings'
        verbose_name = 'User Settings'
        verbose_name_plural = 'User Settings'

    def __str__(self):
        return f"{self.user_id}'s settings"
