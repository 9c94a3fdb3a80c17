# ===== apps/users/serializers.py =====
from rest_framework import serializers
from .models import UserSettings, USER_ID_MAX_LENGTH


class UserInitSerializer(serializers.Serializer):
    """Accepts any userId; values that cannot be an identifier count as missing"""
    userId = serializers.JSONField(required=False, allow_null=True)

    def candidate(self):
        user_id = self.validated_data.get('userId')
        if isinstance(user_id, str) and 0 < len(user_id) <= USER_ID_MAX_LENGTH:
            return user_id
        return None


class UnitPreferencesSerializer(serializers.Serializer):
    weight = serializers.CharField(max_length=20)
    volume = serializers.CharField(max_length=20)


class UserSettingsSerializer(serializers.ModelSerializer):
    unit_preferences = UnitPreferencesSerializer()

    class Meta:
        model = UserSettings
        fields = ['user_id', 'currency', 'app_name', 'unit_preferences', 'created_at', 'updated_at']
        read_only_fields = ['user_id', 'created_at', 'updated_at']
        extra_kwargs = {
            'currency': {'required': True},
            'app_name': {'required': True},
        }

    def update(self, instance, validated_data):
        for field, value in validated_data.items():
            setattr(instance, field, value)
        instance.save()
        return instance
