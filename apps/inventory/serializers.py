# ===== apps/inventory/serializers.py =====
import math

from rest_framework import serializers
from .models import Item


def finite(value):
    if not math.isfinite(value):
        raise serializers.ValidationError("Must be a finite number.")


class ItemSerializer(serializers.ModelSerializer):
    class Meta:
        model = Item
        fields = [
            "id",
            "user_id",
            "name",
            "quantity_value",
            "quantity_unit",
            "buying_price",
            "selling_price",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class ItemWriteSerializer(serializers.Serializer):
    """
    Request body for create and update. Update is a full replacement,
    so every field is required in both cases. Negative values pass.
    """
    userId = serializers.CharField(max_length=64)
    name = serializers.CharField(max_length=255)
    quantity_value = serializers.FloatField(validators=[finite])
    quantity_unit = serializers.CharField(max_length=50)
    buying_price = serializers.FloatField(validators=[finite])
    selling_price = serializers.FloatField(validators=[finite])

    def item_fields(self):
        data = dict(self.validated_data)
        data.pop("userId")
        return data
