# ===== apps/inventory/models.py =====
from django.db import models


class Item(models.Model):
    """A tracked good with per-unit buy/sell prices"""

    user_id = models.CharField(max_length=64)

    name = models.CharField(max_length=255)
    quantity_value = models.FloatField()
    quantity_unit = models.CharField(max_length=50)

    # Prices are per unit of quantity
    buying_price = models.FloatField()
    selling_price = models.FloatField()

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'items'
        indexes = [
            models.Index(fields=['user_id', 'created_at'], name='items_user_created_idx'),
        ]
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"{self.user_id} - {self.name}"

    @property
    def profit(self):
        # Negative profit is valid: nothing forces selling_price >= buying_price
        return (self.selling_price - self.buying_price) * self.quantity_value
