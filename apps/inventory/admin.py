# ===== apps/inventory/admin.py =====
from django.contrib import admin
from .models import Item

@admin.register(Item)
class ItemAdmin(admin.ModelAdmin):
    list_display = ['name', 'user_id', 'quantity_value', 'quantity_unit', 'buying_price', 'selling_price', 'created_at']
    list_filter = ['quantity_unit', 'created_at']
    search_fields = ['name', 'user_id']
    readonly_fields = ['created_at', 'updated_at']
