# ===== apps/inventory/views.py =====
from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status

from django.db import DatabaseError

import logging

from gdfarms.exceptions import validation_error
from .models import Item
from .serializers import ItemSerializer, ItemWriteSerializer

logger = logging.getLogger(__name__)


def _item_not_found():
    return Response(
        {"success": False, "message": "Item not found"},
        status=status.HTTP_404_NOT_FOUND,
    )


def _parse_item_id(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


# ============================================================
# LIST ITEMS
# ============================================================

def list_items(user_id):
    try:
        items = Item.objects.filter(user_id=user_id).order_by("-created_at", "-id")
        data = ItemSerializer(items, many=True).data
    except DatabaseError:
        logger.exception("Get items failed")
        return Response(
            {"success": False, "message": "Failed to fetch items"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return Response({"success": True, "items": data})


# ============================================================
# CREATE ITEM
# ============================================================

@api_view(["POST"])
def create_item(request):
    serializer = ItemWriteSerializer(data=request.data)
    if not serializer.is_valid():
        return validation_error(serializer)

    try:
        item = Item.objects.create(
            user_id=serializer.validated_data["userId"],
            **serializer.item_fields(),
        )
    except DatabaseError:
        logger.exception("Add item failed")
        return Response(
            {"success": False, "message": "Failed to add item"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return Response({
        "success": True,
        "item": ItemSerializer(item).data,
        "message": "Item added successfully",
    })


# ============================================================
# UPDATE ITEM
# ============================================================

def update_item(request, item_id):
    serializer = ItemWriteSerializer(data=request.data)
    if not serializer.is_valid():
        return validation_error(serializer)

    item_id = _parse_item_id(item_id)
    if item_id is None:
        return _item_not_found()

    try:
        item = Item.objects.filter(
            id=item_id,
            user_id=serializer.validated_data["userId"],
        ).first()

        if item is None:
            return _item_not_found()

        for field, value in serializer.item_fields().items():
            setattr(item, field, value)
        item.save()

    except DatabaseError:
        logger.exception("Update item failed")
        return Response(
            {"success": False, "message": "Failed to update item"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return Response({
        "success": True,
        "item": ItemSerializer(item).data,
        "message": "Item updated successfully",
    })


# ============================================================
# GET /api/items/<userId>  |  PUT /api/items/<id>
# ============================================================

@api_view(["GET", "PUT"])
def items_by_key(request, key):
    """The same path segment is a userId for GET and an item id for PUT"""
    if request.method == "GET":
        return list_items(key)
    return update_item(request, key)


# ============================================================
# DELETE ITEM
# ============================================================

@api_view(["DELETE"])
def delete_item(request, item_id, user_id):
    item_id = _parse_item_id(item_id)
    if item_id is None:
        return _item_not_found()

    try:
        deleted, _ = Item.objects.filter(id=item_id, user_id=user_id).delete()
    except DatabaseError:
        logger.exception("Delete item failed")
        return Response(
            {"success": False, "message": "Failed to delete item"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if not deleted:
        return _item_not_found()

    return Response({"success": True, "message": "Item deleted successfully"})
