from django.urls import path
from . import views

urlpatterns = [
    path('items', views.create_item, name='create_item'),
    path('items/<str:key>', views.items_by_key, name='items_by_key'),
    path('items/<str:item_id>/<str:user_id>', views.delete_item, name='delete_item'),
]
