from django.urls import path
from . import views

urlpatterns = [
    path('<str:user_id>', views.user_settings, name='user_settings'),
]
