from django.urls import path
from . import views

urlpatterns = [
    path('goals', views.create_goal, name='create_goal'),
    path('goals/<str:user_id>', views.get_goal, name='get_goal'),
    path('goals/<str:user_id>/progress', views.goal_progress, name='goal_progress'),
]
