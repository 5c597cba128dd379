from django.urls import path
from . import views

urlpatterns = [
    path('goal/<int:goal_pk>/', views.studylog_create_view, name='studylog_create'),
]
