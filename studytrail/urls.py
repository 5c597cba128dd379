# studytrail/urls.py
from django.contrib import admin
from django.contrib.auth import views as auth_views
from django.urls import path, include
from apps.core import views as core_views


urlpatterns = [
    path('admin/', admin.site.urls),
    path('', core_views.dashboard_view, name='home'),  # Pusta ścieżka = Home
    path('login/', auth_views.LoginView.as_view(), name='login'),
    path('logout/', auth_views.LogoutView.as_view(), name='logout'),
    # Tutaj podpinamy nasze aplikacje:
    path('goals/', include('apps.goals.urls')),
    path('logs/', include('apps.studylogs.urls')),
    path('core/', include('apps.core.urls')),
]
