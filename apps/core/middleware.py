# apps/core/middleware.py
from django.utils import timezone
from .models import UserProfile


class UserTimezoneMiddleware:
    """Aktywuje strefę z profilu, żeby timezone.localdate() dawało dzień oglądającego."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        tz_name = None
        user = getattr(request, 'user', None)
        if user is not None and user.is_authenticated:
            tz_name = UserProfile.objects.filter(user=user).values_list('timezone', flat=True).first()

        if tz_name:
            timezone.activate(tz_name)
        else:
            timezone.deactivate()

        try:
            return self.get_response(request)
        finally:
            timezone.deactivate()
