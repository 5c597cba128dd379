# apps/core/models.py
import pytz
from django.conf import settings
from django.db import models
from django.db.models.signals import post_save
from django.dispatch import receiver


TIMEZONE_CHOICES = [(tz, tz) for tz in pytz.common_timezones]


class UserProfile(models.Model):
    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='profile')

    # Strefa oglądającego: od niej zależy, który dzień jest "dzisiaj"
    timezone = models.CharField(max_length=64, choices=TIMEZONE_CHOICES, default='UTC')

    def __str__(self):
        return f"Profile of {self.user.username}"


# Sygnał: Twórz profil automatycznie przy tworzeniu Usera
@receiver(post_save, sender=settings.AUTH_USER_MODEL)
def create_user_profile(sender, instance, created, **kwargs):
    if created:
        UserProfile.objects.create(user=instance, timezone=settings.TIME_ZONE)
