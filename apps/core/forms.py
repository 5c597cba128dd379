from django import forms
from .models import UserProfile

class UserProfileForm(forms.ModelForm):
    class Meta:
        model = UserProfile
        fields = ['timezone']
        widgets = {
            'timezone': forms.Select(attrs={'class': 'form-select'}),
        }
