import django_filters
from django import forms
from .models import Goal


class GoalFilter(django_filters.FilterSet):
    title = django_filters.CharFilter(
        lookup_expr='icontains',
        label="Title contains",
        widget=forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'Search...'})
    )
    subject = django_filters.CharFilter(
        lookup_expr='icontains',
        label="Subject",
        widget=forms.TextInput(attrs={'class': 'form-control'})
    )
    goal_type = django_filters.ChoiceFilter(
        choices=Goal.GoalTypeChoices.choices,
        label="Type",
        widget=forms.Select(attrs={'class': 'form-select'})
    )
    deadline = django_filters.DateFromToRangeFilter(
        label="Deadline between",
        widget=django_filters.widgets.DateRangeWidget(attrs={'type': 'date', 'class': 'form-control'})
    )

    class Meta:
        model = Goal
        fields = ['title', 'subject', 'goal_type', 'deadline']
