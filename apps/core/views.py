from django.shortcuts import render, redirect
from django.contrib.auth.decorators import login_required
from django.contrib import messages
from django.utils import timezone
from .forms import UserProfileForm
from .models import UserProfile
from apps.goals.adapters.orm_repositories import DjangoGoalRepository
from apps.goals.application.use_cases import GoalDashboardUseCase


@login_required
def dashboard_view(request):
    # Middleware aktywował strefę użytkownika, więc localdate() to jego "dzisiaj"
    today = timezone.localdate()
    sort = request.GET.get('sort', 'due')

    use_case = GoalDashboardUseCase(DjangoGoalRepository())
    dashboard = use_case.execute(request.user.id, today, sort=sort)

    return render(request, 'core/dashboard.html', {
        'dashboard': dashboard,
        'today': today,
    })


@login_required
def settings_view(request):
    profile, _ = UserProfile.objects.get_or_create(user=request.user)

    if request.method == 'POST':
        form = UserProfileForm(request.POST, instance=profile)
        if form.is_valid():
            form.save()
            messages.success(request, "Settings saved.")
            return redirect('settings')
    else:
        form = UserProfileForm(instance=profile)

    return render(request, 'core/settings.html', {'form': form})
