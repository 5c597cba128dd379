from django.shortcuts import render, redirect
from django.http import Http404
from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.views.decorators.http import require_POST
from .adapters.orm_repositories import DjangoGoalRepository
from .application.use_cases import (
    CreateGoalUseCase, UpdateGoalUseCase, DeleteGoalUseCase, GoalCard, GoalNotFound,
)
from .domain.services import ProgressService
from .filters import GoalFilter
from .forms import GoalForm, parse_task_rows
from apps.tasks.adapters.orm_repositories import DjangoTaskRepository


@login_required
def goal_list_view(request):
    """Wyszukiwarka celów (django-filter) z postępem."""
    repo = DjangoGoalRepository()
    f = GoalFilter(request.GET, queryset=repo.queryset().filter(user=request.user).order_by('deadline'))

    progress = ProgressService()
    cards = []
    for model in f.qs:
        goal = repo.to_entity(model)
        cards.append(GoalCard(goal=goal,
                              progress=progress.progress_ratio(goal),
                              is_complete=progress.is_complete(goal)))

    return render(request, 'goals/goal_list.html', {'filter': f, 'cards': cards})


def _blank_rows(data=None) -> range:
    """Puste wiersze zadań pod formularzem: tyle, ile przyszło, plus jeden po "+ Add Task"."""
    if data is None:
        return range(1)
    blanks = sum(1 for text in data.getlist('task_text') if not (text or "").strip())
    if 'add_task' in data:
        return range(blanks + 1)
    return range(max(blanks, 1))


@login_required
def goal_create_view(request):
    blank_rows = _blank_rows(request.POST if request.method == 'POST' else None)

    if request.method == 'POST':
        tasks = parse_task_rows(request.POST)
        if 'add_task' in request.POST:
            form = GoalForm(initial=GoalForm.initial_from_data(request.POST))
            status = 200
        else:
            form = GoalForm(request.POST, tasks=tasks)
            if form.is_valid():
                # Manual Dependency Injection
                use_case = CreateGoalUseCase(DjangoGoalRepository(), DjangoTaskRepository())
                try:
                    use_case.execute(form.to_create_input(request.user.id))
                    messages.success(request, "Goal saved.")
                    return redirect('home')
                except ValueError as e:
                    form.add_error(None, str(e))
            status = 400
    else:
        tasks = []
        form = GoalForm()
        status = 200

    return render(request, 'goals/goal_form.html', {
        'form': form,
        'task_rows': tasks,
        'blank_rows': blank_rows,
        'title': 'Add New Goal',
    }, status=status)


@login_required
def goal_edit_view(request, pk):
    goal_repo = DjangoGoalRepository()
    goal = goal_repo.get_by_id(pk, request.user.id)
    if goal is None:
        raise Http404("Goal not found")

    initial = GoalForm.initial_from(goal)
    blank_rows = _blank_rows(request.POST if request.method == 'POST' else None)

    if request.method == 'POST':
        tasks = parse_task_rows(request.POST)
        if 'add_task' in request.POST:
            # goal_type zostaje z bazy, pole i tak jest zablokowane
            form = GoalForm(initial={**GoalForm.initial_from_data(request.POST, initial),
                                     'goal_type': initial['goal_type']}, is_edit=True)
            status = 200
        else:
            form = GoalForm(request.POST, tasks=tasks, is_edit=True, initial=initial)
            if form.is_valid():
                use_case = UpdateGoalUseCase(goal_repo, DjangoTaskRepository())
                try:
                    use_case.execute(form.to_update_input(goal.id, request.user.id))
                    messages.success(request, "Goal updated.")
                    return redirect('home')
                except GoalNotFound:
                    raise Http404("Goal not found")
                except ValueError as e:
                    form.add_error(None, str(e))
            status = 400
    else:
        tasks = goal.tasks
        form = GoalForm(initial=initial, is_edit=True)
        status = 200

    return render(request, 'goals/goal_form.html', {
        'form': form,
        'goal': goal,
        'task_rows': tasks,
        'blank_rows': blank_rows,
        'title': f'Edit: {goal.title}',
    }, status=status)


@require_POST
@login_required
def goal_delete_view(request, pk):
    try:
        DeleteGoalUseCase(DjangoGoalRepository()).execute(pk, request.user.id)
    except GoalNotFound:
        raise Http404("Goal not found")

    messages.success(request, "Goal deleted.")
    return redirect('home')
