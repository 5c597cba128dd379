from django.shortcuts import render, redirect
from django.http import Http404
from django.contrib import messages
from django.contrib.auth.decorators import login_required
from apps.goals.adapters.orm_repositories import DjangoGoalRepository
from apps.goals.application.use_cases import GoalNotFound
from apps.goals.domain.services import ProgressService
from apps.tasks.adapters.orm_repositories import DjangoTaskRepository
from .adapters.orm_repositories import DjangoStudyLogRepository
from .application.use_cases import LogStudyUseCase
from .domain.services import StudyLogRejected, last_notes
from .forms import StudyLogForm


@login_required
def studylog_create_view(request, goal_pk):
    goal_repo = DjangoGoalRepository()
    log_repo = DjangoStudyLogRepository()

    goal = goal_repo.get_by_id(goal_pk, request.user.id)
    if goal is None:
        raise Http404("Goal not found")

    history = log_repo.list_for_goal(goal.id, request.user.id)
    status = 200

    if request.method == 'POST':
        form = StudyLogForm(goal, request.POST)
        if form.is_valid():
            use_case = LogStudyUseCase(goal_repo, log_repo, DjangoTaskRepository())
            try:
                use_case.execute(form.to_input(request.user.id))
                messages.success(request, "Study log saved.")
                return redirect('home')
            except GoalNotFound:
                raise Http404("Goal not found")
            except StudyLogRejected as e:
                form.add_error(None, str(e))
        status = 400
    else:
        # Formularz startuje od ostatnich notatek i obecnego stanu zadań
        form = StudyLogForm(goal, initial={
            'notes': last_notes(history),
            'completed_tasks': goal.completed_task_ids,
        })

    progress = ProgressService()
    remaining = progress.remaining_minutes(goal)

    return render(request, 'studylogs/studylog_form.html', {
        'form': form,
        'goal': goal,
        'remaining_minutes': remaining,
        'is_complete': progress.is_complete(goal),
        'recent_logs': history[:5],
    }, status=status)
