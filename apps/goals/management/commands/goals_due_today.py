from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.utils import timezone
from apps.core.models import UserProfile
from apps.goals.adapters.orm_repositories import DjangoGoalRepository
from apps.goals.domain.services import ProgressService, local_today


class Command(BaseCommand):
    help = "Lists goals due today, per user, in each user's own time zone"

    def add_arguments(self, parser):
        parser.add_argument('--user', help='Only this username')

    def handle(self, *args, **options):
        users = get_user_model().objects.filter(goals__isnull=False).distinct().order_by('username')
        if options.get('user'):
            users = users.filter(username=options['user'])

        repo = DjangoGoalRepository()
        progress = ProgressService()
        now = timezone.now()
        total = 0

        for user in users:
            tz_name = UserProfile.objects.filter(user=user).values_list('timezone', flat=True).first()
            today = local_today(now, tz_name or timezone.get_default_timezone_name())

            due = progress.todays_goals(repo.list_for_user(user.id), today)
            if not due:
                continue

            self.stdout.write(f"{user.username} ({today:%Y-%m-%d}):")
            for goal in due:
                status = "done" if progress.is_complete(goal) else f"{progress.progress_ratio(goal):.0%}"
                self.stdout.write(f"- {goal.title} [{goal.subject}] {status}")
            total += len(due)

        self.stdout.write(self.style.SUCCESS(f'{total} goal(s) due today.'))
