"""Shared fixtures: users, logged-in client and in-memory repositories."""

import contextlib
import copy
import itertools
from datetime import datetime

import pytest

from apps.goals.domain.entities import GoalEntity
from apps.goals.ports.repositories import IGoalRepository
from apps.studylogs.domain.entities import StudyLogEntity
from apps.studylogs.ports.repositories import IStudyLogRepository
from apps.tasks.domain.entities import TaskEntity
from apps.tasks.ports.repositories import ITaskRepository


class InMemoryTaskRepository(ITaskRepository):
    def __init__(self):
        self.rows = {}
        self._ids = itertools.count(1)

    def list_for_goal(self, goal_id):
        return [copy.copy(t) for t_id, t in sorted(self.rows.items()) if t.goal_id == goal_id]

    def bulk_insert(self, tasks):
        saved = []
        for task in tasks:
            new = TaskEntity(id=next(self._ids), task_text=task.task_text, goal_id=task.goal_id)
            self.rows[new.id] = new
            saved.append(copy.copy(new))
        return saved

    def bulk_delete(self, task_ids):
        for task_id in task_ids:
            self.rows.pop(task_id, None)
        return len(task_ids)

    def update_text(self, task):
        self.rows[task.id].task_text = task.task_text

    def set_completed(self, goal_id, completed_ids):
        ids = set(completed_ids)
        for task in self.rows.values():
            if task.goal_id == goal_id:
                task.is_completed = task.id in ids


class InMemoryStudyLogRepository(IStudyLogRepository):
    def __init__(self):
        self.rows = []
        self._ids = itertools.count(1)

    def list_for_goal(self, goal_id, user_id):
        logs = [log for log in self.rows if log.goal_id == goal_id and log.user_id == user_id]
        return sorted(logs, key=lambda log: (log.created_at, log.id), reverse=True)

    def add(self, log):
        saved = copy.copy(log)
        saved.id = next(self._ids)
        saved.created_at = log.created_at or datetime.now()
        self.rows.append(saved)
        return saved


class InMemoryGoalRepository(IGoalRepository):
    def __init__(self, tasks: InMemoryTaskRepository, logs: InMemoryStudyLogRepository):
        self.rows = {}
        self.tasks = tasks
        self.logs = logs
        self._ids = itertools.count(1)

    def _hydrate(self, goal):
        goal = copy.copy(goal)
        goal.tasks = self.tasks.list_for_goal(goal.id)
        goal.logged_time = sum(log.logged_time or 0 for log in self.logs.rows if log.goal_id == goal.id)
        return goal

    def get_by_id(self, goal_id, user_id):
        goal = self.rows.get(goal_id)
        if goal is None or goal.user_id != user_id:
            return None
        return self._hydrate(goal)

    def list_for_user(self, user_id):
        return [self._hydrate(g) for g in self.rows.values() if g.user_id == user_id]

    def save(self, goal, user_id=None):
        stored = copy.copy(goal)
        stored.tasks = []
        if stored.id is None:
            if user_id is None:
                raise ValueError("user_id is required for creating a new goal")
            stored.id = next(self._ids)
            stored.user_id = user_id
        else:
            stored.user_id = self.rows[stored.id].user_id
        self.rows[stored.id] = stored
        return self._hydrate(stored)

    def delete(self, goal_id, user_id):
        goal = self.rows.get(goal_id)
        if goal is None or goal.user_id != user_id:
            return False
        del self.rows[goal_id]
        return True


@pytest.fixture
def task_repo():
    return InMemoryTaskRepository()


@pytest.fixture
def log_repo():
    return InMemoryStudyLogRepository()


@pytest.fixture
def goal_repo(task_repo, log_repo):
    return InMemoryGoalRepository(task_repo, log_repo)


@pytest.fixture
def no_transaction():
    return contextlib.nullcontext


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(username="ada", password="s3cret-pass")


@pytest.fixture
def other_user(django_user_model):
    return django_user_model.objects.create_user(username="bob", password="s3cret-pass")


@pytest.fixture
def auth_client(client, user):
    client.force_login(user)
    return client
