# apps/tasks/domain/services/__init__.py
from .reconciler import TaskChangeSet, TaskReconciler

__all__ = ['TaskChangeSet', 'TaskReconciler']
