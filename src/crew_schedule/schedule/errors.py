# src/crew_schedule/schedule/errors.py

"""
Error taxonomy of the scheduling core.

- ValidationError: malformed task input, raised at construction time.
- ScheduleConflict / DuplicateTaskName: insertion rejected, nothing applied.
- TaskNotFound: removal referenced an unknown name.
- PartialDeliveryFailure: advisory only; returned inside a DeliveryReport,
  the core never raises it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Task


class ScheduleError(Exception):
    """Base class for every error the scheduler reports."""


class ValidationError(ScheduleError, ValueError):
    pass


class ScheduleConflict(ScheduleError):
    def __init__(self, message: str, task: Task | None = None, existing: Task | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.task = task
        self.existing = existing


class DuplicateTaskName(ScheduleConflict):
    def __init__(self, task: Task, existing: Task) -> None:
        super().__init__(f"A task with this name already exists: {existing.name}", task, existing)


class TaskNotFound(ScheduleError, LookupError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Task not found: {name}")
        self.name = name


class PartialDeliveryFailure(ScheduleError):
    def __init__(self, failed: int, total: int) -> None:
        super().__init__(f"Conflict notification failed for {failed} of {total} observers")
        self.failed = failed
        self.total = total
