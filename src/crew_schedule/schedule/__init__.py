# src/crew_schedule/schedule/__init__.py

from .broadcaster import ConflictBroadcaster, DeliveryReport
from .errors import (
    DuplicateTaskName,
    PartialDeliveryFailure,
    ScheduleConflict,
    ScheduleError,
    TaskNotFound,
    ValidationError,
)
from .factory import TaskFactory
from .interval_index import InsertResult, IntervalIndex
from .models import Task, TaskCategory
from .notifiers import ConflictNotifier
from .service import ScheduleService, get_schedule_service

__all__ = [
    "ConflictBroadcaster",
    "ConflictNotifier",
    "DeliveryReport",
    "DuplicateTaskName",
    "InsertResult",
    "IntervalIndex",
    "PartialDeliveryFailure",
    "ScheduleConflict",
    "ScheduleError",
    "ScheduleService",
    "Task",
    "TaskCategory",
    "TaskFactory",
    "TaskNotFound",
    "ValidationError",
    "get_schedule_service",
]
