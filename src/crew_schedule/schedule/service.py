# src/crew_schedule/schedule/service.py

"""
Schedule service.

Orchestrates the interval index and the conflict broadcaster:
- add_task: overlap check, broadcast + ScheduleConflict on rejection,
- remove_task: TaskNotFound when nothing matched,
- read-only pass-throughs for listing and introspection.

One shared instance per process is available via ScheduleService.instance()
(lazy, race-free). Constructing ScheduleService directly is still allowed for
composition and tests.
"""

from __future__ import annotations

import logging
import threading
from typing import ClassVar

from ..core.ports import ConflictSubscriber
from .broadcaster import ConflictBroadcaster, DeliveryReport
from .errors import DuplicateTaskName, ScheduleConflict, ScheduleError, TaskNotFound, ValidationError
from .interval_index import IntervalIndex
from .models import Task

logger = logging.getLogger(__name__)


def conflict_message(task: Task, existing: Task) -> str:
    return (
        f"Task '{task.name}' ({task.time_range}) conflicts with "
        f"existing task '{existing.name}' ({existing.time_range})"
    )


class ScheduleService:
    _instance: ClassVar[ScheduleService | None] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(
        self,
        *,
        index: IntervalIndex | None = None,
        broadcaster: ConflictBroadcaster | None = None,
    ) -> None:
        self._index = index if index is not None else IntervalIndex()
        self._broadcaster = broadcaster if broadcaster is not None else ConflictBroadcaster()
        self._last_delivery: DeliveryReport | None = None
        logger.info("ScheduleService ready")

    @classmethod
    def instance(cls) -> ScheduleService:
        inst = cls._instance
        if inst is None:
            with cls._instance_lock:
                inst = cls._instance
                if inst is None:
                    inst = cls()
                    cls._instance = inst
        return inst

    @classmethod
    def is_initialized(cls) -> bool:
        return cls._instance is not None

    # ---- tasks ----

    def add_task(self, task: Task) -> Task:
        if not isinstance(task, Task):
            raise ValidationError("Task cannot be empty")

        logger.debug("Attempting to add task: %s", task.name)
        result = self._index.insert(task)

        if result.ok:
            logger.info("Task added: %s (total tasks: %d)", task.name, self._index.count())
            return task

        existing = result.conflict
        if existing is None:
            raise ScheduleError(f"Task {task.name!r} was rejected without a conflicting task")

        if result.duplicate:
            logger.info("Rejected duplicate task name: %s", task.name)
            raise DuplicateTaskName(task, existing)

        message = conflict_message(task, existing)
        report = self._broadcaster.notify(message)
        self._last_delivery = report
        if report.error is not None:
            logger.warning("Conflict broadcast incomplete: %s", report.error)

        raise ScheduleConflict(f"Schedule conflict detected: {message}", task, existing)

    def remove_task(self, name: str) -> None:
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Task name cannot be empty")

        if not self._index.remove(name):
            raise TaskNotFound(name.strip())
        logger.info("Task removed: %s (remaining tasks: %d)", name.strip(), self._index.count())

    def list_tasks(self) -> tuple[Task, ...]:
        return self._index.list()

    def get_task(self, name: str) -> Task | None:
        return self._index.find(name)

    def has_task(self, name: str | None) -> bool:
        return self._index.has(name)

    def task_count(self) -> int:
        return self._index.count()

    # ---- observers ----

    def add_observer(self, observer: ConflictSubscriber) -> bool:
        return self._broadcaster.subscribe(observer)

    def remove_observer(self, observer: ConflictSubscriber) -> bool:
        return self._broadcaster.unsubscribe(observer)

    def observer_count(self) -> int:
        return self._broadcaster.count()

    @property
    def last_delivery(self) -> DeliveryReport | None:
        return self._last_delivery


def get_schedule_service() -> ScheduleService:
    return ScheduleService.instance()
