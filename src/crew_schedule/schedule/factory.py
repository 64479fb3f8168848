# src/crew_schedule/schedule/factory.py

from __future__ import annotations

import logging
from datetime import datetime, time

from .errors import ValidationError
from .models import TIME_FORMAT, Task, TaskCategory

logger = logging.getLogger(__name__)


class TaskFactory:
    """
    Builds validated Task objects from user-facing input.

    Accepts either typed values or the raw strings a console user types
    ("research", "09:30"). Every failure surfaces as ValidationError.
    """

    def __init__(self, *, time_format: str = TIME_FORMAT) -> None:
        self._time_format = time_format

    @property
    def time_format(self) -> str:
        return self._time_format

    def parse_time(self, raw: time | str | None) -> time:
        if raw is None:
            raise ValidationError("Start time and end time cannot be empty")
        if isinstance(raw, time):
            return raw
        text = str(raw).strip()
        try:
            return datetime.strptime(text, self._time_format).time()
        except ValueError:
            raise ValidationError(
                f"Invalid time format: {text!r}. Please use {self._time_format} (e.g., 09:30)"
            ) from None

    def create_task(
        self,
        category: TaskCategory | str | None,
        name: str,
        start: time | str | None,
        end: time | str | None,
    ) -> Task:
        cat = category if isinstance(category, TaskCategory) else TaskCategory.from_label(category)
        task = Task(
            name=name,
            start_time=self.parse_time(start),
            end_time=self.parse_time(end),
            category=cat,
        )
        logger.debug("Created task type=%s name=%s range=%s", cat.name, task.name, task.time_range)
        return task

    @staticmethod
    def available_categories() -> tuple[TaskCategory, ...]:
        return tuple(TaskCategory)

    @staticmethod
    def category_names() -> list[str]:
        return [c.name for c in TaskCategory]
