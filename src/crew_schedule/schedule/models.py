# src/crew_schedule/schedule/models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from enum import StrEnum

from .errors import ValidationError

TIME_FORMAT = "%H:%M"


class TaskCategory(StrEnum):
    """
    Kind of activity a task represents.

    Categories only differ in how they are displayed; add a member here and a
    row in _CATEGORY_INFO to introduce a new one.
    """

    RESEARCH = "research"
    EXERCISE = "exercise"
    MAINTENANCE = "maintenance"

    @property
    def label(self) -> str:
        return _CATEGORY_INFO[self][0]

    @property
    def description(self) -> str:
        return _CATEGORY_INFO[self][1]

    @classmethod
    def from_label(cls, raw: str | None) -> TaskCategory:
        key = (raw or "").strip().lower()
        if not key:
            raise ValidationError("Task type cannot be empty")
        try:
            return cls(key)
        except ValueError:
            valid = ", ".join(c.name for c in cls)
            raise ValidationError(f"Invalid task type: {raw}. Valid types are: {valid}") from None


_CATEGORY_INFO: dict[TaskCategory, tuple[str, str]] = {
    TaskCategory.RESEARCH: ("Research", "Scientific research and experimentation"),
    TaskCategory.EXERCISE: ("Exercise", "Physical fitness and health maintenance"),
    TaskCategory.MAINTENANCE: ("Maintenance", "Equipment and facility maintenance"),
}


def _as_datetime(t: time) -> datetime:
    return datetime.combine(date.min, t)


@dataclass(frozen=True, slots=True)
class Task:
    """
    Immutable named time-of-day interval [start_time, end_time).

    Equality is (name, start_time, end_time); the category is display data.
    """

    name: str
    start_time: time
    end_time: time
    category: TaskCategory = field(default=TaskCategory.RESEARCH, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError("Task name cannot be empty")
        if self.start_time is None or self.end_time is None:
            raise ValidationError("Start time and end time cannot be empty")
        if not isinstance(self.start_time, time) or not isinstance(self.end_time, time):
            raise ValidationError("Start time and end time must be time-of-day values")
        if any(t.second or t.microsecond for t in (self.start_time, self.end_time)):
            raise ValidationError("Start time and end time must be whole minutes")
        if self.start_time >= self.end_time:
            raise ValidationError("Start time must be before end time")
        if not isinstance(self.category, TaskCategory):
            object.__setattr__(self, "category", TaskCategory.from_label(str(self.category)))
        object.__setattr__(self, "name", self.name.strip())

    @property
    def key(self) -> str:
        return self.name.casefold()

    @property
    def duration(self) -> timedelta:
        return _as_datetime(self.end_time) - _as_datetime(self.start_time)

    @property
    def duration_minutes(self) -> int:
        return int(self.duration.total_seconds() // 60)

    @property
    def time_range(self) -> str:
        return f"{self.start_time.strftime(TIME_FORMAT)} - {self.end_time.strftime(TIME_FORMAT)}"

    def overlaps_with(self, other: Task | None) -> bool:
        if other is None:
            return False
        # Half-open: touching endpoints do not overlap.
        return self.start_time < other.end_time and other.start_time < self.end_time

    def describe(self) -> str:
        return "\n".join(
            [
                f"{self.category.label.upper()} TASK:",
                f"  Name: {self.name}",
                f"  Time: {self.time_range}",
                f"  Duration: {self.duration_minutes} minutes",
                f"  Description: {self.category.description}",
            ]
        )

    def __str__(self) -> str:
        return f"{self.category.label}: {self.name} ({self.time_range}) [{self.duration_minutes} min]"
