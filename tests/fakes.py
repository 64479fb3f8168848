# tests/fakes.py

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import time

from crew_schedule.schedule.models import Task, TaskCategory


def hm(value: str) -> time:
    hours, minutes = value.split(":")
    return time(int(hours), int(minutes))


def make_task(name: str, start: str, end: str, category: TaskCategory = TaskCategory.RESEARCH) -> Task:
    return Task(name=name, start_time=hm(start), end_time=hm(end), category=category)


@dataclass(eq=False)
class RecordingSubscriber:
    """
    Conflict subscriber that records every message it receives.
    """

    observer_id: str
    messages: list[str] = field(default_factory=list)

    def update(self, message: str) -> None:
        self.messages.append(message)


@dataclass(eq=False)
class FailingSubscriber:
    """
    Conflict subscriber whose delivery always fails; still counts attempts.
    """

    observer_id: str
    calls: int = 0

    def update(self, message: str) -> None:
        self.calls += 1
        raise RuntimeError(f"{self.observer_id} is offline")


@dataclass(eq=False)
class HookSubscriber:
    """
    Conflict subscriber that runs a callback on delivery (e.g. mutating the
    registry mid-broadcast).
    """

    observer_id: str
    hook: Callable[[], None]
    calls: int = 0

    def update(self, message: str) -> None:
        self.calls += 1
        self.hook()
