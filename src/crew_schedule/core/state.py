# src/crew_schedule/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..schedule.factory import TaskFactory
from ..schedule.notifiers import ConflictNotifier, print_line
from ..schedule.service import ScheduleService
from .ports import Emitter


@dataclass
class AppState:
    # Settings object (real Settings or a test double with the same attributes).
    settings: object

    service: ScheduleService
    factory: TaskFactory

    notifiers: list[ConflictNotifier] = field(default_factory=list)
    emit: Emitter = print_line
