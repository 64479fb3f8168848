# src/crew_schedule/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- picks the shared ScheduleService (or an injected one),
- registers one ConflictNotifier per configured observer id.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import Emitter
from ..core.state import AppState
from ..schedule.factory import TaskFactory
from ..schedule.notifiers import ConflictNotifier, print_line
from ..schedule.service import ScheduleService

logger = logging.getLogger(__name__)


def create_initial_state(
    *,
    settings=None,
    service: ScheduleService | None = None,
    emit: Emitter | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings and service injectable makes the app easier to test.
    If settings is None, falls back to get_settings(); if service is None, the
    process-wide ScheduleService is used.
    """
    if settings is None:
        settings = get_settings()
    if service is None:
        service = ScheduleService.instance()
    emit = emit or print_line

    factory = TaskFactory(time_format=getattr(settings, "time_format", "%H:%M"))

    notifiers: list[ConflictNotifier] = []
    for observer_id in list(getattr(settings, "observer_ids", []) or []):
        notifier = ConflictNotifier(observer_id, emit=emit)
        if service.add_observer(notifier):
            notifiers.append(notifier)

    logger.info(
        "Schedule organizer initialized (observers=%d, tasks=%d)",
        service.observer_count(),
        service.task_count(),
    )
    return AppState(settings=settings, service=service, factory=factory, notifiers=notifiers, emit=emit)
