# tests/conftest.py

from __future__ import annotations

from types import SimpleNamespace

import pytest

from crew_schedule.cli.bootstrap import create_initial_state
from crew_schedule.core.state import AppState
from crew_schedule.schedule.service import ScheduleService


@pytest.fixture()
def settings() -> SimpleNamespace:
    """
    Minimal settings object compatible with the bootstrap code.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the developer's environment.
    """
    return SimpleNamespace(
        app_name="crew-test",
        log_level="DEBUG",
        console_enabled=True,
        observer_ids=["Mission Control"],
        time_format="%H:%M",
    )


@pytest.fixture()
def service() -> ScheduleService:
    # A private instance; the process-wide one is left untouched.
    return ScheduleService()


@pytest.fixture()
def emitted() -> list[str]:
    return []


@pytest.fixture()
def state(settings: SimpleNamespace, service: ScheduleService, emitted: list[str]) -> AppState:
    return create_initial_state(settings=settings, service=service, emit=emitted.append)
