# tests/test_task_factory.py

from __future__ import annotations

from datetime import time

import pytest

from crew_schedule.schedule.errors import ValidationError
from crew_schedule.schedule.factory import TaskFactory
from crew_schedule.schedule.models import TaskCategory


def test_create_task_from_strings() -> None:
    factory = TaskFactory()
    task = factory.create_task("exercise", "Morning run", "07:00", "07:45")
    assert task.category is TaskCategory.EXERCISE
    assert task.start_time == time(7, 0)
    assert task.end_time == time(7, 45)


def test_create_task_accepts_typed_values() -> None:
    task = TaskFactory().create_task(TaskCategory.MAINTENANCE, "CO2 scrubber", time(13), time(14))
    assert task.category is TaskCategory.MAINTENANCE


@pytest.mark.parametrize(
    "category,start,end",
    [
        ("sleep", "09:00", "10:00"),
        ("", "09:00", "10:00"),
        (None, "09:00", "10:00"),
        ("research", "9am", "10:00"),
        ("research", "09:00", "25:00"),
        ("research", "10:00", "09:00"),
        ("research", None, "09:00"),
    ],
)
def test_create_task_errors_are_validation_errors(category, start, end) -> None:
    with pytest.raises(ValidationError):
        TaskFactory().create_task(category, "Sample", start, end)


def test_custom_time_format() -> None:
    factory = TaskFactory(time_format="%H.%M")
    task = factory.create_task("research", "Samples", "09.30", "10.15")
    assert task.time_range == "09:30 - 10:15"
    with pytest.raises(ValidationError, match="%H.%M"):
        factory.parse_time("09:30")


def test_category_listing() -> None:
    assert TaskFactory.category_names() == ["RESEARCH", "EXERCISE", "MAINTENANCE"]
    assert TaskFactory.available_categories()[0] is TaskCategory.RESEARCH
