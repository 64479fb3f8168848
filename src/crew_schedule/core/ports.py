# src/crew_schedule/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the scheduling core.

The core depends on Protocols instead of concrete implementations, so the
console notifier, test doubles or any future transport can subscribe to
conflicts without the core importing them.
"""

from collections.abc import Callable
from typing import Protocol, runtime_checkable

Emitter = Callable[[str], None]
# Where user-visible text goes (console print, test buffer, ...).


@runtime_checkable
class ConflictSubscriber(Protocol):
    """Party notified when an insertion is rejected because of an overlap."""

    @property
    def observer_id(self) -> str: ...

    def update(self, message: str) -> None: ...
