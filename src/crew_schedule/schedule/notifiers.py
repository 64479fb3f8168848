# src/crew_schedule/schedule/notifiers.py

from __future__ import annotations

import logging

from ..core.ports import Emitter
from .errors import ValidationError

logger = logging.getLogger(__name__)


def print_line(text: str) -> None:
    print(text, flush=True)


class ConflictNotifier:
    """
    Console-facing conflict subscriber.

    Renders a conflict banner through `emit` and logs the conflict as a warning.
    """

    def __init__(self, observer_id: str, emit: Emitter | None = None) -> None:
        if not isinstance(observer_id, str) or not observer_id.strip():
            raise ValidationError("Observer ID cannot be empty")
        self._observer_id = observer_id.strip()
        self._emit = emit or print_line
        logger.debug("ConflictNotifier created: %s", self._observer_id)

    @property
    def observer_id(self) -> str:
        return self._observer_id

    def update(self, message: str) -> None:
        if not message or not message.strip():
            logger.warning("Received empty conflict notification")
            return

        self._emit(
            "\n".join(
                [
                    "",
                    "*** SCHEDULE CONFLICT DETECTED ***",
                    f"Notifier: {self._observer_id}",
                    f"Message: {message}",
                    "Action: Task was NOT added to schedule",
                    "*********************************",
                ]
            )
        )
        logger.warning("Schedule conflict detected (%s): %s", self._observer_id, message)

    def __repr__(self) -> str:
        return f"ConflictNotifier(id={self._observer_id!r})"
