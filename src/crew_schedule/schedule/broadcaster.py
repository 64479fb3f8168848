# src/crew_schedule/schedule/broadcaster.py

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass

from ..core.ports import ConflictSubscriber
from .errors import PartialDeliveryFailure, ValidationError

logger = logging.getLogger(__name__)


def _observer_id(subscriber: ConflictSubscriber) -> str:
    return str(getattr(subscriber, "observer_id", "") or "").strip()


@dataclass(frozen=True, slots=True)
class DeliveryReport:
    """
    Outcome of one broadcast.

    `error` is set when at least one subscriber raised; it is advisory and is
    never raised by the broadcaster itself.
    """

    message: str
    attempted: int
    delivered: int
    failures: tuple[tuple[str, Exception], ...] = ()

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def error(self) -> PartialDeliveryFailure | None:
        if not self.failures:
            return None
        return PartialDeliveryFailure(len(self.failures), self.attempted)


class ConflictBroadcaster:
    """
    Fan-out notifier for schedule conflicts.

    The registry is a tuple replaced on every change (copy-on-write), so a
    notify() in progress keeps iterating the snapshot it started with even if
    observers are added or removed concurrently.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._subscribers: tuple[ConflictSubscriber, ...] = ()

    def subscribe(self, subscriber: ConflictSubscriber) -> bool:
        if subscriber is None:
            raise ValidationError("Observer cannot be empty")
        observer_id = _observer_id(subscriber)
        if not observer_id:
            raise ValidationError("Observer ID cannot be empty")

        with self._lock:
            if any(_observer_id(s) == observer_id for s in self._subscribers):
                logger.info("Observer %s is already registered", observer_id)
                return False
            self._subscribers = self._subscribers + (subscriber,)
            total = len(self._subscribers)

        logger.info("Observer registered: %s (total observers: %d)", observer_id, total)
        return True

    def unsubscribe(self, subscriber: ConflictSubscriber) -> bool:
        with self._lock:
            remaining = tuple(s for s in self._subscribers if s is not subscriber)
            removed = len(remaining) != len(self._subscribers)
            self._subscribers = remaining

        observer_id = _observer_id(subscriber) or "?"
        if removed:
            logger.info("Observer removed: %s (remaining observers: %d)", observer_id, len(remaining))
        else:
            logger.info("Observer not found for removal: %s", observer_id)
        return removed

    def subscribers(self) -> tuple[ConflictSubscriber, ...]:
        return self._subscribers

    def count(self) -> int:
        return len(self._subscribers)

    def __len__(self) -> int:
        return self.count()

    def notify(self, message: str) -> DeliveryReport:
        snapshot = self._subscribers
        if not snapshot:
            logger.debug("No observers to notify about conflict")
            return DeliveryReport(message=message, attempted=0, delivered=0)

        logger.info("Notifying %d observers about schedule conflict", len(snapshot))

        failures: list[tuple[str, Exception]] = []
        for subscriber in snapshot:
            observer_id = _observer_id(subscriber) or "?"
            try:
                subscriber.update(message)
            except Exception as e:
                logger.exception("Failed to notify observer %s", observer_id)
                failures.append((observer_id, e))

        return DeliveryReport(
            message=message,
            attempted=len(snapshot),
            delivered=len(snapshot) - len(failures),
            failures=tuple(failures),
        )
