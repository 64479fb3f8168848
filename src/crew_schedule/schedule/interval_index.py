# src/crew_schedule/schedule/interval_index.py

"""
Ordered set of non-overlapping tasks.

Invariants kept by every mutation:
- tasks are sorted by start_time (equal starts keep insertion order),
- no two stored tasks overlap under the half-open test,
- no two stored tasks share a case-insensitive name.

Because stored intervals never overlap, end times are sorted as well. Conflict
detection bisects the end times: the first stored task ending after the new
start is the only candidate a start-ordered linear scan could hit first, and it
conflicts iff it starts before the new end.

Thread-safety:
- mutations are serialized by a lock and publish a fresh immutable snapshot,
- readers grab the current snapshot without locking.
"""

from __future__ import annotations

import bisect
import logging
import threading
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import time
from typing import NamedTuple

from .models import Task

logger = logging.getLogger(__name__)


class InsertResult(NamedTuple):
    ok: bool
    conflict: Task | None = None
    duplicate: bool = False


@dataclass(frozen=True, slots=True)
class _Snapshot:
    tasks: tuple[Task, ...] = ()
    starts: tuple[time, ...] = ()
    ends: tuple[time, ...] = ()
    by_key: dict[str, Task] = field(default_factory=dict)


def _normalize(name: str | None) -> str:
    return (name or "").strip().casefold()


class IntervalIndex:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._snap = _Snapshot()

    # ---- reads (lock-free) ----

    def list(self) -> tuple[Task, ...]:
        return self._snap.tasks

    def count(self) -> int:
        return len(self._snap.tasks)

    def has(self, name: str | None) -> bool:
        return _normalize(name) in self._snap.by_key

    def find(self, name: str | None) -> Task | None:
        return self._snap.by_key.get(_normalize(name))

    def find_conflict(self, task: Task) -> Task | None:
        """Return the earliest-starting stored task that overlaps `task`, if any."""
        return self._conflict_in(self._snap, task)

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[Task]:
        return iter(self._snap.tasks)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    # ---- mutations ----

    def insert(self, task: Task) -> InsertResult:
        with self._lock:
            snap = self._snap

            existing = snap.by_key.get(task.key)
            if existing is not None:
                return InsertResult(ok=False, conflict=existing, duplicate=True)

            witness = self._conflict_in(snap, task)
            if witness is not None:
                return InsertResult(ok=False, conflict=witness)

            pos = bisect.bisect_right(snap.starts, task.start_time)
            by_key = dict(snap.by_key)
            by_key[task.key] = task
            self._snap = _Snapshot(
                tasks=snap.tasks[:pos] + (task,) + snap.tasks[pos:],
                starts=snap.starts[:pos] + (task.start_time,) + snap.starts[pos:],
                ends=snap.ends[:pos] + (task.end_time,) + snap.ends[pos:],
                by_key=by_key,
            )

        logger.debug("Indexed task %s at position %d", task.name, pos)
        return InsertResult(ok=True)

    def remove(self, name: str | None) -> bool:
        key = _normalize(name)
        if not key:
            return False

        with self._lock:
            snap = self._snap
            target = snap.by_key.get(key)
            if target is None:
                return False

            pos = next(i for i, t in enumerate(snap.tasks) if t is target)
            by_key = dict(snap.by_key)
            del by_key[key]
            self._snap = _Snapshot(
                tasks=snap.tasks[:pos] + snap.tasks[pos + 1 :],
                starts=snap.starts[:pos] + snap.starts[pos + 1 :],
                ends=snap.ends[:pos] + snap.ends[pos + 1 :],
                by_key=by_key,
            )

        logger.debug("Unindexed task %s", target.name)
        return True

    @staticmethod
    def _conflict_in(snap: _Snapshot, task: Task) -> Task | None:
        i = bisect.bisect_right(snap.ends, task.start_time)
        if i < len(snap.tasks) and snap.starts[i] < task.end_time:
            return snap.tasks[i]
        return None
