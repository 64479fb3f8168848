# tests/test_broadcaster.py

from __future__ import annotations

import pytest

from crew_schedule.schedule.broadcaster import ConflictBroadcaster
from crew_schedule.schedule.errors import PartialDeliveryFailure, ValidationError

from .fakes import FailingSubscriber, HookSubscriber, RecordingSubscriber


def test_notify_reaches_every_subscriber_in_order() -> None:
    broadcaster = ConflictBroadcaster()
    order: list[str] = []

    subs = [HookSubscriber(f"s{i}", hook=lambda i=i: order.append(f"s{i}")) for i in range(4)]
    for s in subs:
        assert broadcaster.subscribe(s)

    report = broadcaster.notify("conflict!")
    assert order == ["s0", "s1", "s2", "s3"]
    assert report.attempted == 4
    assert report.delivered == 4
    assert report.ok
    assert report.error is None


def test_failing_subscriber_does_not_stop_broadcast() -> None:
    broadcaster = ConflictBroadcaster()
    first = RecordingSubscriber("first")
    broken = FailingSubscriber("broken")
    last = RecordingSubscriber("last")
    for s in (first, broken, last):
        broadcaster.subscribe(s)

    report = broadcaster.notify("overlap")

    assert first.messages == ["overlap"]
    assert broken.calls == 1
    assert last.messages == ["overlap"]
    assert report.attempted == 3
    assert report.delivered == 2
    assert [oid for oid, _ in report.failures] == ["broken"]

    err = report.error
    assert isinstance(err, PartialDeliveryFailure)
    assert (err.failed, err.total) == (1, 3)
    assert "1 of 3" in str(err)


def test_notify_without_subscribers_is_silent() -> None:
    report = ConflictBroadcaster().notify("nobody listens")
    assert report.attempted == 0
    assert report.ok


def test_subscribe_is_idempotent_by_observer_id() -> None:
    broadcaster = ConflictBroadcaster()
    assert broadcaster.subscribe(RecordingSubscriber("Mission Control"))
    assert not broadcaster.subscribe(RecordingSubscriber("Mission Control"))
    assert not broadcaster.subscribe(RecordingSubscriber(" Mission Control "))
    assert broadcaster.count() == 1


def test_subscribe_rejects_missing_ids() -> None:
    broadcaster = ConflictBroadcaster()
    with pytest.raises(ValidationError):
        broadcaster.subscribe(RecordingSubscriber("  "))
    with pytest.raises(ValidationError):
        broadcaster.subscribe(None)  # type: ignore[arg-type]
    assert len(broadcaster) == 0


def test_unsubscribe_by_identity() -> None:
    broadcaster = ConflictBroadcaster()
    sub = RecordingSubscriber("crew")
    broadcaster.subscribe(sub)

    assert not broadcaster.unsubscribe(RecordingSubscriber("crew"))
    assert broadcaster.unsubscribe(sub)
    assert not broadcaster.unsubscribe(sub)
    assert broadcaster.count() == 0


def test_registry_changes_during_notify_do_not_affect_current_broadcast() -> None:
    broadcaster = ConflictBroadcaster()
    late = RecordingSubscriber("late")
    tail = RecordingSubscriber("tail")

    def mutate() -> None:
        broadcaster.subscribe(late)
        broadcaster.unsubscribe(tail)

    hook = HookSubscriber("hook", hook=mutate)
    broadcaster.subscribe(hook)
    broadcaster.subscribe(tail)

    report = broadcaster.notify("first")
    assert report.attempted == 2
    assert tail.messages == ["first"]
    assert late.messages == []

    broadcaster.notify("second")
    assert late.messages == ["second"]
    assert tail.messages == ["first"]
    assert [s.observer_id for s in broadcaster.subscribers()] == ["hook", "late"]
