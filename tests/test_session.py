import pytest

from app.core.session import AuthEvent, SessionEvents


def test_listeners_are_notified_in_order():
    events = SessionEvents()
    seen = []
    events.subscribe(lambda change: seen.append(("first", change.event)))
    events.subscribe(lambda change: seen.append(("second", change.event)))

    change = events.emit(AuthEvent.SIGNED_IN, 7)

    assert change.user_id == 7
    assert seen == [("first", AuthEvent.SIGNED_IN), ("second", AuthEvent.SIGNED_IN)]


def test_failing_listener_does_not_stop_others():
    events = SessionEvents()
    seen = []

    def broken(change):
        raise ValueError("boom")

    events.subscribe(broken)
    events.subscribe(seen.append)
    events.emit(AuthEvent.TOKEN_REFRESHED, 1)

    assert len(seen) == 1


def test_unsubscribe():
    events = SessionEvents()
    seen = []
    unsubscribe = events.subscribe(seen.append)
    unsubscribe()
    unsubscribe()

    events.emit(AuthEvent.SIGNED_OUT, 1)
    assert seen == []
    assert events.listener_count == 0


def test_teardown_makes_events_inert():
    events = SessionEvents()
    seen = []
    events.subscribe(seen.append)
    events.teardown()

    assert events.closed
    assert events.emit(AuthEvent.USER_UPDATED, 1) is None
    assert seen == []
    with pytest.raises(RuntimeError):
        events.subscribe(seen.append)
