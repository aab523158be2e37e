"""
Tests untuk deferred callback scheduler
"""

from rkena_mma.core.scheduler import Scheduler


def test_callback_fires_once_when_due():
    scheduler = Scheduler()
    calls = []
    scheduler.call_later(100, lambda: calls.append('done'))

    assert scheduler.advance(50) == 0
    assert scheduler.advance(50) == 1
    assert scheduler.advance(500) == 0
    assert calls == ['done']


def test_callbacks_fire_in_due_order():
    scheduler = Scheduler()
    calls = []
    scheduler.call_later(300, lambda: calls.append('late'))
    scheduler.call_later(100, lambda: calls.append('early'))

    scheduler.advance(1000)

    assert calls == ['early', 'late']


def test_zero_delay_fires_on_next_advance():
    scheduler = Scheduler()
    calls = []
    scheduler.call_later(0, lambda: calls.append(1))

    assert calls == []
    assert scheduler.advance(0) == 1
    assert calls == [1]


def test_clear_drops_pending_callbacks():
    scheduler = Scheduler()
    calls = []
    scheduler.call_later(100, lambda: calls.append('stale'))

    scheduler.clear()
    scheduler.advance(1000)

    assert calls == []
    assert scheduler.generation == 1


def test_callback_added_after_clear_still_runs():
    scheduler = Scheduler()
    calls = []
    scheduler.clear()
    scheduler.call_later(10, lambda: calls.append('fresh'))

    scheduler.advance(10)

    assert calls == ['fresh']
