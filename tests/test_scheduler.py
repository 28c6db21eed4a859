"""Tests for the cooperative timer queue."""

from shake_listener.utils.scheduler import TimerQueue


def test_runs_due_callbacks_in_deadline_order(clock):
    calls = []
    clock.queue.call_later(0.3, lambda: calls.append('late'))
    clock.queue.call_later(0.1, lambda: calls.append('early'))
    clock.queue.call_later(0.1, lambda: calls.append('early-second'))

    assert clock.advance(0.05) == 0
    assert clock.advance(0.1) == 2
    assert calls == ['early', 'early-second']

    assert clock.advance(1.0) == 1
    assert calls == ['early', 'early-second', 'late']


def test_cancelled_callbacks_do_not_run(clock):
    calls = []
    handle = clock.queue.call_later(0.1, lambda: calls.append('a'))
    clock.queue.call_later(0.2, lambda: calls.append('b'))
    handle.cancel()

    assert clock.queue.pending == 1
    assert clock.queue.next_deadline() == 0.2
    clock.advance(1.0)
    assert calls == ['b']
    assert clock.queue.next_deadline() is None


def test_explicit_now_and_clear():
    calls = []
    queue = TimerQueue(clock=lambda: 10.0)
    queue.call_later(1.0, lambda: calls.append('a'))
    queue.call_later(-5.0, lambda: calls.append('now'))

    assert queue.run_due(now=10.0) == 1
    assert calls == ['now']

    queue.clear()
    assert queue.pending == 0
    assert queue.run_due(now=100.0) == 0
