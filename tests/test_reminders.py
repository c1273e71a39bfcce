"""Tests for the recurring reminder task."""

import threading

import pytest

from buddybot.reminders import HYDRATION_MESSAGE, HydrationReminder, RecurringTask


def test_interval_must_be_positive():
    with pytest.raises(ValueError):
        RecurringTask(0, lambda: None)


def test_task_ticks_until_stopped():
    fired = threading.Event()
    task = RecurringTask(0.01, fired.set)

    task.start()
    assert task.running
    assert fired.wait(2.0)
    task.stop()

    assert not task.running
    ticks = task.ticks
    assert ticks >= 1
    # no further ticks after stop
    threading.Event().wait(0.05)
    assert task.ticks == ticks


def test_stop_is_idempotent():
    task = RecurringTask(60, lambda: None)

    task.stop()
    task.start()
    task.stop()
    task.stop()

    assert not task.running


def test_start_twice_keeps_one_thread():
    task = RecurringTask(60, lambda: None)
    task.start()
    first_thread = task._thread
    task.start()

    assert task._thread is first_thread
    task.stop()


def test_task_can_restart():
    task = RecurringTask(60, lambda: None)
    task.start()
    task.stop()
    task.start()

    assert task.running
    task.stop()


def test_callback_errors_do_not_stop_the_task():
    calls = []
    second_call = threading.Event()

    def flaky():
        calls.append(1)
        if len(calls) == 1:
            raise RuntimeError("first tick fails")
        second_call.set()

    task = RecurringTask(0.01, flaky)
    task.start()
    try:
        assert second_call.wait(2.0)
    finally:
        task.stop()


def test_hydration_reminder_sends_message():
    received = []
    got_message = threading.Event()

    def notify(message):
        received.append(message)
        got_message.set()

    reminder = HydrationReminder(notify, minutes=0.0002)
    reminder.start()
    try:
        assert got_message.wait(2.0)
    finally:
        reminder.stop()

    assert received[0] == HYDRATION_MESSAGE


def test_hydration_interval_in_seconds():
    assert HydrationReminder(lambda m: None, minutes=30).interval == 1800.0
